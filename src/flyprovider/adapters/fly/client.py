"""GraphQL client for the Fly API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from flyprovider.adapters.http_resilience import ResilientClient

from .schema import GraphQLEnvelope, GraphQLErrorPayload

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from flyprovider.config.fly import FlyConfig
    from flyprovider.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class FlyAPIError(RuntimeError):
    """Base class for errors raised by the Fly API client."""


class GraphQLResponseError(FlyAPIError):
    """Raised when the API answers with a non-empty ``errors`` list."""

    def __init__(self, errors: Sequence[tuple[str, str]]) -> None:
        self.errors = tuple(errors)
        lines = (f"{path}: {message}" if path else message for message, path in self.errors)
        super().__init__("\n".join(lines))


class GraphQLTransportError(FlyAPIError):
    """Raised when no decodable GraphQL response was received."""


def format_error_path(segments: Sequence[str | int] | None) -> str:
    """Join a GraphQL error path, e.g. ``["apps", 0, "name"]`` -> ``apps[0].name``."""

    if not segments:
        return ""
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)


def _response_errors(errors: list[GraphQLErrorPayload]) -> GraphQLResponseError:
    return GraphQLResponseError(
        [(error.message, format_error_path(error.path)) for error in errors]
    )


class FlyGraphQLClient:
    """Low-level client posting GraphQL documents to the Fly API."""

    def __init__(
        self,
        *,
        config: FlyConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient

    def execute(
        self,
        query: str,
        variables: Mapping[str, object] | None = None,
        *,
        mutation: bool = False,
    ) -> dict[str, object]:
        """Run ``query`` and return its ``data`` object.

        Mutations use the mutation resilience settings, which never resend a
        request the server may already have processed.
        """

        resilience = self._config.resilience_for(mutation=mutation)
        return asyncio.run(self._execute_async(resilience, query, variables))

    async def _execute_async(
        self,
        resilience: ResilienceConfig,
        query: str,
        variables: Mapping[str, object] | None,
    ) -> dict[str, object]:
        async with self._client_factory(resilience) as client:
            return await self._perform_request(
                client=client,
                base_url=resilience.base_url,
                query=query,
                variables=variables,
            )

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        base_url: str | None,
        query: str,
        variables: Mapping[str, object] | None,
    ) -> dict[str, object]:
        if base_url is None:
            raise GraphQLTransportError("Missing Fly API base_url in resilience configuration")

        body = {"query": query, "variables": dict(variables or {})}
        headers = {"Authorization": f"Bearer {self._config.api_token}"}
        try:
            response = await client.post(base_url, json=body, headers=headers)
        except httpx.HTTPError as exc:
            log.warning("Fly API request failed: %s", exc)
            raise GraphQLTransportError(f"Fly API request failed: {exc}") from exc

        envelope = self._decode(response)
        if envelope is not None and envelope.errors:
            raise _response_errors(envelope.errors)

        if response.is_error:
            raise GraphQLTransportError(
                f"Fly API returned error {response.status_code}: {response.text}"
            )
        if envelope is None or envelope.data is None:
            raise GraphQLTransportError("Unexpected Fly API response payload")
        return envelope.data

    @staticmethod
    def _decode(response: httpx.Response) -> GraphQLEnvelope | None:
        try:
            payload = response.json()
        except ValueError:
            return None
        if not isinstance(payload, dict):
            return None
        try:
            return GraphQLEnvelope.model_validate(payload)
        except ValidationError:
            log.debug("Fly API response is not a GraphQL envelope: %s", payload)
            return None
