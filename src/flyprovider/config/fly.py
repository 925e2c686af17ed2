"""Fly.io API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import httpx

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_FLY_API_URL = "https://api.fly.io/graphql"
FLY_TIMEOUT_SECONDS = 30.0

# A mutation is only resent when the server cannot have processed it.
MUTATION_RETRY_STATUSES = frozenset({429})
MUTATION_RETRY_EXCEPTIONS: tuple[type[httpx.HTTPError], ...] = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
)


def mutation_safe(resilience: ResilienceConfig) -> ResilienceConfig:
    """Derive the resilience settings used for non-idempotent mutations."""

    retry = replace(
        resilience.retry,
        status_forcelist=MUTATION_RETRY_STATUSES,
        retry_on_exceptions=MUTATION_RETRY_EXCEPTIONS,
    )
    return replace(resilience, name=f"{resilience.name}-mutations", retry=retry)


@dataclass(frozen=True, slots=True)
class FlyConfig:
    """Holds Fly GraphQL API configuration values."""

    api_token: str = field(repr=False)
    resilience: ResilienceConfig
    mutation_resilience: ResilienceConfig | None = None

    def resilience_for(self, *, mutation: bool) -> ResilienceConfig:
        if not mutation:
            return self.resilience
        return self.mutation_resilience or mutation_safe(self.resilience)


def get_fly_config(*, resilience: ResilienceConfig | None = None) -> FlyConfig:
    values = require_env_vars(("FLY_API_TOKEN",))
    api_url = optional_env_var("FLY_API_URL", DEFAULT_FLY_API_URL)
    effective = resilience or ResilienceConfig(
        name="fly",
        base_url=api_url,
        timeout_seconds=FLY_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={"Accept": "application/json"},
    )
    return FlyConfig(
        api_token=values["FLY_API_TOKEN"],
        resilience=effective,
        mutation_resilience=mutation_safe(effective),
    )
