"""Pydantic models describing the Fly GraphQL API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FlyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GraphQLErrorPayload(FlyBaseModel):
    message: str
    path: list[str | int] | None = None


class GraphQLEnvelope(FlyBaseModel):
    data: dict[str, object] | None = None
    errors: list[GraphQLErrorPayload] | None = None


class OrganizationPayload(FlyBaseModel):
    id: str
    slug: str
    name: str | None = None
    type: str | None = None


class AppPayload(FlyBaseModel):
    id: str
    name: str
    organization: OrganizationPayload
    app_url: str | None = Field(default=None, alias="appUrl")
    hostname: str | None = None
    shared_ip_address: str | None = Field(default=None, alias="sharedIpAddress")


class OrganizationConnection(FlyBaseModel):
    nodes: list[OrganizationPayload] = Field(default_factory=list)


class OrganizationsData(FlyBaseModel):
    organizations: OrganizationConnection


class OrganizationData(FlyBaseModel):
    organization: OrganizationPayload | None = None


class AppData(FlyBaseModel):
    app: AppPayload | None = None


class CreateAppPayload(FlyBaseModel):
    app: AppPayload


class CreateAppData(FlyBaseModel):
    create_app: CreateAppPayload = Field(alias="createApp")


class DeleteAppPayload(FlyBaseModel):
    organization: OrganizationPayload | None = None


class DeleteAppData(FlyBaseModel):
    delete_app: DeleteAppPayload | None = Field(default=None, alias="deleteApp")
