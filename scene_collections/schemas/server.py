"""Schemas for the remote scene collections API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ServerSceneCollection(BaseModel):
    """A scene collection as listed by the server."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str


class SceneCollectionsResponse(BaseModel):
    """Response listing every scene collection on the user's account."""

    data: list[ServerSceneCollection] = Field(default_factory=list)
