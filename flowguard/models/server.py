from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from flowguard.models.graph import Edge, Node


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str


class KindListResponse(BaseModel):
    """Response listing the node kinds with a registered validator."""

    kinds: list[str]


class WorkflowValidationRequest(BaseModel):
    """A full graph snapshot to validate."""

    nodes: list[Node] = []
    edges: list[Edge] = []


class NodeValidationRequest(BaseModel):
    """A single node payload to validate."""

    kind: str = Field(validation_alias=AliasChoices("kind", "type"))
    data: dict[str, Any] = {}
