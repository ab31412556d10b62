from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NodeKind(StrEnum):
    START = "start"
    FORM = "form"
    CONDITIONAL = "conditional"
    API = "api"
    END = "end"


class Node(BaseModel):
    """A node in an editor graph snapshot.

    ``kind`` stays a plain string so kinds this package does not know about
    still parse; ``data`` is the raw editor payload, interpreted per kind by
    the node validators.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    kind: str = Field(validation_alias=AliasChoices("kind", "type"))
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """customName, then label, then kind."""
        return (
            self.data.get("customName")
            or self.data.get("custom_name")
            or self.data.get("label")
            or self.kind
        )


class Edge(BaseModel):
    """A directed connection. ``source_handle`` names the outgoing port."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    source: str
    target: str
    source_handle: str | None = None
    label: str | None = None


class WorkflowSnapshot(BaseModel):
    """A saved or exported editor graph."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    timestamp: str | None = None
    version: int = 1
    metadata: dict[str, Any] | None = None
