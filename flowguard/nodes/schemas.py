from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ConditionalOperator = Literal[
    "equals", "not_equals", "is_empty", "greater_than", "less_than", "contains"
]
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

CONDITIONAL_OPERATORS: frozenset[str] = frozenset(get_args(ConditionalOperator))
HTTP_METHODS: tuple[str, ...] = get_args(HttpMethod)


class NodeData(BaseModel):
    """Base for node payloads.

    Only keys that a rule inspects are declared. Everything else the editor
    stores (labels, positions, field types, routes) is ignored, and every
    declared key is optional so a payload with a bad value can still be
    checked with that value cleared.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class FormField(NodeData):
    id: str | None = Field(default=None, description="Stable field identifier, used in error ids")
    name: str | None = Field(default=None, description="Machine name submitted with the form")
    label: str | None = Field(default=None, description="Human-readable field label")


class FormData(NodeData):
    custom_name: str | None = None
    fields: list[FormField | None] | None = None


class ConditionalData(NodeData):
    custom_name: str | None = None
    field_to_evaluate: str | None = None
    # Kept as text; unsupported operators are a rule failure, not a parse failure.
    operator: str | None = None
    value: str | None = None


class ApiData(NodeData):
    custom_name: str | None = None
    url: str | None = Field(default=None, description="Target URL for the HTTP request")
    method: str | None = Field(default=None, description="HTTP method")
