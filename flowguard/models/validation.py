from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class ValidationError(BaseModel):
    """A single failed rule. Data, never raised."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    message: str
    node_id: str | None = None
    type: Literal["error"] = "error"


class ValidationResult(BaseModel):
    """Aggregate outcome of one validation call."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    errors: list[ValidationError] = Field(default_factory=list)

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(errors=[])

    @classmethod
    def merge(cls, *results: ValidationResult) -> ValidationResult:
        """Concatenate errors from several results, preserving order."""
        errors: list[ValidationError] = []
        for result in results:
            errors.extend(result.errors)
        return cls(errors=errors)

    def error_ids(self) -> list[str]:
        return [e.id for e in self.errors]
