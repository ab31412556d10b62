from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from flowguard.models.validation import ValidationError, ValidationResult

TPayload = TypeVar("TPayload")


def payload_errors(exc: PydanticValidationError) -> list[ValidationError]:
    """Report payload parse failures as rule errors keyed by field location."""
    errors = []
    for detail in exc.errors():
        loc = "-".join(str(part) for part in detail["loc"]) or "payload"
        errors.append(ValidationError(id=loc, message=detail["msg"]))
    return errors


def clear_invalid(raw: Any, exc: PydanticValidationError) -> Any:
    """Return a copy of ``raw`` with every value that failed to parse set to None."""
    data = copy.deepcopy(raw)
    for detail in exc.errors():
        *parents, leaf = detail["loc"] or (None,)
        if leaf is None:
            return {}
        target = data
        try:
            for part in parents:
                target = target[part]
            target[leaf] = None
        except (KeyError, IndexError, TypeError):
            continue
    return data


class BaseNodeValidator(ABC, Generic[TPayload]):
    """Checks one node kind's own configuration, never graph topology."""

    kind: ClassVar[str]
    payload_model: ClassVar[type[BaseModel] | None] = None

    def parse_payload(self, raw: dict[str, Any] | BaseModel | None) -> TPayload:
        if raw is None:
            raw = {}
        if self.payload_model is None or isinstance(raw, self.payload_model):
            return raw
        return self.payload_model.model_validate(raw)

    def validate(self, raw: dict[str, Any] | BaseModel | None) -> ValidationResult:
        """Run every rule on ``raw``.

        Values that fail to parse are reported under their location and
        cleared, and the rules then run on what is left.
        """
        try:
            payload = self.parse_payload(raw)
        except PydanticValidationError as exc:
            errors = payload_errors(exc)
            try:
                payload = self.parse_payload(clear_invalid(raw, exc))
            except PydanticValidationError:
                return ValidationResult(errors=errors)
        else:
            errors = []
        return ValidationResult(errors=errors + self.check(payload))

    @abstractmethod
    def check(self, payload: TPayload) -> list[ValidationError]:
        """Return every failed rule for ``payload`` without short-circuiting."""
        ...


class ValidatorRegistry:
    def __init__(self) -> None:
        self._registry: dict[str, type[BaseNodeValidator]] = {}

    def register(self, validator_cls: type[BaseNodeValidator]) -> None:
        kind = validator_cls.kind
        if kind in self._registry:
            raise ValueError(f"Validator for node kind '{kind}' already registered")
        self._registry[kind] = validator_cls

    def find(self, kind: str) -> type[BaseNodeValidator] | None:
        return self._registry.get(kind)

    def list_kinds(self) -> list[str]:
        return [str(kind) for kind in self._registry]

    def ensure_complete(self, kinds: Iterable[str]) -> None:
        """Raise if any of ``kinds`` has no registered validator."""
        missing = [k for k in kinds if k not in self._registry]
        if missing:
            raise ValueError(f"No validator registered for node kinds: {missing}")
