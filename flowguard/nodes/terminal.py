"""Start and End nodes carry nothing configurable and are always valid."""
from __future__ import annotations

from typing import Any

from flowguard.core.node import BaseNodeValidator
from flowguard.models.graph import NodeKind
from flowguard.models.validation import ValidationError


class StartValidator(BaseNodeValidator[Any]):
    kind = NodeKind.START

    def check(self, payload: Any) -> list[ValidationError]:
        return []


class EndValidator(BaseNodeValidator[Any]):
    kind = NodeKind.END

    def check(self, payload: Any) -> list[ValidationError]:
        return []
