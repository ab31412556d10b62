from __future__ import annotations

from flowguard.core.node import BaseNodeValidator
from flowguard.models.graph import NodeKind
from flowguard.models.validation import ValidationError
from flowguard.nodes.rules import custom_name_errors, is_blank
from flowguard.nodes.schemas import CONDITIONAL_OPERATORS, ConditionalData

# Operators that compare against nothing and so take no value.
UNARY_OPERATORS = frozenset({"is_empty"})


class ConditionalValidator(BaseNodeValidator[ConditionalData]):
    kind = NodeKind.CONDITIONAL
    payload_model = ConditionalData

    def check(self, payload: ConditionalData) -> list[ValidationError]:
        errors = custom_name_errors(payload.custom_name)

        if is_blank(payload.field_to_evaluate):
            errors.append(
                ValidationError(id="fieldToEvaluate", message="Field to evaluate is required")
            )

        if not payload.operator:
            errors.append(ValidationError(id="operator", message="Operator is required"))
            return errors

        if payload.operator not in CONDITIONAL_OPERATORS:
            errors.append(
                ValidationError(
                    id="operator", message=f"Unsupported operator '{payload.operator}'"
                )
            )
        if payload.operator not in UNARY_OPERATORS and is_blank(payload.value):
            errors.append(
                ValidationError(id="value", message="Value is required for this operator")
            )

        return errors
