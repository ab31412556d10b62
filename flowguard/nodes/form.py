from __future__ import annotations

from flowguard.core.node import BaseNodeValidator
from flowguard.models.graph import NodeKind
from flowguard.models.validation import ValidationError
from flowguard.nodes.rules import custom_name_errors, is_alphanumeric, is_blank
from flowguard.nodes.schemas import FormData, FormField

MIN_FIELD_NAME_LENGTH = 2
MIN_FIELD_LABEL_LENGTH = 2


class FormValidator(BaseNodeValidator[FormData]):
    kind = NodeKind.FORM
    payload_model = FormData

    def check(self, payload: FormData) -> list[ValidationError]:
        errors = custom_name_errors(payload.custom_name)
        for field in payload.fields or []:
            if field is not None:
                errors.extend(self._check_field(field))
        return errors

    def _check_field(self, field: FormField) -> list[ValidationError]:
        errors = []

        name_id = f"field-name-{field.id}"
        if is_blank(field.name):
            errors.append(ValidationError(id=name_id, message="Field name is required"))
        else:
            name = field.name.strip()
            if not is_alphanumeric(name) or len(name) < MIN_FIELD_NAME_LENGTH:
                errors.append(
                    ValidationError(
                        id=name_id,
                        message="Field name must be alphanumeric, min 2 characters",
                    )
                )

        label_id = f"field-label-{field.id}"
        if is_blank(field.label):
            errors.append(ValidationError(id=label_id, message="Field label is required"))
        elif len(field.label.strip()) < MIN_FIELD_LABEL_LENGTH:
            errors.append(
                ValidationError(
                    id=label_id,
                    message="Field label must be at least 2 characters long",
                )
            )

        return errors
