from __future__ import annotations

from flowguard.core.node import BaseNodeValidator
from flowguard.models.graph import NodeKind
from flowguard.models.validation import ValidationError
from flowguard.nodes.rules import is_blank, is_http_url
from flowguard.nodes.schemas import HTTP_METHODS, ApiData


class ApiValidator(BaseNodeValidator[ApiData]):
    kind = NodeKind.API
    payload_model = ApiData

    def check(self, payload: ApiData) -> list[ValidationError]:
        errors = []

        if is_blank(payload.url):
            errors.append(ValidationError(id="url", message="URL is required"))
        elif not is_http_url(payload.url):
            errors.append(
                ValidationError(id="url", message="URL must start with http:// or https://")
            )

        if not payload.method:
            errors.append(ValidationError(id="method", message="HTTP method is required"))
        elif payload.method not in HTTP_METHODS:
            errors.append(
                ValidationError(
                    id="method",
                    message=f"Unsupported HTTP method '{payload.method}', "
                    f"expected one of {', '.join(HTTP_METHODS)}",
                )
            )

        return errors
