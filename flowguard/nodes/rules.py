from __future__ import annotations

import re

from flowguard.models.validation import ValidationError

MIN_CUSTOM_NAME_LENGTH = 3

_HTTP_URL = re.compile(r"^https?://.+")
_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+$")


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def is_http_url(value: str) -> bool:
    return _HTTP_URL.match(value.strip()) is not None


def is_alphanumeric(value: str) -> bool:
    return _ALPHANUMERIC.match(value) is not None


def custom_name_errors(custom_name: str | None) -> list[ValidationError]:
    if custom_name is None or len(custom_name.strip()) < MIN_CUSTOM_NAME_LENGTH:
        return [
            ValidationError(
                id="customName",
                message="Custom name is required & must be at least 3 characters long",
            )
        ]
    return []
