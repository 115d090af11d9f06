from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from ..core.enums import ErrorCode
from .responses import HeaderDto

_REQUIRED_TYPES = {"missing", "string_too_short", "none_required"}
_TOO_LONG_TYPES = {"string_too_long", "too_long"}


def error_code_for(exc: PydanticValidationError) -> ErrorCode:
    """Map the first pydantic error to the matching ``ErrorCode``."""

    errors = exc.errors()
    if not errors:
        return ErrorCode.UNKNOWN_ERROR

    kind = errors[0].get("type", "")
    if kind in _REQUIRED_TYPES:
        return ErrorCode.REQUIRED_FIELD
    if kind in _TOO_LONG_TYPES:
        return ErrorCode.EXCEEDS_MAX_LENGTH
    return ErrorCode.UNKNOWN_ERROR


def header_for(exc: PydanticValidationError) -> HeaderDto:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field_name = ".".join(str(p) for p in first.get("loc", ())) or "request"
        message = f"{field_name}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return HeaderDto(code=error_code_for(exc).code, message=message)
