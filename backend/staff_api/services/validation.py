"""
Field validation for staff payloads.

Both entry points take the raw JSON body, check it against the staff
schemas and stop at the first problem found, so the client always gets a
single readable message.
"""
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from staff_api.core.exceptions import ValidationError
from staff_api.schemas.staff import STAFF_FIELDS, StaffCreateIn, StaffUpdateIn


def _first_message(exc: PydanticValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err["loc"])
    msg = err["msg"]
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f"{loc}: {msg}" if loc else msg


def _require_object(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def validate_create(data: Any) -> StaffCreateIn:
    data = _require_object(data)
    try:
        return StaffCreateIn.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_first_message(exc))


def validate_update(data: Any) -> Dict[str, Any]:
    """Return only the fields that were supplied, already normalised."""
    data = _require_object(data)

    unknown = sorted(k for k in data if k not in STAFF_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}", error_code="UNKNOWN_FIELD")

    try:
        parsed = StaffUpdateIn.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_first_message(exc))
    return parsed.model_dump(exclude_unset=True)
