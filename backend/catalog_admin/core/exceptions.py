"""
Errors surfaced to the caller

ValidationFailed carries field-level messages keyed by field path
("name", "banners.0.id"). The JSON API answers it with 422, the web UI
redirects back and shows the messages on the next page.
"""
from typing import Dict, List, Iterable, Type, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)

# Location prefixes FastAPI adds to request validation errors
_LOCATION_ROOTS = ("body", "query", "path", "header", "cookie")

# Errors that belong to the request as a whole
ROOT_FIELD = "__root__"


class ValidationFailed(Exception):
    """One or more fields of the request are invalid"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(self.message)

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationFailed":
        return cls({field: [message]})

    @property
    def message(self) -> str:
        for messages in self.errors.values():
            if messages:
                return messages[0]
        return "The given data was invalid."


class LoginRequired(Exception):
    """Raised by web dependencies when there is no logged in user"""


def _field_path(loc: Iterable) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    # A body that is not a JSON object reports a character offset, not a field
    if not parts or not isinstance(parts[0], str):
        return ROOT_FIELD
    return ".".join(str(p) for p in parts)


def _humanize(field: str, error: dict) -> str:
    label = field.replace("_", " ")
    if field == ROOT_FIELD:
        return error.get("msg", "The given data was invalid.")
    if error.get("type") == "missing" or ("input" in error and error["input"] is None):
        return f"The {label} field is required."
    message = error.get("msg", "Invalid value")
    # pydantic prefixes custom validator messages
    return message.removeprefix("Value error, ")


def errors_from_pydantic(errors: Iterable[dict]) -> Dict[str, List[str]]:
    """
    Convert pydantic/FastAPI error lists to the field -> messages map

    Usage:
        raise ValidationFailed(errors_from_pydantic(exc.errors()))
    """
    result: Dict[str, List[str]] = {}
    for error in errors:
        field = _field_path(error.get("loc", ()))
        result.setdefault(field, []).append(_humanize(field, error))
    return result


def validate_form(schema: Type[T], **data) -> T:
    """
    Build a schema from submitted form fields

    Fields that were not submitted (None) stay unset, empty strings are
    submitted as None so optional fields can be cleared.

    Raises:
        ValidationFailed with the pydantic errors
    """
    cleaned = {k: (None if v == "" else v) for k, v in data.items() if v is not None}
    try:
        return schema(**cleaned)
    except ValidationError as e:
        raise ValidationFailed(errors_from_pydantic(e.errors()))
