"""
Conversion of Pydantic validation failures into a flat error list.

Works on both ``pydantic.ValidationError`` and FastAPI's
``RequestValidationError`` so it can be used outside the HTTP layer.
"""
from typing import Any, Iterable, Protocol

from ridehail.schemas.base import FieldError

# Request locations that are not part of the field path
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


class _HasErrors(Protocol):
    def errors(self) -> Iterable[dict[str, Any]]: ...


def _field_path(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "__root__"


def _clean_message(msg: str) -> str:
    # Pydantic prefixes messages raised from custom validators
    for prefix in ("Value error, ", "Assertion failed, "):
        if msg.startswith(prefix):
            return msg[len(prefix):]
    return msg


def collect_errors(exc: _HasErrors) -> list[FieldError]:
    """Return one ``FieldError`` per failed constraint, in input order."""
    return [
        FieldError(field=_field_path(err.get("loc", ())), message=_clean_message(err.get("msg", "")))
        for err in exc.errors()
    ]
