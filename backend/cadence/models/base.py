"""Shared pydantic base model and input coercion helpers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Record ids arrive as ints from the database and as strings from JSON forms.
RecordId = int | str


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the wire.

    Either spelling is accepted on input; dump with ``by_alias=True`` to
    produce the JSON shape callers expect.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def coerce_number(value: Any) -> float:
    """Parse a loosely-typed numeric input, treating junk as zero."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN
    if number != number:
        return 0.0
    return number


def same_id(left: RecordId | None, right: RecordId | None) -> bool:
    """Compare record ids regardless of int/str representation."""
    if left is None or right is None:
        return False
    return str(left) == str(right)
