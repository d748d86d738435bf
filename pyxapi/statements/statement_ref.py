"""
Statement references and UUID handling.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from ..errors import InvalidArgumentError, NullArgumentError


def coerce_uuid(value: uuid.UUID | str | None, param_name: str, is_required: bool = True) -> uuid.UUID | None:
    """Accept a UUID or its string form, raising the matching argument error otherwise."""
    if value is None:
        if is_required:
            raise NullArgumentError(param_name)
        return None
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        try:
            return uuid.UUID(value)
        except ValueError:
            raise InvalidArgumentError(param_name, f"{value!r} is not a UUID") from None
    raise InvalidArgumentError(param_name, f"must be a UUID, got {type(value).__name__}")


@dataclass(frozen=True)
class StatementRef:
    """A pointer to another, previously stored Statement."""

    id: uuid.UUID

    def __post_init__(self):
        object.__setattr__(self, "id", coerce_uuid(self.id, "id"))
