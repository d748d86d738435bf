"""
Extensions: open-ended IRI-keyed data attached to definitions, results and contexts.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .errors import InvalidArgumentError, NullArgumentError
from .utils import is_absolute_iri


def is_json_value(value: Any) -> bool:
    """Return True if value is made only of JSON scalars, lists/tuples and str-keyed mappings."""
    if value is None or isinstance(value, (str, bool, int)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, (list, tuple)):
        return all(is_json_value(item) for item in value)
    if isinstance(value, Mapping):
        return all(isinstance(key, str) and is_json_value(item) for key, item in value.items())
    return False


def _freeze(value: Any) -> Any:
    # hashable view of a JSON value
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Mapping):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    return value


class Extensions(Mapping[str, Any]):
    """An ordered, immutable mapping from IRI to a JSON value.

    An empty collection is rejected: leave the owning field as None instead,
    so that "no extensions" has exactly one representation. Values must be
    JSON-ready (see ``is_json_value``).
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any] | Iterable[tuple[str, Any]], param_name: str = "extensions"):
        if entries is None:
            raise NullArgumentError(param_name)
        pairs = list(entries.items()) if isinstance(entries, Mapping) else list(entries)
        if not pairs:
            raise InvalidArgumentError(param_name, "cannot be empty; omit the argument instead")

        mapping: dict[str, Any] = {}
        for key, value in pairs:
            if not is_absolute_iri(key):
                raise InvalidArgumentError(param_name, f"extension key {key!r} is not an absolute IRI")
            if not is_json_value(value):
                raise InvalidArgumentError(param_name, f"value for {key!r} is not JSON-serializable: {value!r}")
            mapping[key] = value
        self._entries = mapping

    @classmethod
    def coerce(
        cls, value: Extensions | Mapping[str, Any] | Iterable[tuple[str, Any]] | None, param_name: str = "extensions"
    ) -> Extensions | None:
        """Wrap plain mappings or pair lists; pass Extensions and None through."""
        if value is None or isinstance(value, Extensions):
            return value
        return cls(value, param_name)

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(_freeze(self._entries))

    def __repr__(self) -> str:
        return f"Extensions({self._entries!r})"
