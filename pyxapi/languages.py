"""
Language maps: locale-dependent display text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping

from .errors import InvalidArgumentError, NullArgumentError

# RFC 5646 shape, loosely: primary subtag plus optional subtags
LANGUAGE_TAG_PATTERN = re.compile(r"[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*")

ENGLISH_US = "en-US"


def is_language_tag(value: object) -> bool:
    return isinstance(value, str) and LANGUAGE_TAG_PATTERN.fullmatch(value) is not None


class LanguageMap(Mapping[str, str]):
    """An ordered, immutable mapping from language tag to display string.

    Keys are unique per tag and must look like RFC 5646 language tags. The
    map must hold at least one entry.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]], param_name: str = "entries"):
        if entries is None:
            raise NullArgumentError(param_name)
        if isinstance(entries, (str, bytes)):
            raise InvalidArgumentError(param_name, "expected a mapping of language tag to text")
        pairs = list(entries.items()) if isinstance(entries, Mapping) else list(entries)
        if not pairs:
            raise InvalidArgumentError(param_name, "a language map needs at least one entry")

        mapping: dict[str, str] = {}
        for tag, text in pairs:
            if not is_language_tag(tag):
                raise InvalidArgumentError(param_name, f"{tag!r} is not a language tag")
            if not isinstance(text, str):
                raise InvalidArgumentError(param_name, f"display text for {tag!r} must be a string")
            if tag in mapping:
                raise InvalidArgumentError(param_name, f"duplicate language tag {tag!r}")
            mapping[tag] = text
        self._entries = mapping

    @classmethod
    def english_us(cls, text: str) -> LanguageMap:
        """Create a single-entry map for en-US."""
        return cls({ENGLISH_US: text})

    @classmethod
    def coerce(cls, value: LanguageMap | Mapping[str, str] | None, param_name: str = "entries") -> LanguageMap | None:
        """Wrap a plain mapping; pass LanguageMap instances and None through.

        Errors raised while wrapping are reported against ``param_name``.
        """
        if value is None or isinstance(value, LanguageMap):
            return value
        return cls(value, param_name)

    def __getitem__(self, tag: str) -> str:
        return self._entries[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"LanguageMap({self._entries!r})"
