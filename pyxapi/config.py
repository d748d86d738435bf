"""
Configuration for JSON serialization.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass
class SerializerConfig:
    """Configuration options for serialization."""

    # Indentation passed to json.dumps (None = compact output)
    indent: int | None = None

    # Escape non-ASCII characters in display strings
    ensure_ascii: bool = False

    # Language tag used when building language maps from plain text
    default_language: str = "en-US"

    # Render a zero UTC offset as "Z" instead of "+00:00"
    timestamp_utc_designator: bool = True

    @staticmethod
    def from_dict(d: dict) -> SerializerConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = SerializerConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: str | Path) -> SerializerConfig:
        """Load a config from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return SerializerConfig.from_dict(json.load(f))

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "indent": self.indent,
            "ensure_ascii": self.ensure_ascii,
            "default_language": self.default_language,
            "timestamp_utc_designator": self.timestamp_utc_designator,
        }

    def dumps(self, payload: object) -> str:
        """Render a JSON-ready payload according to this config."""
        separators = (",", ":") if self.indent is None else (",", ": ")
        return json.dumps(payload, indent=self.indent, ensure_ascii=self.ensure_ascii, separators=separators)
