"""Activities and their definitions."""

from .activity import Activity

__all__ = ["Activity"]
