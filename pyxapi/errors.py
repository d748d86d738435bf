"""
Exceptions raised while constructing or serializing xAPI values.
"""

from __future__ import annotations


class ArgumentValidationError(ValueError):
    """Raised when a constructor argument fails validation.

    Attributes:
        param_name: Name of the offending constructor parameter
        reason: Human readable description of the violation
    """

    def __init__(self, param_name: str, reason: str):
        self.param_name = param_name
        self.reason = reason
        super().__init__(f"{param_name}: {reason}")


class NullArgumentError(ArgumentValidationError):
    """Raised when a required argument is None."""

    def __init__(self, param_name: str, reason: str | None = None):
        super().__init__(param_name, reason or "value cannot be None")


class InvalidArgumentError(ArgumentValidationError):
    """Raised when an argument is present but structurally invalid.

    This covers empty strings, empty sequences, explicitly-empty optional
    collections, malformed IRIs and out-of-range numbers.
    """

    pass


class UnsupportedVariantError(NotImplementedError):
    """Raised by the serializer for a variant outside a closed family."""

    pass
