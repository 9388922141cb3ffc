"""
Custom exceptions for Mutqin library.

All exceptions inherit from MutqinError for easy catching of library-specific errors.

Range and navigation queries never raise: an unmatched query resolves to an
empty list or None. These exceptions cover loading, parsing and configuration.
"""

from typing import Any


class MutqinError(Exception):
    """Base exception for all Mutqin errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class VerseDataError(MutqinError):
    """Raised when the verse dataset cannot be loaded or breaks its invariants."""

    def __init__(
        self,
        message: str = "Failed to load verse data.",
        verse_key: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if verse_key:
            ctx["verse_key"] = verse_key
        super().__init__(message, ctx)
        self.verse_key = verse_key


class RangeDescriptorError(MutqinError):
    """Raised when a range payload is structurally malformed."""

    def __init__(
        self,
        message: str,
        payload: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if payload is not None:
            ctx["payload"] = payload
        super().__init__(message, ctx)
        self.payload = payload


class ConfigurationError(MutqinError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name
