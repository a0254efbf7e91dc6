"""
Custom exceptions for Mufassir library.

All exceptions inherit from MufassirError for easy catching of library-specific errors.
Location failures (chapter or verse not found) are not exceptions: locators
return None and the service degrades to "no commentary".
"""

from typing import Any


class MufassirError(Exception):
    """Base exception for all Mufassir errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class CorpusLoadError(MufassirError):
    """Raised when the commentary corpus cannot be fetched or read."""

    def __init__(
        self,
        message: str,
        location: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if location:
            ctx["location"] = location
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message, ctx)
        self.location = location
        self.status_code = status_code


class ConfigurationError(MufassirError):
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


class InvalidVerseKeyError(MufassirError, ValueError):
    """Raised when a verse key cannot be parsed."""

    def __init__(self, raw: object, reason: str | None = None) -> None:
        message = f"Invalid verse key: {raw!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.raw = raw
