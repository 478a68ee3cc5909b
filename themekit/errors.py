"""Error codes and error handling utilities for ThemeKit."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from themekit.themes.models import ThemeValidationError


class ErrorCode(Enum):
    """Standardized error codes for ThemeKit operations."""

    # Persistence
    STORAGE_READ_FAILED = auto()
    STORAGE_WRITE_FAILED = auto()
    THEME_CORRUPT = auto()

    # Suggestions
    SUGGESTION_INPUT_REQUIRED = auto()
    SUGGESTION_FAILED = auto()
    SUGGESTION_INVALID = auto()
    SUGGESTION_TIMEOUT = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.STORAGE_READ_FAILED: "Saved theme could not be read. Using the default theme.",
    ErrorCode.STORAGE_WRITE_FAILED: "Theme could not be saved.",
    ErrorCode.THEME_CORRUPT: "Saved theme was damaged and has been cleared.",
    ErrorCode.SUGGESTION_INPUT_REQUIRED: "Please describe your theme preferences.",
    ErrorCode.SUGGESTION_FAILED: "Could not generate a theme.",
    ErrorCode.SUGGESTION_INVALID: "The generated theme was incomplete.",
    ErrorCode.SUGGESTION_TIMEOUT: "Theme generation timed out.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}

ERROR_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.STORAGE_READ_FAILED: "Check that the settings file is readable, then restart.",
    ErrorCode.STORAGE_WRITE_FAILED: "Check that the settings folder is writable and save again.",
    ErrorCode.THEME_CORRUPT: "Pick your colors again and save the theme.",
    ErrorCode.SUGGESTION_FAILED: "Check the suggestion endpoint setting and your network connection.",
    ErrorCode.SUGGESTION_INVALID: "Try again or rephrase your preferences.",
    ErrorCode.SUGGESTION_TIMEOUT: "Check your connection and try again.",
    ErrorCode.OPERATION_FAILED: "See themekit.log for the full error.",
}


@dataclass
class ThemeKitError(Exception):
    """Base exception for ThemeKit with error code and context."""

    code: ErrorCode
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception) -> ThemeKitError:
    """Classify a generic exception raised around the suggestion service."""
    if isinstance(exc, ThemeKitError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, ThemeValidationError):
        return ThemeKitError(ErrorCode.SUGGESTION_INVALID, details={"original": str(exc)})
    if isinstance(exc, TimeoutError) or "timeout" in exc_str or "timed out" in exc_str:
        return ThemeKitError(ErrorCode.SUGGESTION_TIMEOUT, details={"original": exc_str})
    if "network" in exc_str or "connection" in exc_str or "unreachable" in exc_str:
        return ThemeKitError(ErrorCode.SUGGESTION_FAILED, details={"original": exc_str})

    return ThemeKitError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeKitError | Exception) -> str:
    """Format an error for display to the user."""
    if isinstance(error, ThemeKitError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        return "".join(parts)

    return format_error_for_user(classify_exception(error))
