"""Tests for themekit.errors."""

from __future__ import annotations

from themekit.errors import ErrorCode, ThemeKitError, classify_exception, format_error_for_user
from themekit.themes.models import ThemeValidationError


def test_default_message_from_code() -> None:
    error = ThemeKitError(ErrorCode.THEME_CORRUPT, details={"original": "bad json"})
    assert error.message == "Saved theme was damaged and has been cleared."
    assert "original=bad json" in str(error)
    assert error.to_dict()["code"] == "THEME_CORRUPT"


def test_classify_validation_error() -> None:
    assert classify_exception(ThemeValidationError("missing font")).code is ErrorCode.SUGGESTION_INVALID


def test_classify_network_and_timeout() -> None:
    assert classify_exception(TimeoutError("slow")).code is ErrorCode.SUGGESTION_TIMEOUT
    assert classify_exception(OSError("connection refused")).code is ErrorCode.SUGGESTION_FAILED


def test_classify_passes_through_own_errors() -> None:
    error = ThemeKitError(ErrorCode.SUGGESTION_INPUT_REQUIRED)
    assert classify_exception(error) is error


def test_format_unknown_exception() -> None:
    text = format_error_for_user(KeyError("boom"))
    assert text.startswith("KeyError:")


def test_suggestion_hint_differs_from_message() -> None:
    error = ThemeKitError(ErrorCode.SUGGESTION_TIMEOUT)
    assert error.suggestion == "Check your connection and try again."
    assert format_error_for_user(error) == (
        "Theme generation timed out.\n\nCheck your connection and try again."
    )


def test_input_required_has_no_extra_hint() -> None:
    error = ThemeKitError(ErrorCode.SUGGESTION_INPUT_REQUIRED)
    assert error.suggestion == ""
    assert format_error_for_user(error) == "Please describe your theme preferences."


def test_explicit_suggestion_is_kept() -> None:
    error = ThemeKitError(ErrorCode.STORAGE_WRITE_FAILED, suggestion="Free some disk space.")
    assert error.to_dict()["suggestion"] == "Free some disk space."
