"""Tests for suggestion requests, the HTTP provider and the worker."""

from __future__ import annotations

import io
import json

import pytest

from themekit.core import personalize
from themekit.core.personalize import (
    HttpSuggestionProvider,
    PersonalizeThemeRequest,
    request_suggestion,
)
from themekit.errors import ErrorCode, ThemeKitError
from themekit.themes.models import ThemeSuggestion, ThemeValidationError
from themekit.workers.suggestion_worker import SuggestionWorker

PAYLOAD = {
    "themeName": "Midnight",
    "primaryColor": "#3F51B5",
    "backgroundColor": "#121212",
    "accentColor": "#FFC107",
    "font": "Roboto",
    "isThemeAcceptable": True,
}


class _FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


def test_request_suggestion_parses_provider_payload() -> None:
    seen: list[PersonalizeThemeRequest] = []

    def provider(request: PersonalizeThemeRequest):
        seen.append(request)
        return PAYLOAD

    request = PersonalizeThemeRequest("dark and calm", "evenings")
    suggestion = request_suggestion(provider, request)

    assert seen == [request]
    assert suggestion.theme_name == "Midnight"
    assert suggestion.font == "Roboto"


def test_request_suggestion_requires_preferences() -> None:
    with pytest.raises(ThemeKitError) as excinfo:
        request_suggestion(lambda request: PAYLOAD, PersonalizeThemeRequest("   "))
    assert excinfo.value.code is ErrorCode.SUGGESTION_INPUT_REQUIRED


def test_request_suggestion_rejects_bad_payload() -> None:
    with pytest.raises(ThemeValidationError):
        request_suggestion(lambda request: {"themeName": "x"}, PersonalizeThemeRequest("blue"))


def test_http_provider_posts_json_and_unwraps_output(monkeypatch) -> None:
    captured = {}

    def fake_urlopen(req, timeout):
        captured["url"] = req.full_url
        captured["method"] = req.get_method()
        captured["body"] = json.loads(req.data.decode("utf-8"))
        captured["timeout"] = timeout
        return _FakeResponse(json.dumps({"output": PAYLOAD}).encode("utf-8"))

    monkeypatch.setattr(personalize, "urlopen", fake_urlopen)
    provider = HttpSuggestionProvider("https://example.test/personalize", timeout=5)
    result = provider(PersonalizeThemeRequest("warm", "mornings"))

    assert result == PAYLOAD
    assert captured == {
        "url": "https://example.test/personalize",
        "method": "POST",
        "body": {"userPreferences": "warm", "usagePatterns": "mornings"},
        "timeout": 5,
    }


def test_http_provider_rejects_non_object(monkeypatch) -> None:
    monkeypatch.setattr(
        personalize,
        "urlopen",
        lambda req, timeout: _FakeResponse(b"[1, 2]"),
    )
    with pytest.raises(ValueError):
        HttpSuggestionProvider("https://example.test")(PersonalizeThemeRequest("x"))


class TestSuggestionWorker:
    def test_emits_finished_with_suggestion(self):
        worker = SuggestionWorker(lambda request: PAYLOAD, PersonalizeThemeRequest("bold"))
        started: list[bool] = []
        results: list[object] = []
        errors: list[str] = []
        worker.started.connect(lambda: started.append(True))
        worker.finished.connect(results.append)
        worker.error.connect(errors.append)
        worker.run()

        assert started == [True]
        assert errors == []
        assert len(results) == 1
        assert isinstance(results[0], ThemeSuggestion)
        assert results[0].accent_color == "#FFC107"

    def test_emits_user_message_on_provider_failure(self):
        def provider(request):
            raise TimeoutError("timed out")

        worker = SuggestionWorker(provider, PersonalizeThemeRequest("bold"))
        errors: list[str] = []
        worker.error.connect(errors.append)
        worker.run()

        assert errors and "timed out" in errors[0].lower()

    def test_emits_error_on_empty_preferences(self):
        worker = SuggestionWorker(lambda request: PAYLOAD, PersonalizeThemeRequest(""))
        errors: list[str] = []
        worker.error.connect(errors.append)
        worker.run()

        assert errors == ["Please describe your theme preferences."]

    def test_cancelled_worker_does_not_deliver(self):
        worker = SuggestionWorker(lambda request: PAYLOAD, PersonalizeThemeRequest("bold"))
        results: list[object] = []
        cancelled: list[bool] = []
        worker.finished.connect(results.append)
        worker.cancelled.connect(lambda: cancelled.append(True))
        worker.cancel()
        worker.run()

        assert results == []
        assert cancelled == [True]

    def test_finished_feeds_theme_store(self, make_store):
        store = make_store()
        store.activate()
        worker = SuggestionWorker(lambda request: PAYLOAD, PersonalizeThemeRequest("bold"))
        worker.finished.connect(store.set_ai_suggested_theme)
        worker.run()
        store.apply_ai_suggestion()

        assert store.theme.name == "Midnight"
        assert store.theme.background == "#121212"
