"""Theme personalization requests to an external generative service."""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Mapping, Protocol
from urllib.request import Request, urlopen

from themekit import __version__
from themekit.errors import ErrorCode, ThemeKitError
from themekit.themes.loader import suggestion_from_payload
from themekit.themes.models import ThemeSuggestion


@dataclass(frozen=True)
class PersonalizeThemeRequest:
    """Free-text description of what the user likes and how they use the app."""

    user_preferences: str
    usage_patterns: str = ""

    def to_payload(self) -> dict[str, str]:
        return {
            "userPreferences": self.user_preferences,
            "usagePatterns": self.usage_patterns,
        }


class SuggestionProvider(Protocol):
    """Anything that turns a request into a raw suggestion payload."""

    def __call__(self, request: PersonalizeThemeRequest) -> Mapping[str, object]: ...


def request_suggestion(
    provider: SuggestionProvider,
    request: PersonalizeThemeRequest,
) -> ThemeSuggestion:
    """Call ``provider`` and validate its payload.

    Raises ``ThemeKitError`` for an empty preference description and
    ``ThemeValidationError`` when the payload is malformed.
    """
    if not request.user_preferences.strip():
        raise ThemeKitError(ErrorCode.SUGGESTION_INPUT_REQUIRED)
    return suggestion_from_payload(provider(request))


class HttpSuggestionProvider:
    """Posts the request as JSON to a personalization endpoint."""

    def __init__(self, endpoint: str, *, timeout: float = 30.0) -> None:
        self._endpoint = endpoint
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __call__(self, request: PersonalizeThemeRequest) -> Mapping[str, object]:
        body = json.dumps(request.to_payload()).encode("utf-8")
        req = Request(
            self._endpoint,
            data=body,
            method="POST",
            headers={
                "User-Agent": f"ThemeKit/{__version__}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        with urlopen(req, timeout=self._timeout) as resp:
            data = json.loads(resp.read().decode("utf-8"))
        if not isinstance(data, dict):
            raise ValueError("Personalization endpoint did not return a JSON object")
        # Some endpoints wrap the flow result as {"output": {...}}.
        output = data.get("output")
        if isinstance(output, dict):
            return output
        return data
