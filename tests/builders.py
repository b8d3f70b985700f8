"""Builder helpers to express test inputs succinctly."""

from __future__ import annotations

from typing import Any, Dict

TOKEN_URL = "https://www.strava.com/oauth/token"
ACTIVITIES_URL = "https://www.strava.com/api/v3/athlete/activities"
WEBHOOK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"


def make_strava_token_response(**overrides: Any) -> Dict[str, Any]:
    """Return a Strava authorization-code exchange payload."""

    base: Dict[str, Any] = {
        "token_type": "Bearer",
        "access_token": "abc",
        "refresh_token": "refresh",
        "expires_at": 1704067200,
        "athlete": {"id": 7},
    }
    base.update(overrides)
    return base


def make_strava_activity(**overrides: Any) -> Dict[str, Any]:
    """Return an activity listing entry with optional overrides."""

    base: Dict[str, Any] = {
        "id": 1,
        "name": "Morning Run",
        "distance": 10000,
        "moving_time": 3600,
        "elapsed_time": 3720,
        "type": "Run",
    }
    base.update(overrides)
    return base
