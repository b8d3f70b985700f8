"""Ports for the Strava application layer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...models import StravaActivity


@runtime_checkable
class StravaClientPort(Protocol):
    """Port that exposes the Strava calls used by the pipeline."""

    async def exchange_token(
        self, client_id: str, client_secret: str, code: str
    ) -> str:
        """Trade an OAuth authorization code for a bearer access token."""

    async def fetch_latest_activity(self, access_token: str) -> StravaActivity:
        """Return the most recent activity of the authorized athlete."""


__all__ = ["StravaClientPort"]
