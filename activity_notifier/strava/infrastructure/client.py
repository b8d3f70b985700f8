from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ...errors import DecodeError, NotFoundError, TokenExchangeError, TransportError
from ...models import StravaActivity, StravaTokenResponse
from ..application.ports import StravaClientPort

logger = logging.getLogger(__name__)

TOKEN_URL = "https://www.strava.com/oauth/token"
ACTIVITIES_URL = "https://www.strava.com/api/v3/athlete/activities"


class StravaClient(StravaClientPort):
    """HTTP client for the Strava OAuth and activities endpoints."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        strict_token_status: bool = False,
    ) -> None:
        self._http_client = http_client
        self._strict_token_status = strict_token_status

    async def exchange_token(
        self, client_id: str, client_secret: str, code: str
    ) -> str:
        """Exchange an authorization code for an access token.

        Unless ``strict_token_status`` is set, the status code is not checked
        and any response body is parsed for ``access_token``.
        """

        payload = {
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
            "grant_type": "authorization_code",
        }
        response = await self._send("POST", TOKEN_URL, data=payload)
        if response.status_code != 200:
            if self._strict_token_status:
                raise TokenExchangeError(response.status_code)
            logger.warning(
                "Strava token endpoint answered %s; parsing body anyway",
                response.status_code,
            )

        data = _decode_json(response)
        try:
            token = StravaTokenResponse.model_validate(data)
        except ValidationError as exc:
            raise DecodeError("Strava token response missing access token") from exc
        return token.access_token

    async def fetch_latest_activity(self, access_token: str) -> StravaActivity:
        """Return the first activity of a single-item listing page."""

        headers = {"Authorization": f"Bearer {access_token}"}
        response = await self._send(
            "GET", ACTIVITIES_URL, headers=headers, params={"per_page": 1}
        )

        activities = _decode_json(response)
        if not isinstance(activities, list):
            raise DecodeError("Strava activities response is not a list")
        if not activities:
            raise NotFoundError("no activities found")

        try:
            return StravaActivity.model_validate(activities[0])
        except ValidationError as exc:
            raise DecodeError(f"Invalid Strava activity payload: {exc}") from exc

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._http_client.request(method, url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise DecodeError(f"Invalid JSON from {response.request.url}: {exc}") from exc


def create_strava_client_adapter(
    *, http_client: httpx.AsyncClient, strict_token_status: bool = False
) -> StravaClientPort:
    """Create a Strava client adapter bound to ``http_client``."""
    return StravaClient(http_client, strict_token_status=strict_token_status)
