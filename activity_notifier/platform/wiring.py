"""Dependency wiring for the notification pipeline."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from ..application.pipeline import NotifyLatestActivityUseCase
from ..settings import Settings
from ..slack.infrastructure.client import create_slack_webhook_adapter
from ..strava.infrastructure.client import create_strava_client_adapter


@asynccontextmanager
async def provide_pipeline(
    settings: Settings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[NotifyLatestActivityUseCase]:
    """Yield a use case whose adapters share one HTTP client.

    The client is closed when the block exits, whatever the outcome.
    """
    async with httpx.AsyncClient(transport=transport) as http_client:
        strava = create_strava_client_adapter(
            http_client=http_client,
            strict_token_status=settings.strict_token_status,
        )
        notifier = create_slack_webhook_adapter(http_client=http_client)
        yield NotifyLatestActivityUseCase(strava, notifier, settings)


__all__ = ["provide_pipeline"]
