from __future__ import annotations

import logging

import httpx

from ...errors import DeliveryError, TransportError
from ...models import SlackMessage
from ..application.ports import WebhookNotifierPort

logger = logging.getLogger(__name__)


class SlackWebhookClient(WebhookNotifierPort):
    """Posts JSON messages to a Slack-compatible incoming webhook."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http_client = http_client

    async def notify(self, webhook_url: str, message: SlackMessage) -> None:
        try:
            response = await self._http_client.post(
                webhook_url, json=message.model_dump()
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"POST to webhook failed: {exc}") from exc

        if response.status_code != 200:
            logger.debug("Webhook rejected message: %s", response.text)
            raise DeliveryError(response.status_code)


def create_slack_webhook_adapter(
    *, http_client: httpx.AsyncClient
) -> WebhookNotifierPort:
    """Create a webhook notifier bound to ``http_client``."""
    return SlackWebhookClient(http_client)
