"""Ports for delivering chat notifications."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...models import SlackMessage


@runtime_checkable
class WebhookNotifierPort(Protocol):
    """Port that delivers a message to an incoming webhook."""

    async def notify(self, webhook_url: str, message: SlackMessage) -> None:
        """Post ``message``; return only when the webhook accepted it."""


__all__ = ["WebhookNotifierPort"]
