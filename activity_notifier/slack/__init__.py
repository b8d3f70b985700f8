"""Slack incoming-webhook integration package."""

from .application.ports import WebhookNotifierPort
from .infrastructure.client import SlackWebhookClient, create_slack_webhook_adapter

__all__ = [
    "SlackWebhookClient",
    "WebhookNotifierPort",
    "create_slack_webhook_adapter",
]
