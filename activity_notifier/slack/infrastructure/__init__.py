"""Infrastructure adapters for the Slack integration."""

from .client import SlackWebhookClient, create_slack_webhook_adapter

__all__ = ["SlackWebhookClient", "create_slack_webhook_adapter"]
