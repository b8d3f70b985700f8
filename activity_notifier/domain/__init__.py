"""Pure domain helpers."""

from .messages import build_slack_message, format_message

__all__ = ["build_slack_message", "format_message"]
