from .ports import WebhookNotifierPort

__all__ = ["WebhookNotifierPort"]
