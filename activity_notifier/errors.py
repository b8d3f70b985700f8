"""Errors raised along the notification pipeline."""

from __future__ import annotations


class NotifierError(RuntimeError):
    """Base class for every failure the pipeline reports."""


class TransportError(NotifierError):
    """Raised when a request cannot be sent or its response cannot be read."""


class DecodeError(NotifierError):
    """Raised when a response body is not JSON or has an unexpected shape."""


class NotFoundError(NotifierError):
    """Raised when a result set that must hold one element is empty."""


class DeliveryError(NotifierError):
    """Raised when the webhook answers with anything other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"failed to post to webhook: status code {status_code}")
        self.status_code = status_code


class TokenExchangeError(NotifierError):
    """Raised in strict mode when the token endpoint rejects the exchange."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"failed to exchange authorization code: status code {status_code}")
        self.status_code = status_code


__all__ = [
    "DecodeError",
    "DeliveryError",
    "NotFoundError",
    "NotifierError",
    "TokenExchangeError",
    "TransportError",
]
