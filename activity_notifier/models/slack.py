from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SlackMessage(BaseModel):
    """Incoming-webhook payload."""

    model_config = ConfigDict(frozen=True)

    text: str
