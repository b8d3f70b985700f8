from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StravaActivity(BaseModel):
    """Subset of fields returned by the athlete activities listing."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    distance: float
    moving_time: int


class StravaTokenResponse(BaseModel):
    """OAuth token exchange payload; only the access token is used."""

    access_token: str = Field(min_length=1)
