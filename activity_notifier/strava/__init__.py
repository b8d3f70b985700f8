"""Strava integration package."""

from .application.ports import StravaClientPort
from .infrastructure.client import StravaClient, create_strava_client_adapter

__all__ = [
    "StravaClient",
    "StravaClientPort",
    "create_strava_client_adapter",
]
