"""Application layer for the Strava integration."""

from .ports import StravaClientPort

__all__ = ["StravaClientPort"]
