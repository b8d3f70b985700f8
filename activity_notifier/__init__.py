"""Post the latest Strava activity to a chat webhook."""

__version__ = "1.0.0"
