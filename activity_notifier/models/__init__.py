from .slack import SlackMessage
from .strava import StravaActivity, StravaTokenResponse

__all__ = [
    'SlackMessage',
    'StravaActivity',
    'StravaTokenResponse',
]
