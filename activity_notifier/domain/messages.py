from __future__ import annotations

from ..models import SlackMessage, StravaActivity

MESSAGE_TEMPLATE = "New activity logged: {name} ({distance_km:.2f} km, {moving_minutes} min)"


def format_message(activity: StravaActivity) -> str:
    """Render a one-line summary of ``activity``.

    Distance is shown in kilometres with two decimals and moving time in
    whole minutes, truncated rather than rounded.
    """
    return MESSAGE_TEMPLATE.format(
        name=activity.name,
        distance_km=activity.distance / 1000,
        moving_minutes=activity.moving_time // 60,
    )


def build_slack_message(activity: StravaActivity) -> SlackMessage:
    return SlackMessage(text=format_message(activity))
