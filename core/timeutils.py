"""
Human-relative time labels ("5 minutes ago") for dashboard rows
"""

from datetime import datetime
from typing import Optional


def time_ago(moment: datetime, now: Optional[datetime] = None) -> str:
    """
    Describe how long ago `moment` was, rounding the way dashboards usually do.

    Both datetimes are naive UTC, as stored by the models. Moments in the
    future are treated as "now".
    """
    now = now or datetime.utcnow()
    seconds = max((now - moment).total_seconds(), 0)

    minutes = seconds / 60
    hours = minutes / 60
    days = hours / 24

    if seconds < 45:
        return "a few seconds ago"
    if seconds < 90:
        return "a minute ago"
    if minutes < 45:
        return f"{round(minutes)} minutes ago"
    if minutes < 90:
        return "an hour ago"
    if hours < 22:
        return f"{round(hours)} hours ago"
    if hours < 36:
        return "a day ago"
    if days < 26:
        return f"{round(days)} days ago"
    if days < 45:
        return "a month ago"
    if days < 320:
        return f"{round(days / 30.4)} months ago"
    if days < 548:
        return "a year ago"
    return f"{round(days / 365)} years ago"
