"""Display formatting helpers."""

from datetime import datetime, timedelta


def format_time_ago(when: datetime, *, now: datetime) -> str:
    """Format a timestamp as a coarse age relative to now.

    Ages are counted in whole elapsed days. Anything a week or older is shown
    as a locale date. Timestamps in the future count as today.

    Args:
        when: Timezone-aware timestamp to describe
        now: Timezone-aware current time

    Returns:
        "today", "yesterday", "N days ago", or a locale date string
    """
    days = (now - when) // timedelta(days=1)
    if days <= 0:
        return "today"
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days} days ago"
    return when.astimezone().strftime("%x")
