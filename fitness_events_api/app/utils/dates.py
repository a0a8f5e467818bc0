"""Date rendering used in API responses."""

from datetime import datetime


def format_long_date(value: datetime) -> str:
    """Render a date as e.g. ``Monday, January 5, 2026``.

    Day names and month names are always English, independent of the
    process locale.
    """
    weekdays = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
    months = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )
    return f"{weekdays[value.weekday()]}, {months[value.month - 1]} {value.day}, {value.year}"
