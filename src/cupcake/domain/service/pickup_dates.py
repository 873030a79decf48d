"""Domain service: pickup date enumeration.

Labels are rendered with ``strftime`` so weekday and month names follow the
process's ``LC_TIME`` locale ("Tue Jan 2" under the C locale).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from cupcake.domain.model.pricing import PICKUP_OPTION_COUNT


def format_pickup_label(day: date) -> str:
    """Abbreviated weekday, abbreviated month, unpadded day of month."""
    return f"{day:%a %b} {day.day}"


def pickup_date_options(
    now: datetime | date,
    count: int = PICKUP_OPTION_COUNT,
) -> tuple[str, ...]:
    """Return *count* labels for consecutive days starting at *now*.

    *now* is used as given; no timezone conversion is applied.
    """
    start = now.date() if isinstance(now, datetime) else now
    return tuple(
        format_pickup_label(start + timedelta(days=offset))
        for offset in range(count)
    )
