# ABOUTME: Groups 3-hour forecast samples into per-day summaries.
# ABOUTME: Pure function: first-seen date order, mean temperature, first sample's condition.

from collections.abc import Iterable
from itertools import islice

from src.models import DaySummary, ForecastSample

MAX_FORECAST_DAYS = 5


def date_key(timestamp: str) -> str:
    """Return the date part of a "YYYY-MM-DD HH:MM:SS" or "YYYY-MM-DDTHH:MM" timestamp."""
    return timestamp.replace("T", " ", 1).split(" ", 1)[0]


def aggregate_forecast(samples: Iterable[ForecastSample], max_days: int = MAX_FORECAST_DAYS) -> list[DaySummary]:
    """Collapse forecast samples into at most `max_days` daily summaries.

    Dates keep the order in which they first appear. A day's temperature is the plain
    mean of its samples and its condition is taken from its first sample. Input is
    assumed well-formed; validation belongs to the response parser.
    """
    groups: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        groups.setdefault(date_key(sample.timestamp), []).append(sample)

    return [
        DaySummary(
            date=day,
            temperature=sum(s.temperature for s in group) / len(group),
            condition=group[0].condition,
        )
        for day, group in islice(groups.items(), max_days)
    ]
