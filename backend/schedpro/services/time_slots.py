from __future__ import annotations

from collections.abc import Iterable

from schedpro.core.config import DEFAULT_DAYS, DEFAULT_TIME_LABELS

SLOT_SEPARATOR = "-"


def format_slot_id(day: str, time: str) -> str:
    return f"{day.strip()}{SLOT_SEPARATOR}{time.strip()}"


def parse_slot_id(slot_id: str) -> tuple[str, str]:
    # Time labels such as "9:00-10:00" carry their own dash, so only the first one splits.
    day, _, time = slot_id.partition(SLOT_SEPARATOR)
    return day, time


def weekly_slot_ids(
    days: Iterable[str] | None = None,
    time_labels: Iterable[str] | None = None,
) -> list[str]:
    days = list(DEFAULT_DAYS if days is None else days)
    time_labels = list(DEFAULT_TIME_LABELS if time_labels is None else time_labels)
    return [format_slot_id(day, time) for day in days for time in time_labels]
