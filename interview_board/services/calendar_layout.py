"""
Calendar Layout Engine

Maps interview records onto the weekly (Monday to Friday) grid: which day
column each record lands in and its vertical pixel offset and height.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta

from interview_board.domain.interview.entities import InterviewRecord, duration_minutes

logger = logging.getLogger(__name__)

WEEKDAYS_SHOWN = 5

_START_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{1,2})")


@dataclass(frozen=True)
class CalendarGrid:
    """Geometry of the weekly grid."""

    view_start_hour: int = 9
    hour_height: float = 80.0
    min_event_height: float = 24.0
    slot_count: int = 12

    @property
    def pixels_per_minute(self) -> float:
        return self.hour_height / 60

    @property
    def grid_height(self) -> float:
        return self.slot_count * self.hour_height


@dataclass(frozen=True)
class PositionedEvent:
    """Draw instruction for one interview."""

    column: int
    top: float
    height: float
    record: InterviewRecord


def start_of_week(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def shift_week(week_start: date, weeks: int) -> date:
    """Move a week window forwards (positive) or backwards (negative)."""
    return week_start + timedelta(weeks=weeks)


def week_dates(week_start: date) -> list[date]:
    """The five visible weekday dates starting at ``week_start``."""
    return [week_start + timedelta(days=i) for i in range(WEEKDAYS_SHOWN)]


def week_range_label(week_start: date) -> str:
    """Header label, e.g. ``2025-03-10 - 03-14``."""
    days = week_dates(week_start)
    return f"{days[0].isoformat()} - {days[-1].strftime('%m-%d')}"


def time_slots(view_start_hour: int = 9, count: int = 12) -> list[str]:
    """Hourly row labels for the grid."""
    return [f"{view_start_hour + i:02d}:00" for i in range(count)]


def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def _parse_start_time(value: str, grid: CalendarGrid) -> tuple[int, int]:
    match = _START_TIME_RE.match(value or "")
    if not match:
        return grid.view_start_hour, 0
    return int(match.group(1)), int(match.group(2))


def position_record(record: InterviewRecord, column: int, grid: CalendarGrid) -> PositionedEvent:
    """Compute the geometry of a single record already matched to a column.

    Offsets are not clipped: times before the first row give a negative
    ``top`` and late times extend past the grid.
    """
    hour, minute = _parse_start_time(record.startTime, grid)
    minutes_from_top = (hour - grid.view_start_hour) * 60 + minute

    top = minutes_from_top * grid.pixels_per_minute
    height = max(duration_minutes(record.duration) * grid.pixels_per_minute, grid.min_event_height)

    return PositionedEvent(column=column, top=top, height=height, record=record)


def layout(
    records: list[InterviewRecord],
    week_start: date,
    grid: CalendarGrid | None = None,
) -> list[PositionedEvent]:
    """
    Place records on the weekly grid.

    Args:
        records: Records to place, in draw order
        week_start: Monday of the visible week
        grid: Grid geometry (reference 80px per hour, 24px minimum)

    Returns:
        One event per record dated inside the visible week, in input order.
        Overlapping events are not stacked.
    """
    grid = grid or CalendarGrid()
    columns = {day: index for index, day in enumerate(week_dates(week_start))}

    events = []
    for record in records:
        record_date = _parse_date(record.date)
        if record_date is None:
            logger.debug(f"Skipping interview {record.id} with unparseable date {record.date!r}")
            continue

        column = columns.get(record_date)
        if column is None:
            continue

        events.append(position_record(record, column, grid))

    return events
