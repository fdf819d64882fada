"""
Weekly calendar API

GET /api/calendar/week - positioned interviews for one Monday-Friday week
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from interview_board.config.dependencies import get_calendar_grid, get_interview_store
from interview_board.schemas.calendar import (
    CalendarGridSchema,
    CalendarWeekResponse,
    PositionedEventSchema,
)
from interview_board.schemas.interview import InterviewSchema
from interview_board.services.calendar_layout import (
    CalendarGrid,
    layout,
    shift_week,
    start_of_week,
    time_slots,
    week_dates,
    week_range_label,
)
from interview_board.services.interview_store import InterviewStore

router = APIRouter()


@router.get(
    "/calendar/week",
    response_model=CalendarWeekResponse,
    summary="Weekly calendar layout",
    description="""
    Computes the grid geometry of every interview in the requested week.

    `start` may be any day; it is normalised to that week's Monday.
    Without `start` the current week is shown. Interviews outside the
    week are left out of the response but stay in the store.
    """,
)
async def calendar_week(
    start: dt.date | None = Query(None, description="Any day of the week to show (YYYY-MM-DD)"),
    store: InterviewStore = Depends(get_interview_store),
    grid: CalendarGrid = Depends(get_calendar_grid),
):
    week_start = start_of_week(start or dt.date.today())
    events = layout(store.list_all(), week_start, grid)

    return CalendarWeekResponse(
        weekStart=week_start.isoformat(),
        weekRange=week_range_label(week_start),
        weekDates=[d.isoformat() for d in week_dates(week_start)],
        prevWeekStart=shift_week(week_start, -1).isoformat(),
        nextWeekStart=shift_week(week_start, 1).isoformat(),
        timeSlots=time_slots(grid.view_start_hour, grid.slot_count),
        grid=CalendarGridSchema(
            viewStartHour=grid.view_start_hour,
            hourHeight=grid.hour_height,
            minEventHeight=grid.min_event_height,
            pixelsPerMinute=grid.pixels_per_minute,
            gridHeight=grid.grid_height,
        ),
        events=[
            PositionedEventSchema(
                column=event.column,
                top=event.top,
                height=event.height,
                interview=InterviewSchema.from_record(event.record),
            )
            for event in events
        ],
    )
