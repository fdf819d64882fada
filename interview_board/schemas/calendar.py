from pydantic import BaseModel, Field

from interview_board.schemas.interview import InterviewSchema


class PositionedEventSchema(BaseModel):
    """Draw instruction for one interview on the weekly grid"""

    column: int = Field(..., ge=0, le=4, description="Weekday column (0 = Monday)")
    top: float = Field(..., description="Vertical offset in pixels from the first row (may be negative)")
    height: float = Field(..., description="Height in pixels")
    interview: InterviewSchema = Field(..., description="Source interview")


class CalendarGridSchema(BaseModel):
    """Grid geometry used for the layout"""

    viewStartHour: int
    hourHeight: float
    minEventHeight: float
    pixelsPerMinute: float
    gridHeight: float


class CalendarWeekResponse(BaseModel):
    """Weekly calendar layout"""

    success: bool = Field(True, description="Whether the request succeeded")
    weekStart: str = Field(..., description="Monday of the week (YYYY-MM-DD)")
    weekRange: str = Field(..., description="Header label")
    weekDates: list[str] = Field(..., description="The five visible dates")
    prevWeekStart: str = Field(..., description="Monday of the previous week")
    nextWeekStart: str = Field(..., description="Monday of the next week")
    timeSlots: list[str] = Field(..., description="Hourly row labels")
    grid: CalendarGridSchema
    events: list[PositionedEventSchema] = Field(..., description="Positioned interviews")

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "weekStart": "2025-03-10",
                "weekRange": "2025-03-10 - 03-14",
                "weekDates": ["2025-03-10", "2025-03-11", "2025-03-12", "2025-03-13", "2025-03-14"],
                "prevWeekStart": "2025-03-03",
                "nextWeekStart": "2025-03-17",
                "timeSlots": ["09:00", "10:00"],
                "grid": {
                    "viewStartHour": 9,
                    "hourHeight": 80,
                    "minEventHeight": 24,
                    "pixelsPerMinute": 1.3333,
                    "gridHeight": 960,
                },
                "events": [
                    {
                        "column": 1,
                        "top": 400.0,
                        "height": 120.0,
                        "interview": {"id": "2", "companyName": "Tencent", "date": "2025-03-11"},
                    }
                ],
            }
        }
