from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
import datetime as dt

from interview_board.domain.interview.entities import (
    COLOR_PALETTE,
    DEFAULT_COLOR,
    DEFAULT_DURATION,
    DEFAULT_START_TIME,
    DEFAULT_STATUS,
    FormDraft,
    InterviewDuration,
    InterviewRecord,
    InterviewStatus,
)


def _check_start_time(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    hour, sep, minute = v.partition(":")
    if not sep or not (hour.isdigit() and minute.isdigit()):
        raise ValueError("startTime must be HH:MM")
    if not (0 <= int(hour) <= 23 and 0 <= int(minute) <= 59):
        raise ValueError("startTime must be a valid 24-hour time")
    return f"{int(hour):02d}:{int(minute):02d}"


class InterviewSchema(BaseModel):
    """Interview record"""
    id: str = Field(..., description="Interview ID")
    companyName: str = Field("", description="Company name")
    position: str = Field("", description="Position")
    date: str = Field(..., description="Interview date (YYYY-MM-DD)")
    startTime: str = Field(DEFAULT_START_TIME, description="Start time (HH:MM)")
    duration: str = Field(DEFAULT_DURATION.value, description="Interview length")
    location: str = Field("", description="Location")
    status: str = Field(DEFAULT_STATUS.value, description="Status")
    notes: str = Field("", description="Notes")
    color: str = Field(DEFAULT_COLOR, description="Display color")

    @classmethod
    def from_record(cls, record: InterviewRecord) -> "InterviewSchema":
        return cls(**record.to_dict())

    class Config:
        json_schema_extra = {
            "example": {
                "id": "1741676400000",
                "companyName": "Tencent",
                "position": "Full-stack Engineer",
                "date": "2025-03-11",
                "startTime": "14:00",
                "duration": "1.5h",
                "location": "Shenzhen",
                "status": "Scheduled",
                "notes": "Prepare Node.js topics",
                "color": "#3b82f6",
            }
        }


class InterviewCreateRequest(BaseModel):
    """Create interview request (add flow form draft)"""
    id: Optional[str] = Field(None, description="Interview ID (generated when omitted)")
    companyName: str = Field("", description="Company name")
    position: str = Field("", description="Position")
    date: dt.date = Field(..., description="Interview date (YYYY-MM-DD)")
    startTime: str = Field(DEFAULT_START_TIME, description="Start time (HH:MM)")
    duration: InterviewDuration = Field(DEFAULT_DURATION, description="Interview length")
    location: str = Field("", description="Location")
    status: InterviewStatus = Field(DEFAULT_STATUS, description="Status")
    notes: str = Field("", description="Notes")
    color: str = Field(DEFAULT_COLOR, description="Display color")

    @field_validator("startTime")
    @classmethod
    def validate_start_time(cls, v):
        return _check_start_time(v)

    def to_draft(self) -> FormDraft:
        data = self.model_dump(mode="json", exclude={"id"})
        return FormDraft(**data)


class InterviewUpdateRequest(BaseModel):
    """Partial interview update (only the fields sent are merged)"""
    companyName: Optional[str] = None
    position: Optional[str] = None
    date: Optional[dt.date] = None
    startTime: Optional[str] = None
    duration: Optional[InterviewDuration] = None
    location: Optional[str] = None
    status: Optional[InterviewStatus] = None
    notes: Optional[str] = None
    color: Optional[str] = None

    @field_validator("startTime")
    @classmethod
    def validate_start_time(cls, v):
        return _check_start_time(v)

    def to_patch(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class InterviewResponse(BaseModel):
    """Single interview response"""
    success: bool = Field(True, description="Whether the request succeeded")
    interview: Optional[InterviewSchema] = Field(None, description="Interview (null when the id is unknown)")


class InterviewListResponse(BaseModel):
    """Interview list response"""
    success: bool = Field(True, description="Whether the request succeeded")
    interviews: List[InterviewSchema] = Field(..., description="Interviews")
    total: int = Field(..., description="Number of interviews")


class InterviewDeleteResponse(BaseModel):
    """Interview delete response"""
    success: bool = Field(True, description="Whether the request succeeded")
    deleted: bool = Field(..., description="False when the id was already absent")


class FormDraftResponse(BaseModel):
    """Default form draft"""
    companyName: str
    position: str
    date: str
    startTime: str
    duration: str
    location: str
    status: str
    notes: str
    color: str


class FormOptionsResponse(BaseModel):
    """Choices offered on the interview form"""
    durations: List[str] = Field(default_factory=lambda: [d.value for d in InterviewDuration])
    statuses: List[str] = Field(default_factory=lambda: [s.value for s in InterviewStatus])
    colors: List[str] = Field(default_factory=lambda: list(COLOR_PALETTE))
    startTimes: List[str] = Field(..., description="Selectable start times (30-minute grid)")
