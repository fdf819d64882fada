"""
Interview Domain Entities.

Defines the interview record, the partial patch applied on edit, and the
transient form draft used while composing an add or edit.
"""

import datetime as dt
import time
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any


class InterviewDuration(str, Enum):
    """Interview length options offered on the form."""

    MIN_30 = "30min"
    HOUR_1 = "1h"
    HOUR_1_5 = "1.5h"
    HOUR_2 = "2h"
    HOUR_2_5 = "2.5h"
    HOUR_3 = "3h"


class InterviewStatus(str, Enum):
    """Lifecycle status of an interview."""

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


DURATION_MINUTES: dict[InterviewDuration, int] = {
    InterviewDuration.MIN_30: 30,
    InterviewDuration.HOUR_1: 60,
    InterviewDuration.HOUR_1_5: 90,
    InterviewDuration.HOUR_2: 120,
    InterviewDuration.HOUR_2_5: 150,
    InterviewDuration.HOUR_3: 180,
}

DEFAULT_DURATION = InterviewDuration.HOUR_1
DEFAULT_DURATION_MINUTES = DURATION_MINUTES[DEFAULT_DURATION]
DEFAULT_STATUS = InterviewStatus.SCHEDULED
DEFAULT_START_TIME = "09:00"

DEFAULT_COLOR = "#3b82f6"
COLOR_PALETTE = ["#3b82f6", "#f59e0b", "#10b981", "#ef4444", "#8b5cf6"]


def duration_minutes(duration: str) -> int:
    """Map a duration value to minutes, falling back to one hour."""
    try:
        return DURATION_MINUTES[InterviewDuration(duration)]
    except ValueError:
        return DEFAULT_DURATION_MINUTES


def generate_interview_id() -> str:
    """Creation-timestamp id (milliseconds since epoch)."""
    return str(time.time_ns() // 1_000_000)


@dataclass(frozen=True)
class InterviewRecord:
    """A single scheduled interview.

    Field names mirror the persisted camelCase layout so a record
    serializes straight into the storage blob. Records are immutable;
    edits go through ``merge`` and the store.
    """

    id: str
    companyName: str = ""
    position: str = ""
    date: str = ""
    startTime: str = DEFAULT_START_TIME
    duration: str = DEFAULT_DURATION.value
    location: str = ""
    status: str = DEFAULT_STATUS.value
    notes: str = ""
    color: str = DEFAULT_COLOR

    def merge(self, patch: dict[str, Any]) -> "InterviewRecord":
        """Return a copy with every known patch field applied (id excluded)."""
        data = self.to_dict()
        for key, value in patch.items():
            if key in PATCHABLE_FIELDS:
                data[key] = value
        return InterviewRecord.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InterviewRecord":
        """Create from dictionary.

        Missing fields become empty strings; no validation is applied.
        """
        return cls(**{name: _as_text(data.get(name, "")) for name in RECORD_FIELDS})


RECORD_FIELDS = tuple(f.name for f in fields(InterviewRecord))
PATCHABLE_FIELDS = frozenset(RECORD_FIELDS) - {"id"}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass
class FormDraft:
    """Staging copy of the editable interview fields."""

    companyName: str = ""
    position: str = ""
    date: str = ""
    startTime: str = DEFAULT_START_TIME
    duration: str = DEFAULT_DURATION.value
    location: str = ""
    status: str = DEFAULT_STATUS.value
    notes: str = ""
    color: str = DEFAULT_COLOR

    @classmethod
    def default(cls, today: dt.date | None = None) -> "FormDraft":
        """Fresh draft dated today."""
        today = today or dt.date.today()
        return cls(date=today.isoformat())

    @classmethod
    def from_record(cls, record: InterviewRecord) -> "FormDraft":
        """Staging copy for the edit flow."""
        data = record.to_dict()
        data.pop("id")
        return cls(**data)

    def apply_patch(self, patch: dict[str, Any]) -> list[str]:
        """Copy non-empty patch values onto matching draft fields.

        Args:
            patch: Field values, typically from text extraction.

        Returns:
            Names of the fields that were updated.
        """
        applied = []
        for key, value in patch.items():
            if value and key in DRAFT_FIELDS:
                setattr(self, key, _as_text(value))
                applied.append(key)
        return applied

    def to_record(self, interview_id: str | None = None) -> InterviewRecord:
        """Build a record for the add flow."""
        return InterviewRecord(id=interview_id or generate_interview_id(), **self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


DRAFT_FIELDS = frozenset(f.name for f in fields(FormDraft))
