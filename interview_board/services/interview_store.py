"""
Interview Record Store

Holds the id → record map and writes the whole map through to a key-value
storage backend on every mutation. The map is read once at construction.
"""

import logging
from datetime import date
from typing import Any

from interview_board.domain.interview.entities import InterviewRecord
from interview_board.infrastructure.storage.base import BaseKeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "interview-storage"

DEMO_INTERVIEWS = [
    InterviewRecord(
        id="1",
        companyName="Alibaba",
        position="",
        date="2025-03-13",
        startTime="11:00",
        duration="1h",
        location="969 Wenyi West Road, Yuhang District, Hangzhou",
        status="Scheduled",
        notes="Prepare React and Vue topics, plus algorithm questions",
        color="#f59e0b",
    ),
    InterviewRecord(
        id="2",
        companyName="Tencent",
        position="Full-stack Engineer",
        date="2025-03-11",
        startTime="14:00",
        duration="1.5h",
        location="Tencent Building, Keji Zhongyi Road, Nanshan District, Shenzhen",
        status="Scheduled",
        notes="Prepare Node.js and microservice topics",
        color="#3b82f6",
    ),
    InterviewRecord(
        id="3",
        companyName="ByteDance",
        position="Senior Frontend Engineer",
        date="2025-03-15",
        startTime="10:00",
        duration="1.5h",
        location="Zhongguancun Software Park Phase II, Haidian District, Beijing",
        status="Completed",
        notes="Lots of performance optimisation questions; brush up on that area",
        color="#10b981",
    ),
]


class InterviewStore:
    """CRUD store for interview records.

    No operation raises: missing ids are no-ops and storage failures are
    logged. Field contents are never validated here.
    """

    def __init__(self, storage: BaseKeyValueStorage, storage_key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize the store and load persisted records.

        Args:
            storage: Backend holding the persisted blob
            storage_key: Name of the blob
        """
        self.storage = storage
        self.storage_key = storage_key
        self._interviews: dict[str, InterviewRecord] = self._load()

        logger.info(
            f"InterviewStore loaded {len(self._interviews)} interviews "
            f"from {storage.storage_name}:{storage_key}"
        )

    # ============================================
    # Persistence
    # ============================================

    def _load(self) -> dict[str, InterviewRecord]:
        try:
            blob = self.storage.load(self.storage_key)
        except Exception as e:
            logger.error(f"Failed to load {self.storage_key}: {e}")
            return {}

        if not isinstance(blob, dict):
            return {}

        raw = blob.get("interviews")
        if not isinstance(raw, dict):
            return {}

        interviews = {}
        for interview_id, data in raw.items():
            if isinstance(data, dict):
                interviews[str(interview_id)] = InterviewRecord.from_dict(data)
        return interviews

    def _persist(self) -> None:
        blob = {
            "interviews": {
                interview_id: record.to_dict()
                for interview_id, record in self._interviews.items()
            }
        }
        try:
            self.storage.save(self.storage_key, blob)
        except Exception as e:
            logger.error(f"Failed to persist {self.storage_key}: {e}")

    # ============================================
    # Mutations
    # ============================================

    def add(self, record: InterviewRecord) -> InterviewRecord:
        """Insert a record under its id, overwriting any existing entry."""
        self._interviews[record.id] = record
        self._persist()
        logger.debug(f"Added interview {record.id}")
        return record

    def update(self, interview_id: str, patch: dict[str, Any]) -> InterviewRecord | None:
        """
        Merge a partial set of fields onto an existing record.

        Args:
            interview_id: Record id
            patch: Fields to overwrite; the id itself cannot be patched

        Returns:
            The merged record, or None when the id is absent (no-op)
        """
        current = self._interviews.get(interview_id)
        if current is None:
            logger.debug(f"Update ignored, interview {interview_id} not found")
            return None

        merged = current.merge(patch)
        self._interviews[interview_id] = merged
        self._persist()
        return merged

    def delete(self, interview_id: str) -> bool:
        """Remove a record. Returns False (no-op) if it was absent."""
        if interview_id not in self._interviews:
            return False

        del self._interviews[interview_id]
        self._persist()
        logger.debug(f"Deleted interview {interview_id}")
        return True

    def seed(self, records: list[InterviewRecord]) -> int:
        """Add records only when the store is empty. Returns the number added."""
        if self._interviews:
            return 0

        for record in records:
            self._interviews[record.id] = record
        self._persist()
        logger.info(f"Seeded {len(records)} demo interviews")
        return len(records)

    # ============================================
    # Queries
    # ============================================

    def get(self, interview_id: str) -> InterviewRecord | None:
        return self._interviews.get(interview_id)

    def list_all(self) -> list[InterviewRecord]:
        """Every record; order is not guaranteed."""
        return list(self._interviews.values())

    def list_by_date(self, day: date) -> list[InterviewRecord]:
        """Records whose date string equals the ISO form of ``day``."""
        day_str = day.isoformat()
        return [record for record in self._interviews.values() if record.date == day_str]

    def __len__(self) -> int:
        return len(self._interviews)

    def __contains__(self, interview_id: object) -> bool:
        return interview_id in self._interviews
