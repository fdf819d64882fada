"""
Interview record API

GET    /api/interviews          - list interviews (optionally for one date)
POST   /api/interviews          - add an interview
GET    /api/interviews/{id}     - fetch one interview
PATCH  /api/interviews/{id}     - merge a partial update
DELETE /api/interviews/{id}     - delete an interview
"""

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from interview_board.config.dependencies import get_interview_store
from interview_board.schemas.common import ErrorCode, ErrorDetail
from interview_board.schemas.interview import (
    InterviewCreateRequest,
    InterviewDeleteResponse,
    InterviewListResponse,
    InterviewResponse,
    InterviewSchema,
    InterviewUpdateRequest,
)
from interview_board.services.interview_store import InterviewStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/interviews",
    response_model=InterviewListResponse,
    summary="List interviews",
)
def list_interviews(
    date: dt.date | None = Query(None, description="Only interviews on this date (YYYY-MM-DD)"),
    store: InterviewStore = Depends(get_interview_store),
):
    """All interviews, or only those whose date matches exactly."""
    records = store.list_by_date(date) if date else store.list_all()
    return InterviewListResponse(
        interviews=[InterviewSchema.from_record(r) for r in records],
        total=len(records),
    )


@router.post(
    "/interviews",
    response_model=InterviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an interview",
    description="""
    Creates an interview from a submitted form draft.

    The id is creation-timestamp derived unless the client supplies one;
    a supplied id that already exists is overwritten.
    """,
)
def create_interview(
    request: InterviewCreateRequest,
    store: InterviewStore = Depends(get_interview_store),
):
    record = store.add(request.to_draft().to_record(request.id))
    logger.info(f"Interview added: {record.id}")
    return InterviewResponse(interview=InterviewSchema.from_record(record))


@router.get(
    "/interviews/{interview_id}",
    response_model=InterviewResponse,
    summary="Get an interview",
    responses={404: {"description": "Interview not found"}},
)
def get_interview(
    interview_id: str,
    store: InterviewStore = Depends(get_interview_store),
):
    record = store.get(interview_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ErrorDetail(
                code=ErrorCode.INTERVIEW_NOT_FOUND,
                message=f"Interview {interview_id} not found",
            ).model_dump(mode="json"),
        )
    return InterviewResponse(interview=InterviewSchema.from_record(record))


@router.patch(
    "/interviews/{interview_id}",
    response_model=InterviewResponse,
    summary="Update an interview",
    description="""
    Merges the sent fields onto the stored interview; unsent fields are kept.

    An unknown id is a no-op: the response carries `interview: null`.
    """,
)
def update_interview(
    interview_id: str,
    request: InterviewUpdateRequest,
    store: InterviewStore = Depends(get_interview_store),
):
    record = store.update(interview_id, request.to_patch())
    if record is None:
        return InterviewResponse(interview=None)

    logger.info(f"Interview updated: {interview_id}")
    return InterviewResponse(interview=InterviewSchema.from_record(record))


@router.delete(
    "/interviews/{interview_id}",
    response_model=InterviewDeleteResponse,
    summary="Delete an interview",
)
def delete_interview(
    interview_id: str,
    store: InterviewStore = Depends(get_interview_store),
):
    """Idempotent: deleting an unknown id reports `deleted: false`."""
    deleted = store.delete(interview_id)
    if deleted:
        logger.info(f"Interview deleted: {interview_id}")
    return InterviewDeleteResponse(deleted=deleted)
