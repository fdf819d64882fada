"""
Interview form API

GET /api/form/draft   - a fresh add-flow form draft
GET /api/form/options - choices offered by the form selects
"""

from fastapi import APIRouter

from interview_board.domain.interview.entities import FormDraft
from interview_board.schemas.interview import FormDraftResponse, FormOptionsResponse

router = APIRouter()

# 09:00-17:00 on a 30-minute grid
START_TIME_OPTIONS = [f"{h:02d}:{m:02d}" for h in range(9, 18) for m in (0, 30) if (h, m) != (17, 30)]


@router.get("/form/draft", response_model=FormDraftResponse, summary="Default form draft")
async def form_draft():
    return FormDraftResponse(**FormDraft.default().to_dict())


@router.get("/form/options", response_model=FormOptionsResponse, summary="Form choices")
async def form_options():
    return FormOptionsResponse(startTimes=START_TIME_OPTIONS)
