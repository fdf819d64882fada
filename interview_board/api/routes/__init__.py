"""
API routes - one module per concern, all under the /api prefix.
"""

from fastapi import APIRouter

from interview_board.api.routes import calendar, form, interview_parser, interviews

router = APIRouter(
    prefix="/api",
    responses={404: {"description": "Not found"}},
)

router.include_router(interviews.router, tags=["Interviews"])
router.include_router(calendar.router, tags=["Calendar"])
router.include_router(form.router, tags=["Form"])
router.include_router(interview_parser.router, tags=["Interview Parser"])
