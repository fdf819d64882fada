"""
Interview text parser API

POST /api/interview-parser - extract interview form fields from free text
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from interview_board.config.dependencies import get_interview_parser
from interview_board.config.settings import Settings, get_settings
from interview_board.schemas.common import ErrorCode, ErrorDetail
from interview_board.schemas.interview_parser import (
    InterviewParseRequest,
    InterviewParseResponse,
)
from interview_board.services.interview_parser import InterviewParserService

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(code: ErrorCode, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=ErrorDetail(code=code, message=message).model_dump(mode="json"),
    )


@router.post(
    "/interview-parser",
    response_model=InterviewParseResponse,
    summary="Parse interview text",
    description="""
    Sends pasted text to the selected model provider and returns the
    extracted form fields (form auto-fill).

    **Processing:** synchronous, one provider round trip, no retry

    Provider or parse failures do not fail the request: the response then
    only carries the default `status` and `color`, and the client keeps its
    current form values.
    """,
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "examples": {
                        "empty_text": {
                            "value": {
                                "detail": {
                                    "code": "INVALID_REQUEST",
                                    "message": "Please provide the interview text",
                                }
                            }
                        },
                        "model_not_configured": {
                            "value": {
                                "detail": {
                                    "code": "MODEL_NOT_CONFIGURED",
                                    "message": "Please configure an AI model first",
                                }
                            }
                        },
                    }
                }
            },
        }
    },
)
async def parse_interview_text(
    request: InterviewParseRequest,
    parser: InterviewParserService = Depends(get_interview_parser),
    settings: Settings = Depends(get_settings),
):
    if not request.text.strip():
        raise _bad_request(ErrorCode.INVALID_REQUEST, "Please provide the interview text")

    selector = request.to_selector().with_defaults(settings)
    if not selector.is_configured(parser.provider_config(selector.provider)):
        logger.warning(f"Interview parser called without credentials for {selector.provider.value}")
        raise _bad_request(ErrorCode.MODEL_NOT_CONFIGURED, "Please configure an AI model first")

    patch = await parser.extract(request.text, selector)
    return InterviewParseResponse(data=patch)
