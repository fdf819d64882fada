from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes"""
    INVALID_REQUEST = "INVALID_REQUEST"
    INTERVIEW_NOT_FOUND = "INTERVIEW_NOT_FOUND"
    MODEL_NOT_CONFIGURED = "MODEL_NOT_CONFIGURED"


class ErrorDetail(BaseModel):
    """Error detail"""
    code: ErrorCode = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional information")
