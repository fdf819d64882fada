"""
Prompt module
LLM prompts are managed centrally here.
"""

from interview_board.prompts.interview_parser import (
    EXTRACTED_FIELDS,
    SYSTEM_INTERVIEW_PARSER,
    get_interview_parser_messages,
)

__all__ = [
    "EXTRACTED_FIELDS",
    "SYSTEM_INTERVIEW_PARSER",
    "get_interview_parser_messages",
]
