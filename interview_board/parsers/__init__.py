"""
Parser module
Utilities for parsing LLM responses.
"""

from interview_board.parsers.json_parser import parse_json_object

__all__ = [
    "parse_json_object",
]
