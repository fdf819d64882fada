"""
JSON parser utilities
Parse the JSON object carried in an LLM response.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def parse_json_object(text: Any) -> dict[str, Any] | None:
    """
    Parse text as a single JSON object.

    The whole text must be JSON; fenced code blocks and surrounding prose
    are not unwrapped.

    Args:
        text: Response content

    Returns:
        The parsed object, or None when the text is not a string or does not
        parse to a JSON object
    """
    if not isinstance(text, str):
        return None

    try:
        parsed = json.loads(text)
    except ValueError:
        logger.warning(f"JSON parse failed: {text[:100]!r}")
        return None

    if not isinstance(parsed, dict):
        logger.warning(f"JSON content is not an object: {type(parsed).__name__}")
        return None
    return parsed
