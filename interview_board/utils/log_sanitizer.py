"""
Log injection (CRLF) guard.

Pasted interview text is user-controlled; newlines and control characters
are stripped before it reaches a log line.
"""

import logging
import re

DEFAULT_PREVIEW_LENGTH = 100


def _sanitize(text: str) -> str:
    result = re.sub(r"[\r\n]", " ", text)
    result = re.sub(r"[\x00-\x1f\x7f-\x9f]", "", result)
    return result


def sanitize_log_input(input_value: str | int | None, max_length: int | None = None) -> str:
    """
    Make a value safe to write into a log line.

    Args:
        input_value: Value to sanitize (str, int, None)
        max_length: Truncate to this many characters (None keeps everything)

    Returns:
        Sanitized string ("None" for None input)
    """
    if input_value is None:
        return "None"
    result = _sanitize(str(input_value))
    if max_length is not None and len(result) > max_length:
        result = result[:max_length] + "..."
    return result


def safe_log(
    logger: logging.Logger,
    level: int,
    msg: str,
    *args: str | int | None,
) -> None:
    """
    Log with every argument sanitized.

    Example:
        safe_log(logger, logging.INFO, "Parsing text: %s", text)
    """
    sanitized_args = tuple(_sanitize(str(arg)) if arg is not None else "None" for arg in args)
    logger.log(level, msg, *sanitized_args)


def safe_info(logger: logging.Logger, msg: str, *args: str | int | None) -> None:
    """INFO level safe logging"""
    safe_log(logger, logging.INFO, msg, *args)
