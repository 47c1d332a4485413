# ariohash/core/normalizer.py
import time
from typing import Callable, Optional

from loguru import logger

from .errors import InvalidInput

Clock = Callable[[], int]


def system_clock() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def normalize_input(text: Optional[str], clock: Optional[Clock] = None) -> str:
    """
    Returns the message the digest is computed over.

    Empty or missing input is replaced by the current clock reading rendered as
    decimal digits, so such calls are not reproducible unless the caller pins
    the clock.
    """
    if text is None or text == "":
        now = (clock or system_clock)()
        message = str(int(now))
        logger.debug(f"Empty input, using timestamp '{message}' as message.")
        return message
    if not isinstance(text, str):
        raise InvalidInput(f"Input must be a string, got {type(text).__name__}")
    return text
