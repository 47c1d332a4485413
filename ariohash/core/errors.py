# ariohash/core/errors.py
from typing import Optional


class AriohashError(Exception):
    """Base class for every error raised by ariohash."""


class InvalidOptions(AriohashError, ValueError):
    """A hash request was rejected before the search started."""


class InvalidAlphabet(InvalidOptions):
    pass


class InvalidOutputLength(InvalidOptions):
    pass


class InvalidInput(InvalidOptions):
    pass


class SearchExhausted(AriohashError):
    """The iteration cap was reached without a candidate matching the pattern."""

    def __init__(self, iterations: int, next_key: int):
        self.iterations = iterations
        self.next_key = next_key
        super().__init__(
            f"No match after {iterations} iterations (next proof-of-work key: {next_key})"
        )


class SearchCancelled(AriohashError):
    """The search was stopped from outside via cancel()."""

    def __init__(self, iterations: int, message: Optional[str] = None):
        self.iterations = iterations
        super().__init__(message or f"Search cancelled after {iterations} iterations")


class SearchTimedOut(SearchCancelled):
    def __init__(self, iterations: int, timeout: float):
        self.timeout = timeout
        super().__init__(
            iterations, f"Search timed out after {timeout:g}s ({iterations} iterations)"
        )
