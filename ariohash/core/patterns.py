# ariohash/core/patterns.py
import re
from typing import Callable, Pattern, Union

from .errors import InvalidOptions

Predicate = Callable[[str], bool]
PatternLike = Union[None, str, Pattern[str], Predicate]


def match_anything(candidate: str) -> bool:
    return True


def compile_pattern(pattern: PatternLike) -> Predicate:
    """
    Turns the accepted pattern forms into a plain predicate.

    Regular expressions (as text or compiled) are searched anywhere in the
    candidate, so an expression that can match the empty string accepts every
    candidate. Anchor with ``^``/``$`` to constrain position.
    """
    if pattern is None:
        return match_anything
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern)
        except re.error as e:
            raise InvalidOptions(f"Invalid pattern {pattern!r}: {e}") from e
    if isinstance(pattern, re.Pattern):
        regex = pattern
        return lambda candidate: regex.search(candidate) is not None
    if callable(pattern):
        predicate = pattern
        return lambda candidate: bool(predicate(candidate))
    raise InvalidOptions(f"Unsupported pattern type: {type(pattern).__name__}")


def describe_pattern(pattern: PatternLike) -> str:
    if pattern is None:
        return "<any>"
    if isinstance(pattern, str):
        return pattern
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return getattr(pattern, "__name__", repr(pattern))
