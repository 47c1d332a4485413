# tests/core/test_patterns.py
import re

import pytest

from ariohash.core.errors import InvalidOptions
from ariohash.core.patterns import compile_pattern, describe_pattern

def test_none_matches_everything():
    predicate = compile_pattern(None)
    assert predicate("")
    assert predicate("anything")

def test_string_pattern_searches_anywhere():
    predicate = compile_pattern("ab")
    assert predicate("xxabxx")
    assert not predicate("xxbaxx")

def test_anchored_pattern():
    predicate = compile_pattern("^00")
    assert predicate("00ff")
    assert not predicate("f00f")

def test_empty_match_counts_as_match():
    # Like the \w* default of the reference implementation
    predicate = compile_pattern(r"\w*")
    assert predicate("?!@#")

def test_compiled_pattern():
    predicate = compile_pattern(re.compile("z$"))
    assert predicate("abz")
    assert not predicate("zab")

def test_callable_pattern_result_is_coerced():
    predicate = compile_pattern(lambda s: s.count("a"))
    assert predicate("banana") is True
    assert predicate("xyz") is False

def test_invalid_regex_rejected():
    with pytest.raises(InvalidOptions):
        compile_pattern("(")

def test_unsupported_type_rejected():
    with pytest.raises(InvalidOptions):
        compile_pattern(42)

def test_describe_pattern():
    assert describe_pattern(None) == "<any>"
    assert describe_pattern("^a") == "^a"
    assert describe_pattern(re.compile("b+")) == "b+"

    def starts_with_a(s):
        return s.startswith("a")
    assert describe_pattern(starts_with_a) == "starts_with_a"
