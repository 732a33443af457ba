"""Unit tests for ILIKE pattern building."""

from loop.persistence.text_search import contains_pattern


def test_plain_query_is_wrapped():
    assert contains_pattern("jazz") == "%jazz%"


def test_wildcards_and_escape_char_are_escaped():
    assert contains_pattern("100%") == "%100\\%%"
    assert contains_pattern("snake_case") == "%snake\\_case%"
    assert contains_pattern("back\\slash") == "%back\\\\slash%"
