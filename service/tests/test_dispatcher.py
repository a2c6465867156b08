"""
Tests for trigger extraction.
"""

import pytest
from stackbot.telegram_bot.dispatcher import TRIGGER_PATTERN, extract_query


class TestExtractQuery:

    def test_count(self):
        assert extract_query("35000?=") == "35000"

    def test_count_with_stack_size(self):
        assert extract_query("1234@32?=") == "1234@32"

    def test_trailing_whitespace(self):
        assert extract_query("35000?=  \n") == "35000"

    def test_garbage_prefix_is_still_a_request(self):
        # Parsing decides validity, not the trigger
        assert extract_query("abc?=") == "abc"

    def test_bare_suffix(self):
        assert extract_query("?=") == ""

    def test_no_suffix(self):
        assert extract_query("35000") is None

    def test_suffix_in_the_middle(self):
        assert extract_query("35000?= please") is None

    def test_empty_and_none(self):
        assert extract_query("") is None
        assert extract_query(None) is None


class TestTriggerPattern:

    @pytest.mark.parametrize("text", ["1?=", "1@2?=", "x ?=  "])
    def test_matches_requests(self, text):
        assert TRIGGER_PATTERN.search(text)

    @pytest.mark.parametrize("text", ["hello", "1?", "1=", "?= 1"])
    def test_ignores_other_text(self, text):
        assert TRIGGER_PATTERN.search(text) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
