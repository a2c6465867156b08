"""
Tests for the unit converter.

Run with: pytest tests/test_converter.py -v
"""

import pytest
from stackbot.services.converter import (
    UnitTerm,
    breakdown,
    convert,
    parse_breakdown,
    render,
)
from stackbot.services.parser import ParseError
from stackbot.services.units import UnitScheme


class TestConvert:

    def test_example_from_help(self):
        # 35000 = 10*3456 + 0*1728 + 6*64 + 56
        assert convert(35000, 64) == "10LC+6st+56"

    def test_default_stack_size(self):
        assert convert(35000) == "10LC+6st+56"

    def test_zero_renders_as_zero(self):
        assert convert(0, 64) == "0"

    def test_loose_items_only(self):
        assert convert(20, 64) == "20"

    def test_exact_stack(self):
        assert convert(64, 64) == "1st"

    def test_exact_crate(self):
        assert convert(27 * 64, 64) == "1c"

    def test_exact_large_crate(self):
        assert convert(54 * 64, 64) == "1LC"

    def test_zero_terms_are_skipped(self):
        assert convert(54 * 64 + 5, 64) == "1LC+5"

    def test_small_stack_size(self):
        # 1234 @ 32: LC=1728 (0), c=864 (1, r370), st=11 (r18)
        assert convert(1234, 32) == "1c+11st+18"

    def test_stack_size_one(self):
        assert convert(100, 1) == "1LC+1c+19st"

    def test_crate_count_never_exceeds_one(self):
        # Two crates make a large crate
        assert convert(2 * 27 * 16 - 1, 16) == "1c+26st+15"

    def test_custom_scheme(self):
        scheme = UnitScheme(large_crate_stacks=10, crate_stacks=5)
        assert convert(17 * 4 + 3, 4, scheme) == "1LC+1c+2st+3"

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            convert(-1, 64)

    def test_zero_stack_size_rejected(self):
        with pytest.raises(ValueError):
            convert(10, 0)


class TestBreakdown:

    def test_terms_in_descending_unit_order(self):
        # 36728 = 10*3456 + 1*1728 + 6*64 + 56
        assert breakdown(36728, 64) == [
            UnitTerm(10, "LC"),
            UnitTerm(1, "c"),
            UnitTerm(6, "st"),
            UnitTerm(56, ""),
        ]

    def test_example_has_no_crate_term(self):
        assert breakdown(35000, 64) == [
            UnitTerm(10, "LC"),
            UnitTerm(6, "st"),
            UnitTerm(56, ""),
        ]

    def test_zero_has_no_terms(self):
        assert breakdown(0, 64) == []

    def test_render_empty(self):
        assert render([]) == "0"

    def test_render_joins_with_plus(self):
        assert render([UnitTerm(2, "st"), UnitTerm(1, "")]) == "2st+1"

    @pytest.mark.parametrize("stack_size", [1, 16, 64, 99])
    def test_conservation(self, stack_size):
        """Terms always add back up to the original count."""
        unit = {"LC": 54 * stack_size, "c": 27 * stack_size, "st": stack_size, "": 1}
        for item_count in range(0, 200 * stack_size, 37):
            terms = breakdown(item_count, stack_size)
            assert sum(t.magnitude * unit[t.label] for t in terms) == item_count
            assert all(t.magnitude > 0 for t in terms)


class TestParseBreakdown:

    def test_example(self):
        assert parse_breakdown("10LC+6st+56", 64) == 35000

    def test_zero(self):
        assert parse_breakdown("0", 64) == 0

    def test_inverse_of_convert(self):
        for stack_size in (1, 16, 64):
            for item_count in (0, 1, 63, 64, 1727, 1728, 3456, 35000, 10 ** 9):
                text = convert(item_count, stack_size)
                assert parse_breakdown(text, stack_size) == item_count

    def test_order_does_not_matter(self):
        assert parse_breakdown("56+6st+10LC", 64) == 35000

    def test_whitespace_around_terms(self):
        assert parse_breakdown(" 1st + 2 ", 64) == 66

    def test_unknown_unit(self):
        with pytest.raises(ParseError) as exc_info:
            parse_breakdown("3kg", 64)
        assert exc_info.value.token == "3kg"

    def test_empty_term(self):
        with pytest.raises(ParseError):
            parse_breakdown("1st++2", 64)

    def test_newline_inside_term(self):
        with pytest.raises(ParseError):
            parse_breakdown("1st\n+2", 64)

    def test_too_many_digits(self):
        with pytest.raises(ParseError):
            parse_breakdown("1" * 5000 + "st", 64)

    def test_missing_magnitude(self):
        with pytest.raises(ParseError):
            parse_breakdown("st", 64)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
