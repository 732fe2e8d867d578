"""Tests for parsing odds from text and rendering them back."""

import pytest
from odds_converter.pricing.errors import (
    InfiniteOrNaN,
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    ParseError,
    ValueOutOfRange,
    ZeroDenominator,
)
from odds_converter.pricing.formats import American, Decimal, Fractional
from odds_converter.pricing.odds import Odds
from odds_converter.pricing.text import format_odds, parse_odds


class TestParseAmerican:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("+150", 150),
            ("150", 150),
            ("-200", -200),
            ("  +150  ", 150),
            ("+100", 100),
            ("-110", -110),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_odds(text).format == American(expected)

    def test_normalized(self):
        assert parse_odds("50").format == American(-200)
        assert parse_odds("-50").format == American(200)

    def test_zero(self):
        with pytest.raises(InvalidAmericanOdds):
            parse_odds("0")

    def test_minus_100(self):
        with pytest.raises(InvalidAmericanOdds):
            parse_odds("-100")

    def test_out_of_range(self):
        with pytest.raises(ValueOutOfRange):
            parse_odds("+150000")

    @pytest.mark.parametrize("text", ["+abc", "-2.5", "+", "-1/2", "+99999999999"])
    def test_signed_but_not_integer(self, text):
        with pytest.raises(ParseError, match="Invalid American odds format"):
            parse_odds(text)

    def test_bare_digits_beyond_int32_fall_through_to_decimal(self):
        with pytest.raises(ValueOutOfRange, match="Decimal odds too large"):
            parse_odds("99999999999")


class TestParseFractional:
    def test_valid(self):
        assert parse_odds("3/2").format == Fractional(3, 2)

    def test_not_reduced(self):
        assert parse_odds("6/4").format == Fractional(6, 4)

    def test_parts_trimmed(self):
        assert parse_odds(" 3 / 2 ").format == Fractional(3, 2)

    def test_zero_denominator(self):
        with pytest.raises(ZeroDenominator):
            parse_odds("3/0")

    def test_out_of_range(self):
        with pytest.raises(ValueOutOfRange):
            parse_odds("20000/1")

    def test_too_many_parts(self):
        with pytest.raises(ParseError, match="expected 'num/den'"):
            parse_odds("1/2/3")

    @pytest.mark.parametrize("text", ["/2", "3/", "/"])
    def test_empty_part(self, text):
        with pytest.raises(ParseError, match="Empty numerator or denominator"):
            parse_odds(text)

    def test_bad_numerator(self):
        with pytest.raises(ParseError, match="Invalid numerator: 'a'"):
            parse_odds("a/2")

    def test_bad_denominator(self):
        with pytest.raises(ParseError, match="Invalid denominator: 'b'"):
            parse_odds("2/b")


class TestParseDecimal:
    @pytest.mark.parametrize("text, expected", [("2.5", 2.5), ("1.0", 1.0), (" 1.91 ", 1.91), ("1e2", 100.0)])
    def test_valid(self, text, expected):
        assert parse_odds(text).format == Decimal(expected)

    def test_all_digit_input_is_american(self):
        assert parse_odds("1000").format == American(1000)

    def test_below_one(self):
        with pytest.raises(InvalidDecimalOdds):
            parse_odds("0.5")

    def test_too_large(self):
        with pytest.raises(ValueOutOfRange):
            parse_odds("1500.0")

    @pytest.mark.parametrize("text", ["inf", "nan", "NaN", "infinity"])
    def test_non_finite(self, text):
        with pytest.raises(InfiniteOrNaN):
            parse_odds(text)


class TestParseFailures:
    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, text):
        with pytest.raises(ParseError, match="Empty string"):
            parse_odds(text)

    def test_garbage(self):
        with pytest.raises(ParseError) as exc_info:
            parse_odds("invalid")
        assert exc_info.value.detail == "Unable to parse 'invalid' as any odds format"

    @pytest.mark.parametrize("text", ["1_000", "2_5.0", "١٥٠"])
    def test_rejects_non_plain_numbers(self, text):
        with pytest.raises(ParseError):
            parse_odds(text)

    def test_parse_classmethod(self):
        assert Odds.parse("+150") == parse_odds("+150")


class TestFormat:
    def test_american(self):
        assert format_odds(Odds.new_american(150)) == "+150"
        assert format_odds(Odds.new_american(-200)) == "-200"

    def test_american_zero_gets_plus(self):
        assert format_odds(Odds.new_american(0)) == "+0"

    def test_decimal_two_places(self):
        assert format_odds(Odds.new_decimal(2.5)) == "2.50"
        assert format_odds(Odds.new_decimal(1.909)) == "1.91"

    def test_fractional_verbatim(self):
        assert format_odds(Odds.new_fractional(3, 2)) == "3/2"
        assert format_odds(Odds.new_fractional(6, 4)) == "6/4"

    def test_str(self):
        assert str(Odds.new_american(150)) == "+150"
        assert str(Odds.new_decimal(2.5)) == "2.50"
        assert str(Odds.new_fractional(3, 2)) == "3/2"


class TestTextRoundTrip:
    @pytest.mark.parametrize(
        "odds",
        [
            Odds.new_american(150),
            Odds.new_american(-200),
            Odds.new_american(100),
            Odds.new_fractional(3, 2),
            Odds.new_fractional(6, 4),
            Odds.new_fractional(0, 1),
        ],
    )
    def test_exact(self, odds):
        assert parse_odds(format_odds(odds)) == odds

    @pytest.mark.parametrize("value", [2.5, 1.909, 3.333, 1.0, 999.999])
    def test_decimal_within_a_cent(self, value):
        parsed = parse_odds(format_odds(Odds.new_decimal(value)))
        assert abs(parsed.to_decimal() - value) <= 0.01
