"""Free-form odds text ↔ Odds values.

Parsing dispatch (first match wins):
    "+150", "-200", "150"  → American (normalized, then validated)
    "3/2"                  → Fractional (validated)
    "2.50"                 → Decimal (validated)

Formatting is the inverse:  +150, -200, 2.50, 3/2.
"""

from __future__ import annotations

import re

from odds_converter.pricing.errors import ParseError
from odds_converter.pricing.formats import American, Decimal
from odds_converter.pricing.odds import Odds

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")
_ASCII_DIGITS_RE = re.compile(r"[0-9]+")


def _parse_int32(text: str) -> int | None:
    if not _SIGNED_INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def _parse_uint32(text: str) -> int | None:
    if not _UNSIGNED_INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value > _UINT32_MAX:
        return None
    return value


def _parse_float(text: str) -> float | None:
    # float() would also accept underscores, blanks and non-ASCII digits
    if "_" in text or text != text.strip() or not text.isascii():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_fractional(text: str) -> Odds:
    parts = text.split("/")
    if len(parts) != 2:
        raise ParseError(f"Invalid fractional format, expected 'num/den': '{text}'")

    num_str, den_str = parts[0].strip(), parts[1].strip()
    if not num_str or not den_str:
        raise ParseError("Empty numerator or denominator in fraction")

    numerator = _parse_uint32(num_str)
    if numerator is None:
        raise ParseError(f"Invalid numerator: '{num_str}'")
    denominator = _parse_uint32(den_str)
    if denominator is None:
        raise ParseError(f"Invalid denominator: '{den_str}'")

    odds = Odds.new_fractional(numerator, denominator)
    odds.validate()
    return odds


def parse_odds(text: str) -> Odds:
    """Parse a string in any of the three notations into a validated Odds.

    Raises:
        ParseError: Empty or unrecognisable input, or a malformed fraction.
        OddsError: Any validation failure of the parsed value, as-is
            (e.g. ZeroDenominator for "3/0").
    """
    s = text.strip()
    if not s:
        raise ParseError("Empty string")

    signed = s[0] in "+-"
    if signed or _ASCII_DIGITS_RE.fullmatch(s):
        value = _parse_int32(s)
        if value is not None:
            odds = Odds.new_american(value)
            odds.validate()
            return odds
        if signed:
            raise ParseError(f"Invalid American odds format: '{s}'")

    if "/" in s:
        return _parse_fractional(s)

    value = _parse_float(s)
    if value is not None:
        odds = Odds.new_decimal(value)
        odds.validate()
        return odds

    raise ParseError(f"Unable to parse '{s}' as any odds format")


def format_odds(odds: Odds) -> str:
    """Canonical text: "+150" / "-200", "2.50", "3/2" (never reduced)."""
    fmt = odds.format
    if isinstance(fmt, American):
        return f"+{fmt.value}" if fmt.value >= 0 else str(fmt.value)
    if isinstance(fmt, Decimal):
        return f"{fmt.value:.2f}"
    return f"{fmt.numerator}/{fmt.denominator}"
