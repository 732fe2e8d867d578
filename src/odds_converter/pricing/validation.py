"""Semantic checks on stored odds values.

Pure predicates — raise on the first problem found, return None otherwise.
"""

from __future__ import annotations

import math

from odds_converter.pricing.errors import (
    InfiniteOrNaN,
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    NegativeValue,
    ValueOutOfRange,
    ZeroDenominator,
)
from odds_converter.pricing.formats import American, Decimal, Fractional, OddsFormat

MAX_AMERICAN = 100_000
MAX_DECIMAL = 1000.0
MAX_FRACTIONAL_PART = 10_000


def validate_american(value: int) -> None:
    """Reject 0, -100 and magnitudes above MAX_AMERICAN.

    +100 is accepted while -100 is rejected; both are even money but only
    the negative form is treated as degenerate.
    """
    if value == 0:
        raise InvalidAmericanOdds("American odds cannot be zero")
    if value == -100:
        raise InvalidAmericanOdds(
            "American odds cannot be -100 (would imply infinite probability)"
        )
    if abs(value) > MAX_AMERICAN:
        raise ValueOutOfRange(f"American odds out of reasonable range: {value}")


def validate_decimal(value: float) -> None:
    """Decimal odds must be finite and within [1.0, MAX_DECIMAL]."""
    if not math.isfinite(value):
        raise InfiniteOrNaN()
    if value < 1.0:
        raise InvalidDecimalOdds(f"Decimal odds must be >= 1.0, got: {value}")
    if value > MAX_DECIMAL:
        raise ValueOutOfRange(f"Decimal odds too large: {value}")


def validate_fractional(numerator: int, denominator: int) -> None:
    # 0/n is break-even and valid
    if denominator == 0:
        raise ZeroDenominator()
    if numerator < 0 or denominator < 0:
        raise NegativeValue(f"Fractional odds parts must be non-negative, got: {numerator}/{denominator}")
    if numerator > MAX_FRACTIONAL_PART or denominator > MAX_FRACTIONAL_PART:
        raise ValueOutOfRange("Fractional odds values too large")


def validate_format(fmt: OddsFormat) -> None:
    if isinstance(fmt, American):
        validate_american(fmt.value)
    elif isinstance(fmt, Decimal):
        validate_decimal(fmt.value)
    elif isinstance(fmt, Fractional):
        validate_fractional(fmt.numerator, fmt.denominator)
    else:
        raise TypeError(f"Unknown odds format: {fmt!r}")
