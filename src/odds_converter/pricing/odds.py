"""The Odds value type: construction, normalization and conversion.

Pure math — no I/O, no logging.  Constructors never fail; call
``validate()`` to find out whether a value is usable.

Examples:
    Odds.new_american(150).to_decimal()   → 2.5
    Odds.new_american(50)                 → American(-200)
    Odds.new_fractional(3, 2).to_decimal() → 2.5
    Odds.new_decimal(2.5).to_american()   → 150
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from odds_converter.pricing.errors import (
    InfiniteOrNaN,
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    ValueOutOfRange,
    ZeroDenominator,
)
from odds_converter.pricing.formats import (
    American,
    Decimal,
    Fractional,
    OddsFormat,
    OddsKind,
)
from odds_converter.pricing.validation import validate_format

# to_fractional approximates profit to the nearest 1/1000 before reducing
FRACTIONAL_RESOLUTION = 1000

# American odds are held as 32-bit integers
_AMERICAN_LIMIT = 2**31 - 1


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3).

    Raises:
        InfiniteOrNaN: If x is NaN or infinite.
    """
    if not math.isfinite(x):
        raise InfiniteOrNaN()
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if x >= 0 else -int(whole)


def normalize_american(value: int) -> int:
    """Map American odds inside (-100, 100) to their conventional form.

    Examples:
        50  → -200
        -50 → +200
        25  → -400
        150 → 150 (unchanged)
    """
    if 0 < value < 100:
        return -round_half_away(10_000 / value)
    if -100 < value < 0:
        return round_half_away(10_000 / -value)
    return value


def _decimal_to_american(decimal: float) -> int:
    if not math.isfinite(decimal):
        raise InfiniteOrNaN()
    if decimal >= 2.0:
        return normalize_american(round_half_away((decimal - 1.0) * 100.0))
    if decimal > 1.0:
        return round_half_away(-100.0 / (decimal - 1.0))
    raise InvalidDecimalOdds(f"Decimal odds must be greater than 1.0, got: {decimal}")


@dataclass(frozen=True, slots=True)
class Odds:
    """A betting price held in exactly one notation.

    Build through the ``new_*`` constructors so American normalization is
    applied.  Conversions return new values and never mutate the receiver.
    """

    format: OddsFormat

    # ── Construction ────────────────────────────────────────────────

    @classmethod
    def new_american(cls, value: int) -> Odds:
        return cls(American(normalize_american(value)))

    @classmethod
    def new_decimal(cls, value: float) -> Odds:
        return cls(Decimal(value))

    @classmethod
    def new_fractional(cls, numerator: int, denominator: int) -> Odds:
        return cls(Fractional(numerator, denominator))

    @classmethod
    def parse(cls, text: str) -> Odds:
        """Parse free-form text; see ``odds_converter.pricing.text.parse_odds``."""
        from odds_converter.pricing.text import parse_odds

        return parse_odds(text)

    @property
    def kind(self) -> OddsKind:
        return self.format.kind

    # ── Conversion ──────────────────────────────────────────────────

    def to_decimal(self) -> float:
        """Total return per unit staked.

        Raises:
            InvalidAmericanOdds: American value of zero.
            ValueOutOfRange: American value beyond the 32-bit range.
            ZeroDenominator: Fractional value with denominator 0.
        """
        fmt = self.format
        if isinstance(fmt, Decimal):
            return fmt.value
        if isinstance(fmt, American):
            if abs(fmt.value) > _AMERICAN_LIMIT:
                raise ValueOutOfRange("American odds exceed the 32-bit integer range")
            if fmt.value > 0:
                return fmt.value / 100 + 1
            if fmt.value < 0:
                return 100 / -fmt.value + 1
            raise InvalidAmericanOdds("American odds cannot be zero")
        if fmt.denominator == 0:
            raise ZeroDenominator()
        return fmt.numerator / fmt.denominator + 1

    def to_american(self) -> int:
        """Moneyline equivalent, rounded half away from zero.

        Raises:
            InvalidDecimalOdds: If the decimal equivalent is <= 1.0.
            ZeroDenominator: Fractional value with denominator 0.
            InfiniteOrNaN: Decimal value that is NaN or infinite.
        """
        fmt = self.format
        if isinstance(fmt, American):
            return fmt.value
        if isinstance(fmt, Decimal):
            return _decimal_to_american(fmt.value)
        if fmt.denominator == 0:
            raise ZeroDenominator()
        return _decimal_to_american(fmt.numerator / fmt.denominator + 1)

    def to_fractional(self) -> tuple[int, int]:
        """(numerator, denominator) of the profit ratio.

        Fractional values come back verbatim.  Anything else is approximated
        to the nearest 1/1000 of profit and reduced by the GCD, so 2.5 → (3, 2)
        but 1.909 → (909, 1000).
        """
        fmt = self.format
        if isinstance(fmt, Fractional):
            return fmt.numerator, fmt.denominator

        decimal = self.to_decimal()
        if not math.isfinite(decimal):
            raise InfiniteOrNaN()
        if decimal < 1.0:
            raise InvalidDecimalOdds(f"Decimal odds must be >= 1.0, got: {decimal}")

        numerator = round_half_away((decimal - 1.0) * FRACTIONAL_RESOLUTION)
        divisor = math.gcd(numerator, FRACTIONAL_RESOLUTION)
        return numerator // divisor, FRACTIONAL_RESOLUTION // divisor

    def implied_probability(self) -> float:
        """Market win probability, ``1 / decimal``.

        Raises:
            InvalidDecimalOdds: Decimal value of exactly zero.
        """
        decimal = self.to_decimal()
        if decimal == 0:
            raise InvalidDecimalOdds("Decimal odds of 0 imply no probability")
        return 1.0 / decimal

    # ── Validation / text ───────────────────────────────────────────

    def validate(self) -> None:
        validate_format(self.format)

    def __str__(self) -> str:
        from odds_converter.pricing.text import format_odds

        return format_odds(self)
