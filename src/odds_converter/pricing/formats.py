"""The three odds notations as immutable tagged variants.

Values are stored exactly as given.  Soundness (finite, non-zero
denominator, bounded magnitude) is checked separately by validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class OddsKind(str, Enum):
    AMERICAN = "american"
    DECIMAL = "decimal"
    FRACTIONAL = "fractional"


@dataclass(frozen=True, slots=True)
class American:
    """Moneyline: positive = profit per 100 staked, negative = stake to win 100."""

    value: int

    kind = OddsKind.AMERICAN


@dataclass(frozen=True, slots=True)
class Decimal:
    """Total return (stake + profit) per 1 unit staked."""

    value: float

    kind = OddsKind.DECIMAL


@dataclass(frozen=True, slots=True)
class Fractional:
    """Profit : stake ratio, kept unreduced."""

    numerator: int
    denominator: int

    kind = OddsKind.FRACTIONAL


OddsFormat = Union[American, Decimal, Fractional]
