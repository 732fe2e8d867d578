"""Error taxonomy for odds construction, conversion, validation and parsing.

Every failure is raised as an OddsError subclass.  Nothing in the pricing
package catches or logs these; callers decide how to report them.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_AMERICAN_ODDS = "invalid_american_odds"
    INVALID_DECIMAL_ODDS = "invalid_decimal_odds"
    INVALID_FRACTIONAL_ODDS = "invalid_fractional_odds"  # reserved
    PARSE_ERROR = "parse_error"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    ZERO_DENOMINATOR = "zero_denominator"
    NEGATIVE_VALUE = "negative_value"  # reserved
    INFINITE_OR_NAN = "infinite_or_nan"


class OddsError(ValueError):
    """Base class: carries a kind and a human-readable detail string."""

    kind: ErrorKind
    prefix: str = ""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OddsError):
            return NotImplemented
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self), self.detail))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"


class InvalidAmericanOdds(OddsError):
    kind = ErrorKind.INVALID_AMERICAN_ODDS
    prefix = "Invalid American odds"


class InvalidDecimalOdds(OddsError):
    kind = ErrorKind.INVALID_DECIMAL_ODDS
    prefix = "Invalid decimal odds"


class InvalidFractionalOdds(OddsError):
    kind = ErrorKind.INVALID_FRACTIONAL_ODDS
    prefix = "Invalid fractional odds"


class ParseError(OddsError):
    kind = ErrorKind.PARSE_ERROR
    prefix = "Failed to parse odds string"


class ValueOutOfRange(OddsError):
    kind = ErrorKind.VALUE_OUT_OF_RANGE
    prefix = "Value out of range"


class NegativeValue(OddsError):
    kind = ErrorKind.NEGATIVE_VALUE
    prefix = "Negative value not allowed"


# ── Parameterless markers ───────────────────────────────────────────

class ZeroDenominator(OddsError):
    kind = ErrorKind.ZERO_DENOMINATOR

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Denominator cannot be zero"


class InfiniteOrNaN(OddsError):
    kind = ErrorKind.INFINITE_OR_NAN

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Value must be finite and not NaN"
