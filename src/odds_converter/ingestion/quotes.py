"""Normalise raw odds quotes into fully converted rows.

No network, no persistence — pure transformation with logging of the
quotes that could not be used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from odds_converter.pricing.errors import OddsError
from odds_converter.pricing.formats import OddsKind
from odds_converter.pricing.odds import Odds

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuoteRow:
    """One parsed quote expressed in every notation."""

    raw: str
    kind: OddsKind         # notation the quote arrived in
    american: int
    decimal: float
    numerator: int
    denominator: int
    implied_prob: float


@dataclass(frozen=True, slots=True)
class QuoteFailure:
    raw: str
    error: OddsError


def to_row(raw: str, odds: Odds) -> QuoteRow:
    """Convert an already parsed quote into a QuoteRow.

    Raises:
        OddsError: If any conversion fails (e.g. decimal 1.0 has no
            American equivalent).
    """
    numerator, denominator = odds.to_fractional()
    return QuoteRow(
        raw=raw,
        kind=odds.kind,
        american=odds.to_american(),
        decimal=round(odds.to_decimal(), 6),
        numerator=numerator,
        denominator=denominator,
        implied_prob=round(odds.implied_probability(), 6),
    )


def normalize_quotes(
    raw_quotes: Iterable[str],
) -> tuple[list[QuoteRow], list[QuoteFailure]]:
    """Parse and convert a batch of quotes, collecting failures.

    A bad quote never aborts the batch; it is returned in the failure list
    alongside the error that rejected it.

    Returns:
        (rows, failures) in input order.
    """
    rows: list[QuoteRow] = []
    failures: list[QuoteFailure] = []

    for raw in raw_quotes:
        try:
            rows.append(to_row(raw, Odds.parse(raw)))
        except OddsError as exc:
            logger.warning("Skipping quote %r: %s", raw, exc)
            failures.append(QuoteFailure(raw=raw, error=exc))

    logger.info("Normalised %d quotes, %d rejected", len(rows), len(failures))
    return rows, failures
