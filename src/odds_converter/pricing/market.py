"""Market-level analysis over a set of outcome prices.

Overround, margin-free probabilities, line shopping, arbitrage and
expected value.  Pure math over Odds values — no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from odds_converter.pricing.odds import Odds


@dataclass(frozen=True, slots=True)
class MarketOutcome:
    """One priced outcome of a market (e.g. "Home", "Draw", "Away").

    The price is validated on construction.
    """

    name: str
    odds: Odds
    bookmaker: str | None = None

    def __post_init__(self) -> None:
        self.odds.validate()


@dataclass(frozen=True, slots=True)
class ArbOpportunity:
    """A set of prices whose implied probabilities sum below 1."""

    legs: tuple[MarketOutcome, ...]
    total_implied: float
    arb_percent: float        # positive means profit (e.g. 0.02 = 2 %)
    total_stake: float
    stakes: dict[str, float]  # outcome name -> stake
    guaranteed_profit: float


def _implied(odds: Odds) -> float:
    odds.validate()
    return odds.implied_probability()


def total_implied_probability(odds: Iterable[Odds]) -> float:
    """Sum of implied probabilities across all outcomes of a market.

    Examples:
        -110 / -110  → 1.0476  (4.76 % margin)
        +110 / -105  → 0.9884  (arb)
    """
    return sum(_implied(o) for o in odds)


def overround(odds: Iterable[Odds]) -> float:
    """Bookmaker margin: positive for a normal book, negative for an arb."""
    return total_implied_probability(odds) - 1.0


def fair_probabilities(odds: list[Odds]) -> list[float]:
    """Implied probabilities scaled proportionally so they sum to 1.

    Raises:
        ValueError: If fewer than two outcomes are given.
    """
    if len(odds) < 2:
        raise ValueError(
            f"Need at least 2 outcomes to remove the margin, got {len(odds)}."
        )
    implied = [_implied(o) for o in odds]
    total = sum(implied)
    return [p / total for p in implied]


def favorite(outcomes: Iterable[MarketOutcome]) -> MarketOutcome | None:
    """The outcome with the shortest price (lowest decimal odds)."""
    best: MarketOutcome | None = None
    best_decimal = float("inf")
    for outcome in outcomes:
        decimal = outcome.odds.to_decimal()
        if decimal < best_decimal:
            best, best_decimal = outcome, decimal
    return best


def best_prices(outcomes: Iterable[MarketOutcome]) -> dict[str, MarketOutcome]:
    """Line shopping: highest decimal price per outcome name across books.

    The first book wins ties.
    """
    best: dict[str, MarketOutcome] = {}
    best_decimal: dict[str, float] = {}
    for outcome in outcomes:
        decimal = outcome.odds.to_decimal()
        if outcome.name not in best or decimal > best_decimal[outcome.name]:
            best[outcome.name] = outcome
            best_decimal[outcome.name] = decimal
    return best


def find_arbitrage(
    outcomes: Iterable[MarketOutcome],
    total_stake: float = 100.0,
    min_edge: float = 0.0,
) -> ArbOpportunity | None:
    """Check whether the best price per outcome forms an arb.

    Stakes are split in proportion to implied probability so every leg
    returns the same amount.

    Args:
        outcomes: Prices for every outcome of one market, from any books.
        total_stake: Amount spread across all legs.
        min_edge: Minimum arb margin (0.01 = 1 %).

    Returns:
        None if fewer than two distinct outcomes are priced or there is no
        arb at the requested edge.
    """
    best = best_prices(outcomes)
    if len(best) < 2:
        return None

    legs = tuple(best.values())
    probs = [leg.odds.implied_probability() for leg in legs]
    total_implied = sum(probs)
    arb_pct = 1.0 - total_implied

    if arb_pct <= 0 or arb_pct < min_edge:
        return None

    stakes = {
        leg.name: round(total_stake * p / total_implied, 2)
        for leg, p in zip(legs, probs)
    }

    return ArbOpportunity(
        legs=legs,
        total_implied=round(total_implied, 6),
        arb_percent=round(arb_pct, 6),
        total_stake=total_stake,
        stakes=stakes,
        guaranteed_profit=round(total_stake / total_implied - total_stake, 2),
    )


def _check_probability(win_probability: float) -> None:
    if not 0.0 <= win_probability <= 1.0:
        raise ValueError(f"Win probability must be in [0, 1], got {win_probability}.")


def expected_value(odds: Odds, win_probability: float, stake: float = 100.0) -> float:
    """Expected profit of a bet given your own win probability.

    Example:
        +150 at 60 % for 100 → 0.6 * 150 - 0.4 * 100 = 50.0
    """
    _check_probability(win_probability)
    odds.validate()
    profit = (odds.to_decimal() - 1.0) * stake
    return win_probability * profit - (1.0 - win_probability) * stake


def edge(odds: Odds, win_probability: float) -> float:
    """Your probability minus the market's implied probability."""
    _check_probability(win_probability)
    return win_probability - _implied(odds)
