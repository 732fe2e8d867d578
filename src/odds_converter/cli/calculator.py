"""Typer CLI: convert odds between notations and analyse a market.

    odds-calc convert +150 2.5 3/2
    odds-calc market -- -110 -110
    odds-calc interactive

Orchestration and display only — all math lives in odds_converter.pricing.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from odds_converter.config.settings import settings
from odds_converter.pricing.errors import OddsError
from odds_converter.pricing.market import (
    MarketOutcome,
    fair_probabilities,
    find_arbitrage,
    total_implied_probability,
)
from odds_converter.pricing.odds import Odds

logger = logging.getLogger(__name__)

# Let "-200" through as an argument instead of an unknown option
_ARGS_ONLY = {"ignore_unknown_options": True}

app = typer.Typer(
    name="odds-calc",
    help="Convert betting odds between American, Decimal and Fractional notation.",
    add_completion=False,
)


def describe(odds: Odds) -> str:
    """Multi-line conversion table for one price."""
    places = settings.decimal_places
    numerator, denominator = odds.to_fractional()
    return (
        f"Input:               {odds} ({odds.kind.value})\n"
        f"American odds:       {odds.to_american():+d}\n"
        f"Decimal odds:        {odds.to_decimal():.{places}f}\n"
        f"Fractional odds:     {numerator}/{denominator}\n"
        f"Implied probability: {odds.implied_probability() * 100:.2f}%"
    )


@app.command(context_settings=_ARGS_ONLY)
def convert(
    quotes: list[str] = typer.Argument(..., help="Odds such as +150, -200, 2.50 or 3/2"),
) -> None:
    """Show every quote in all three notations plus implied probability."""
    failed = 0
    for raw in quotes:
        try:
            typer.echo(describe(Odds.parse(raw)))
        except OddsError as exc:
            failed += 1
            typer.echo(f"Error: {exc}", err=True)
        typer.echo("")

    if failed:
        logger.info("%d of %d quotes could not be converted", failed, len(quotes))
        raise typer.Exit(code=1)


@app.command(context_settings=_ARGS_ONLY)
def market(
    quotes: list[str] = typer.Argument(..., help="One price per outcome of the market"),
    stake: Optional[float] = typer.Option(None, "--stake", "-s", help="Total stake for arb split (default from ODDS_DEFAULT_STAKE)"),
) -> None:
    """Total implied probability, margin-free probabilities and arbitrage."""
    total_stake = stake if stake is not None else settings.default_stake
    try:
        outcomes = [
            MarketOutcome(name=f"Outcome {i}", odds=Odds.parse(raw))
            for i, raw in enumerate(quotes, start=1)
        ]
        odds = [o.odds for o in outcomes]
        total = total_implied_probability(odds)
        fair = fair_probabilities(odds) if len(odds) >= 2 else [1.0]
    except (OddsError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    for outcome, p_fair in zip(outcomes, fair):
        typer.echo(
            f"{outcome.name:<12s} {str(outcome.odds):>8s}  "
            f"implied {outcome.odds.implied_probability() * 100:6.2f}%  "
            f"fair {p_fair * 100:6.2f}%"
        )
    typer.echo(f"Total implied probability: {total * 100:.2f}%")

    opp = find_arbitrage(outcomes, total_stake=total_stake, min_edge=settings.min_arb_edge)
    if opp is None:
        typer.echo(f"No arbitrage (overround: {(total - 1.0) * 100:.2f}%)")
        return

    typer.echo(f"ARBITRAGE: {opp.arb_percent * 100:.2f}% margin")
    for name, leg_stake in opp.stakes.items():
        typer.echo(f"  {name}: {leg_stake:.2f}")
    typer.echo(f"Guaranteed profit: {opp.guaranteed_profit:.2f}")


@app.command()
def interactive() -> None:
    """Read odds line by line until 'quit' or end of input."""
    typer.echo("Enter odds in any format (American: +150/-200, Decimal: 2.50, Fractional: 3/2)")
    typer.echo("Type 'quit' to exit")

    while True:
        typer.echo("Enter odds: ", nl=False)
        line = sys.stdin.readline()
        if not line:
            break
        text = line.strip()
        if text.lower() == "quit":
            typer.echo("Goodbye!")
            break
        if not text:
            continue
        try:
            typer.echo(describe(Odds.parse(text)))
        except OddsError as exc:
            typer.echo(f"Error: {exc}")


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    app()


if __name__ == "__main__":
    main()
