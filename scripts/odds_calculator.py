"""Launch the odds calculator CLI.

Usage:
    python scripts/odds_calculator.py convert +150 2.5 3/2
    python scripts/odds_calculator.py interactive
"""

from __future__ import annotations

import logging
import sys

import click

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger("odds_calculator")


def main() -> int:
    try:
        from odds_converter.cli.calculator import app

        # non-standalone mode returns the exit code instead of calling sys.exit
        return app(standalone_mode=False) or 0
    except click.exceptions.ClickException as exc:
        exc.show()
        return exc.exit_code
    except Exception:
        logger.exception("odds_calculator failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
