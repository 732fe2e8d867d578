"""Tests for the scripts/odds_calculator.py launcher."""

import importlib.util
import logging
import sys
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "odds_calculator.py"


@pytest.fixture
def launcher():
    spec = importlib.util.spec_from_file_location("odds_calculator_script", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestLauncher:
    def test_success(self, launcher, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["odds_calculator.py", "convert", "+150"])
        assert launcher.main() == 0
        assert "Decimal odds:        2.500" in capsys.readouterr().out

    def test_conversion_failure_returns_one(self, launcher, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["odds_calculator.py", "convert", "invalid"])
        assert launcher.main() == 1

    def test_usage_error_is_shown_without_traceback(self, launcher, monkeypatch, capsys, caplog):
        monkeypatch.setattr(sys, "argv", ["odds_calculator.py", "convert"])
        with caplog.at_level(logging.ERROR, logger="odds_calculator"):
            assert launcher.main() == 2
        assert "Missing argument" in capsys.readouterr().err
        assert "odds_calculator failed" not in caplog.text
