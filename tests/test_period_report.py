"""Tests pour le script de rapport de période."""

from __future__ import annotations

import sys

import pytest

from solarsystem.core.container import container
from solarsystem.domain.services import PeriodAggregator
from solarsystem.scripts import period_report


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch) -> list[tuple]:
    """Remplace la configuration structlog du script pour ne pas la lier au flux capturé."""
    calls: list[tuple] = []
    monkeypatch.setattr(
        period_report,
        "setup_logging",
        lambda level="INFO", stream=None: calls.append((level, stream)),
    )
    return calls


def test_report_prints_summary(monkeypatch, capsys) -> None:
    """Teste le rapport JSON d'une période courte sur le système de référence."""
    monkeypatch.setattr(container, "aggregator", PeriodAggregator(container.engine, 20))
    code = period_report.main(["--solar-system-id", "1", "--years", "2"])
    assert code == 0
    out = capsys.readouterr().out
    assert '"total_days": 40' in out
    assert '"weather_conditions"' not in out


def test_report_logs_to_stderr(logging_calls) -> None:
    """Teste que les logs du script partent sur stderr, stdout portant le JSON."""
    period_report.main(["--years", "11"])
    assert logging_calls == [(container.settings.LOG_LEVEL, sys.stderr)]


def test_report_with_days() -> None:
    report = period_report.build_report(1, 1, with_days=True)
    assert len(report["weather_conditions"]) == report["total_days"]


def test_report_invalid_years_returns_error_code(capsys) -> None:
    assert period_report.main(["--years", "11"]) == 1
