"""
Rapport des conditions météo d'un système solaire sur une période.

Calcule (et met en cache) toutes les conditions journalières de la période, puis affiche les
compteurs par catégorie et le jour de pluie maximale.

Usage:
    python -m solarsystem.scripts.period_report --solar-system-id 1 --years 10
"""

from __future__ import annotations

import argparse
import json
import sys

import structlog

from solarsystem.core.container import container
from solarsystem.core.logging import setup_logging
from solarsystem.domain.errors import BusinessError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weather period report for a solar system")
    parser.add_argument("--solar-system-id", type=int, default=1, help="Solar system id")
    parser.add_argument("--years", type=int, default=10, help="Number of years (1..MAX_YEARS)")
    parser.add_argument(
        "--with-days", action="store_true", help="Include the day-by-day conditions"
    )
    return parser.parse_args(argv)


def build_report(solar_system_id: int, years: int, with_days: bool = False) -> dict:
    """Construit le rapport sérialisable de la période."""
    summary = container.aggregator.summarize(solar_system_id, years)
    report = {
        "solar_system_id": summary.solar_system_id,
        "years": summary.years,
        "total_days": summary.total_days,
        "drought_periods": summary.drought_count,
        "rainy_periods": summary.rainy_count,
        "optimal_periods": summary.optimal_count,
        "day_with_maximum_rainfall_intensity": summary.peak_rain_day,
    }
    if with_days:
        report["weather_conditions"] = [
            {"day": c.day, "weather_condition": c.category.value, "triangle_area": c.triangle_area}
            for c in summary.weather_conditions
        ]
    return report


def main(argv: list[str] | None = None) -> int:
    """Point d'entrée: imprime le rapport JSON, code retour 1 en cas d'erreur métier."""
    setup_logging(container.settings.LOG_LEVEL, stream=sys.stderr)
    args = parse_args(argv)
    try:
        report = build_report(args.solar_system_id, args.years, args.with_days)
    except BusinessError as err:
        structlog.get_logger(__name__).error(
            "period_report_failed", code=err.code, error_message=err.message
        )
        return 1
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
