"""Simulate the default day, print its summary and save the report page."""

import argparse
import logging

from .analytics import derive_analytics
from .config import DEFAULT_SEED
from .export import save_report
from .report import summarize_day
from .simulation import simulate_energy_day


def main(argv=None):
    parser = argparse.ArgumentParser(prog="energy_report", description=__doc__)
    parser.add_argument("--seed", type=lambda s: int(s, 0), default=DEFAULT_SEED)
    parser.add_argument("--output", default="daily_energy_report.png")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    day = simulate_energy_day(seed=args.seed)
    analytics = derive_analytics(day.hourly_kWh)

    print(f"=== {day.building_name} ({day.date.isoformat()}) ===")
    for k, v in summarize_day(day, analytics).items():
        print(f"{k}: {v:.2f}")
    for alert in analytics.alerts:
        print(f"[{'x' if alert.ok else '!'}] {alert.label}")

    save_report(day, args.output, analytics=analytics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
