"""Run the archive resets once (cron entry point).

Example crontab:
    0 0 * * 1  python scripts/run_archive.py weekly
    0 0 1 * *  python scripts/run_archive.py monthly
"""

from __future__ import annotations

import argparse
import importlib
import logging

from dotenv import load_dotenv

from timeclock.archive.scheduler import run_safely
from timeclock.config import get_settings_module
from timeclock.container import build_container


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("job", choices=["weekly", "monthly", "all"])
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

    container = build_container(
        db_config=settings.DB_CONFIG,
        snapshot_monthly=bool(getattr(settings, "ARCHIVE_SNAPSHOT_MONTHLY", True)),
    )
    service = container.archival_service

    jobs = {
        "weekly": [("weekly", service.run_weekly_reset)],
        "monthly": [("monthly", service.run_monthly_reset)],
        "all": [("weekly", service.run_weekly_reset), ("monthly", service.run_monthly_reset)],
    }[args.job]

    failed = 0
    for name, job in jobs:
        result = run_safely(name, job)
        if result is None:
            failed += 1
            continue
        print(
            f"OK: {name} reset (boundary={result.boundary.isoformat()}, "
            f"summaries={result.summaries_written}, deleted={result.shifts_deleted})"
        )
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
