"""Recompute attendance records for a local date range without going through Flask.

    python scripts/process_attendance.py 2025-01-01 2025-01-31 --offset -120
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_attendance.hr_attendance.common.datetime_utils import parse_iso_date
from src.hr_attendance.hr_attendance.container import build_container
from src.hr_attendance.hr_attendance.core.exceptions import ProcessingError

logger = logging.getLogger("process_attendance")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("start", help="first local day, YYYY-MM-DD")
    parser.add_argument("end", help="last local day, YYYY-MM-DD")
    parser.add_argument("--offset", type=int, default=None, help="minutes, UTC = local + offset")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    offset = args.offset
    if offset is None:
        offset = int(getattr(settings, "DEFAULT_TIMEZONE_OFFSET_MINUTES", 0))

    container = build_container(
        db_config=settings.DB_CONFIG,
        grace_minutes=int(getattr(settings, "GRACE_MINUTES", 15)),
    )
    try:
        result = container.attendance_service.process_attendance(
            parse_iso_date(args.start), parse_iso_date(args.end), offset
        )
    except ProcessingError as e:
        logger.error("%s (records written before failure: %d)", e, e.processed_count)
        return 1

    logger.info("Processed %d records", result.processed_count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
