"""
main.py
-------
Entry point for the NSS roster reports.

Responsibilities:
    - Make sure every roster table exists and is seeded (once, before any query).
    - Build the requested reports and print them to stdout.

Usage:
    python main.py                       # every report, in default order
    python main.py coaching assignments  # only the named reports
    python main.py --skip-bootstrap cohorts
"""

import argparse
import sys
from typing import Optional, Sequence

from db.init_db import ensure_schema
from services.report_service import ReportService
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="nss",
        description="Print cohort, instructor, student and exercise reports.",
    )
    parser.add_argument(
        "reports",
        nargs="*",
        metavar="REPORT",
        help=f"reports to print (default: all). One of: {', '.join(ReportService.REPORTS)}",
    )
    parser.add_argument(
        "--skip-bootstrap",
        action="store_true",
        help="do not check for missing tables before querying",
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.reports if name not in ReportService.REPORTS]
    if unknown:
        parser.error(f"unknown report(s): {', '.join(unknown)}")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Bootstrap the schema and print the requested reports."""
    args = parse_args(argv)

    # ── 1. Database setup ─────────────────────────────────
    if not args.skip_bootstrap:
        logger.info("Checking database schema...")
        created = ensure_schema()
        if created:
            logger.info(f"Created tables: {', '.join(created)}")

    # ── 2. Reports ────────────────────────────────────────
    service = ReportService()
    names = args.reports or list(ReportService.REPORTS)
    for index, name in enumerate(names):
        if index:
            print()
        for line in service.build(name):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
