"""CLI entrypoint for the citation enrichment pipeline."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv

from pipeline import enrich_records
from record_source import load_records
from report import generate_reports
from snapshot import write_snapshot


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Parse APA citations into year/author/title/journal/field/method and report on them",
    )
    parser.add_argument("--source", default=None, help="Spreadsheet or CSV with a 'citation' column (default: CITATIONS_SOURCE_PATH)")
    parser.add_argument("--sheet", default=None, help="Worksheet name for spreadsheet sources (default: first sheet)")
    parser.add_argument("--snapshot", default=None, help="Where to pickle the enriched records (default: SNAPSHOT_PATH)")
    parser.add_argument("--report-dir", default=None, help="Directory for tables and charts (default: REPORT_DIR)")
    parser.add_argument("--no-charts", action="store_true", help="Write summary tables only, skip PNG charts")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and classify, log the summary, but write no snapshot or reports",
    )
    return parser.parse_args(argv)


def run(
    source: str | None = None,
    sheet: str | None = None,
    snapshot_path: str | None = None,
    report_dir: str | None = None,
    charts: bool = True,
    dry_run: bool = False,
) -> int | None:
    """Run one read -> enrich -> write batch.

    Returns the number of records enriched, or None when the citation source
    cannot be read (nothing is processed or written in that case).
    """
    try:
        records = load_records(source, sheet_name=sheet)
    except (FileNotFoundError, ValueError, RuntimeError) as exc:
        logging.error("Cannot read citation source: %s", exc)
        return None

    enriched = enrich_records(records)

    if dry_run:
        for record in enriched:
            logging.info(
                "[dry-run] #%s %s | %s | %s | %s",
                record.id,
                record.first_author_year,
                record.journal,
                record.field,
                record.method,
            )
        logging.info("[dry-run] Would write %s records", len(enriched))
        return len(enriched)

    write_snapshot(enriched, snapshot_path)

    # Post-run: tables and charts are derived output, the snapshot is already safe.
    try:
        generate_reports(enriched, report_dir=report_dir, charts=charts)
    except Exception as exc:
        logging.warning("Report generation failed (non-fatal): %s", exc)

    logging.info("Run complete. records=%s", len(enriched))
    return len(enriched)


def main(argv: list[str] | None = None) -> int:
    """Initialize config and execute the pipeline."""
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)

    count = run(
        source=args.source,
        sheet=args.sheet,
        snapshot_path=args.snapshot,
        report_dir=args.report_dir,
        charts=not args.no_charts,
        dry_run=args.dry_run,
    )
    return 1 if count is None else 0


if __name__ == "__main__":
    sys.exit(main())
