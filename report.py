"""Post-run reporting: summary tables and charts for the enriched paper batch.

Files written to REPORT_DIR on every non-dry-run:

  papers_enriched.csv      one row per paper, all derived columns.
  counts_by_<dim>.csv      paper counts per decade / journal / field /
                           method / topic, most frequent first.
  decade_by_topic.csv      decade x topic cross-tabulation.
  *.png                    bar charts of the same distributions.

Also runnable standalone against a saved snapshot:
    python report.py [snapshot.pkl]
"""

from __future__ import annotations

import csv
import logging
import os
from collections import Counter
from pathlib import Path
from typing import Any

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from models import PaperRecord  # noqa: E402
from pipeline import summarize  # noqa: E402

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configurable paths / limits
# ---------------------------------------------------------------------------

# Overridable via REPORT_DIR / TOP_JOURNALS_N, read when a report is generated.
_DEFAULT_REPORT_DIR = "reports"
_DEFAULT_TOP_JOURNALS_N = 15

ENRICHED_CSV_NAME = "papers_enriched.csv"
DECADE_BY_TOPIC_CSV_NAME = "decade_by_topic.csv"
COUNT_DIMENSIONS = ("decade", "journal", "field", "method", "topic")
MISSING_LABEL = "(none)"

# ---------------------------------------------------------------------------
# Output schemas
# ---------------------------------------------------------------------------

ENRICHED_COLUMNS = [
    "id",
    "first_author_year",
    "first_author",
    "authors",
    "year",
    "decade",
    "title",
    "journal",
    "field",
    "method",
    "topic",
    "citation",
    "abstract",
]

COUNT_COLUMNS = ["value", "count", "share"]

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_csv(path: Path, columns: list[str], rows: list[dict]) -> None:
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)


def _blank(value: Any) -> Any:
    return "" if value is None else value


def _decade_sort_key(decade: str) -> int:
    try:
        return int(decade.rstrip("s"))
    except ValueError:
        return 10_000  # MISSING_LABEL sorts last


# ---------------------------------------------------------------------------
# Table builders
# ---------------------------------------------------------------------------


def build_enriched_rows(records: list[PaperRecord]) -> list[dict]:
    return [{col: _blank(getattr(r, col)) for col in ENRICHED_COLUMNS} for r in records]


def build_count_rows(counter: Counter, total: int) -> list[dict]:
    """Most frequent first; ties keep alphabetical order."""
    ordered = sorted(counter.items(), key=lambda kv: (-kv[1], str(kv[0])))
    return [
        {
            "value": value,
            "count": count,
            "share": round(count / total, 3) if total else 0.0,
        }
        for value, count in ordered
    ]


def build_decade_by_topic(records: list[PaperRecord]) -> tuple[list[str], list[dict]]:
    """Return (columns, rows) for the decade x topic cross-tabulation."""
    topics = sorted({r.topic or MISSING_LABEL for r in records})
    table: dict[str, Counter] = {}
    for r in records:
        table.setdefault(r.decade or MISSING_LABEL, Counter())[r.topic or MISSING_LABEL] += 1

    rows = []
    for decade in sorted(table, key=_decade_sort_key):
        row: dict[str, Any] = {"decade": decade}
        row.update({topic: table[decade].get(topic, 0) for topic in topics})
        row["total"] = sum(table[decade].values())
        rows.append(row)
    return ["decade", *topics, "total"], rows


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------


def _bar_chart(items: list[tuple[Any, int]], title: str, xlabel: str, path: Path, horizontal: bool = False) -> None:
    labels = [str(k) for k, _ in items]
    values = [v for _, v in items]
    fig, ax = plt.subplots(figsize=(10, 6))
    if horizontal:
        ax.barh(labels[::-1], values[::-1], color="steelblue")
        ax.set_xlabel("Papers")
        ax.set_ylabel(xlabel)
    else:
        ax.bar(labels, values, color="steelblue")
        ax.set_xlabel(xlabel)
        ax.set_ylabel("Papers")
        ax.tick_params(axis="x", rotation=30)
    ax.set_title(title)
    plt.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def plot_decade_by_topic(records: list[PaperRecord], path: Path) -> None:
    """Stacked bar chart: papers per decade, one segment per topic."""
    columns, rows = build_decade_by_topic(records)
    topics = columns[1:-1]
    decades = [row["decade"] for row in rows]

    fig, ax = plt.subplots(figsize=(10, 6))
    bottom = [0] * len(rows)
    for topic in topics:
        heights = [row[topic] for row in rows]
        ax.bar(decades, heights, bottom=bottom, label=topic)
        bottom = [b + h for b, h in zip(bottom, heights)]
    ax.set_xlabel("Decade")
    ax.set_ylabel("Papers")
    ax.set_title("Papers per decade by topic")
    if topics:
        ax.legend()
    plt.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def generate_charts(records: list[PaperRecord], output_dir: Path) -> list[Path]:
    top_n = int(os.environ.get("TOP_JOURNALS_N", _DEFAULT_TOP_JOURNALS_N))
    summary = summarize(records)
    written: list[Path] = []

    path = output_dir / "decade_by_topic.png"
    plot_decade_by_topic(records, path)
    written.append(path)

    charts = (
        ("field", "Papers per research field", "Field", False),
        ("method", "Papers per method", "Method", False),
    )
    for dim, title, xlabel, horizontal in charts:
        path = output_dir / f"{dim}_distribution.png"
        _bar_chart(summary[dim].most_common(), title, xlabel, path, horizontal=horizontal)
        written.append(path)

    path = output_dir / "top_journals.png"
    _bar_chart(
        summary["journal"].most_common(top_n),
        f"Top {top_n} journals",
        "Journal",
        path,
        horizontal=True,
    )
    written.append(path)
    return written


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def generate_reports(
    records: list[PaperRecord],
    report_dir: str | Path | None = None,
    charts: bool = True,
) -> list[Path]:
    """Write the enriched table, count tables and (optionally) charts.

    Returns the paths written, in write order.
    """
    if not records:
        LOGGER.warning("report: no records to report on")
        return []

    output_dir = Path(report_dir or os.environ.get("REPORT_DIR", _DEFAULT_REPORT_DIR))
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    path = output_dir / ENRICHED_CSV_NAME
    _write_csv(path, ENRICHED_COLUMNS, build_enriched_rows(records))
    written.append(path)

    summary = summarize(records)
    for dim in COUNT_DIMENSIONS:
        path = output_dir / f"counts_by_{dim}.csv"
        _write_csv(path, COUNT_COLUMNS, build_count_rows(summary[dim], len(records)))
        written.append(path)

    columns, rows = build_decade_by_topic(records)
    path = output_dir / DECADE_BY_TOPIC_CSV_NAME
    _write_csv(path, columns, rows)
    written.append(path)

    if charts:
        written.extend(generate_charts(records, output_dir))

    LOGGER.info("report: %d files for %d papers → %s", len(written), len(records), output_dir)
    return written


# ---------------------------------------------------------------------------
# Standalone execution
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    from dotenv import find_dotenv, load_dotenv

    from snapshot import read_snapshot

    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    snapshot_path = sys.argv[1] if len(sys.argv) > 1 else None
    paths = generate_reports(read_snapshot(snapshot_path))
    print(f"Wrote {len(paths)} report files")
