"""Literature-table ingestion: spreadsheet or CSV rows -> PaperRecord list."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import pandas as pd

from models import PaperRecord

_DEFAULT_SOURCE_PATH = "papers.xlsx"

LOGGER = logging.getLogger(__name__)

_EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}
_CSV_SUFFIXES = {".csv", ".txt"}
_KNOWN_COLUMNS = {"citation", "abstract", "topic"}


def normalize_column_name(name: Any) -> str:
    """'  Citation ' -> 'citation', 'Research Topic' -> 'research_topic'."""
    return re.sub(r"\s+", "_", str(name).strip()).lower()


def read_table(path: str | Path, sheet_name: str | None = None) -> pd.DataFrame:
    """Read the raw table and apply basic cleaning.

    Raises:
        FileNotFoundError: the source file does not exist.
        ValueError: the file extension is neither a spreadsheet nor CSV.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Citation source not found: {path}")

    suffix = path.suffix.lower()
    if suffix in _EXCEL_SUFFIXES:
        df = pd.read_excel(path, sheet_name=sheet_name if sheet_name is not None else 0)
    elif suffix in _CSV_SUFFIXES:
        df = pd.read_csv(path, encoding="utf-8")
    else:
        raise ValueError(f"Unsupported citation source type: {path.suffix}")

    return _clean_dataframe(df)


def _clean_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize column names and drop all-empty rows."""
    df.columns = [normalize_column_name(col) for col in df.columns]
    return df.dropna(how="all").reset_index(drop=True)


def records_from_frame(df: pd.DataFrame) -> list[PaperRecord]:
    """Build records from a cleaned frame; rows without a citation are skipped."""
    if "citation" not in df.columns:
        raise RuntimeError(
            f"Citation source has no 'citation' column (columns: {list(df.columns)})"
        )

    extra_columns = [c for c in df.columns if c not in _KNOWN_COLUMNS]
    records: list[PaperRecord] = []
    skipped = 0
    for row in df.to_dict(orient="records"):
        citation = _as_text(row.get("citation"))
        if not citation:
            skipped += 1
            continue
        records.append(
            PaperRecord(
                citation=citation,
                abstract=_as_text(row.get("abstract")),
                topic=_as_text(row.get("topic")),
                extra={c: _cell(row.get(c)) for c in extra_columns},
            )
        )

    if skipped:
        LOGGER.warning("Skipped %s rows with an empty citation", skipped)
    return records


def load_records(
    path: str | Path | None = None,
    sheet_name: str | None = None,
) -> list[PaperRecord]:
    """Load raw paper records from the configured source.

    Args:
        path: Spreadsheet or CSV file. Reads CITATIONS_SOURCE_PATH env var if
            not supplied; defaults to papers.xlsx.
        sheet_name: Worksheet to read. Reads CITATIONS_SHEET_NAME env var if
            not supplied; defaults to the first sheet.
    """
    source = path or os.environ.get("CITATIONS_SOURCE_PATH", _DEFAULT_SOURCE_PATH)
    sheet = sheet_name if sheet_name is not None else (os.environ.get("CITATIONS_SHEET_NAME") or None)
    df = read_table(source, sheet_name=sheet)
    records = records_from_frame(df)
    LOGGER.info("Loaded %s records (%s rows) from %s", len(records), len(df), source)
    return records


def _cell(value: Any) -> Any:
    """Pandas missing values (NaN/NaT) become None."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _as_text(value: Any) -> str:
    value = _cell(value)
    if value is None:
        return ""
    return str(value).strip()
