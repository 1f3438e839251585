"""Single-file snapshot of the enriched batch, written once at the end of a run."""

from __future__ import annotations

import logging
import os
import pickle
from pathlib import Path

from models import PaperRecord

_DEFAULT_SNAPSHOT_PATH = "papers_enriched.pkl"

LOGGER = logging.getLogger(__name__)


def _snapshot_path(path: str | Path | None) -> Path:
    """Explicit path, else SNAPSHOT_PATH env var, else papers_enriched.pkl."""
    return Path(path or os.environ.get("SNAPSHOT_PATH", _DEFAULT_SNAPSHOT_PATH))


def write_snapshot(records: list[PaperRecord], path: str | Path | None = None) -> Path:
    """Pickle the full record list, replacing any previous snapshot."""
    target = _snapshot_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("wb") as fh:
        pickle.dump(list(records), fh, protocol=pickle.HIGHEST_PROTOCOL)

    LOGGER.info("Wrote snapshot of %s records to %s", len(records), target)
    return target


def read_snapshot(path: str | Path | None = None) -> list[PaperRecord]:
    target = _snapshot_path(path)
    with target.open("rb") as fh:
        records = pickle.load(fh)

    if not isinstance(records, list):
        raise RuntimeError(f"Unexpected snapshot payload in {target}: expected a list")
    return records
