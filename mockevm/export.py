"""Write a parsed candidate set to a tidy CSV file."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict

import polars as pl

from mockevm.models import EXPORT_COLUMNS, CandidateRecord

logger = logging.getLogger(__name__)

_INT_COLUMNS = frozenset({"serial", "constituency_number", "ballot_position"})

EXPORT_SCHEMA = {
    name: pl.Int64 if name in _INT_COLUMNS else pl.Utf8 for name in EXPORT_COLUMNS
}


def export_candidates(records: Sequence[CandidateRecord], path: str) -> int:
    """Export *records* as CSV with one snake_case column per field.

    An empty sequence writes a header-only file.

    Args:
        records: Candidates to write, in the order given.
        path: Destination CSV path.

    Returns:
        Number of rows written.
    """
    df = pl.DataFrame([asdict(r) for r in records], schema=EXPORT_SCHEMA)
    df.write_csv(path)
    logger.info("Exported %d candidates to %s", len(df), path)
    return len(df)
