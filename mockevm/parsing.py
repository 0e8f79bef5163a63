"""Parse candidate source files into ``CandidateRecord`` lists.

The source data is uncurated: rows that are too short, lack a numbered
constituency field, or repeat a constituency already seen are dropped
and counted, never raised.
"""

from __future__ import annotations

import logging
import re

from mockevm.layouts import CONSTITUENCY_FIELD_RE, ColumnLayout, detect_layout
from mockevm.models import CandidateRecord

logger = logging.getLogger(__name__)

DELIMITER = ","

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# First-field values that mark a repeated header line inside the data
HEADER_MARKERS: frozenset[str] = frozenset(
    {
        "ac",
        "ac name",
        "ac_name",
        "assembly",
        "assembly constituency",
        "constituency",
        "district",
        "s.no",
        "s.no.",
        "sno",
        "sr. no.",
    }
)


def is_header_marker(line: str) -> bool:
    """Return True if *line* looks like a (repeated) header row."""
    first = line.split(DELIMITER, 1)[0].strip().lower()
    return first in HEADER_MARKERS


def extract_constituency_number(field: str) -> int | None:
    """Pull the leading number out of a composite "<number>-<name>" field.

    Args:
        field: Raw constituency field (e.g. "29-Runnisaidpur").

    Returns:
        The positive constituency number, or None if absent or zero.
    """
    m = CONSTITUENCY_FIELD_RE.match(field)
    if not m:
        return None
    number = int(m.group(1))
    return number if number > 0 else None


def to_int(value: str) -> int:
    """Read the leading integer of a ballot-position string, 0 if none.

    Trailing text is ignored, so "3rd" reads as 3.
    """
    m = LEADING_INT_RE.match(value)
    return int(m.group(1)) if m else 0


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def parse_row(
    fields: list[str],
    serial: int,
    layout: ColumnLayout | None = None,
) -> CandidateRecord | None:
    """Build one record from a split data row.

    Args:
        fields: Stripped fields of the row.
        serial: Row-assigned serial number.
        layout: Column layout to apply; detected from the row if None.

    Returns:
        The record, or None if the row is malformed.
    """
    if layout is None:
        layout = detect_layout(fields)
    if layout is None or len(fields) < layout.min_fields:
        return None

    composite = fields[layout.constituency]
    number = extract_constituency_number(composite)
    if number is None:
        return None

    return CandidateRecord(
        serial=serial,
        district=fields[layout.district],
        constituency_number=number,
        constituency_name=composite,
        candidate_name=fields[layout.candidate_name],
        election_phase=fields[layout.election_phase],
        ballot_position=to_int(fields[layout.ballot_position]),
        district_localized=_field(fields, layout.district_localized),
        constituency_name_localized=_field(fields, layout.constituency_localized),
        candidate_name_localized=_field(fields, layout.candidate_name_localized),
    )


def parse_candidates(text: str) -> list[CandidateRecord]:
    """Parse the full text of a candidate source file.

    The first line is always treated as the header. Later duplicates of
    a constituency number are discarded (first occurrence wins).

    Args:
        text: Decoded file contents.

    Returns:
        Records sorted ascending by constituency number. Empty if no
        row is valid.
    """
    lines = text.split("\n")
    records: list[CandidateRecord] = []
    seen: set[int] = set()
    skipped = 0

    for serial, raw in enumerate(lines[1:], start=1):
        line = raw.strip()
        if not line or is_header_marker(line):
            continue

        fields = [f.strip() for f in line.split(DELIMITER)]
        record = parse_row(fields, serial)
        if record is None:
            logger.debug("Skipping malformed row %d: %r", serial, line)
            skipped += 1
            continue
        if record.constituency_number in seen:
            logger.debug(
                "Skipping duplicate constituency %d on row %d",
                record.constituency_number,
                serial,
            )
            skipped += 1
            continue

        seen.add(record.constituency_number)
        records.append(record)

    records.sort(key=lambda r: r.constituency_number)
    logger.info("Parsed %d candidates (%d rows skipped).", len(records), skipped)
    return records
