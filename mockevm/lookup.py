"""Candidate lookup with optional free-text filtering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mockevm.models import CandidateRecord
from mockevm.store import CandidateStore


@dataclass
class LookupResult:
    """Outcome of a successful lookup.

    Attributes:
        data: Matching records in constituency order.
        cached: Whether the underlying set came from the cache.
        total: Number of matching records.
    """

    data: list[CandidateRecord]
    cached: bool
    total: int = field(init=False)

    def __post_init__(self) -> None:
        self.total = len(self.data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "data": [r.to_dict() for r in self.data],
            "total": self.total,
            "cached": self.cached,
        }


def matches(record: CandidateRecord, search: str) -> bool:
    """Return True if *search* occurs in any searchable field of *record*.

    Primary-language fields compare case-insensitively; localized fields
    require an exact substring.

    Args:
        record: Candidate to test.
        search: Non-empty query string.

    Returns:
        Whether the record matches.
    """
    needle = search.lower()
    return (
        needle in record.constituency_name.lower()
        or needle in record.candidate_name.lower()
        or needle in record.district.lower()
        or search in record.constituency_name_localized
        or search in record.candidate_name_localized
        or search in record.district_localized
    )


class LookupService:
    """Answers candidate queries on top of a ``CandidateStore``."""

    def __init__(self, store: CandidateStore) -> None:
        self.store = store

    def list(self, search: str | None = None) -> LookupResult:
        """Return all candidates, or those matching *search*.

        Args:
            search: Optional query; empty or None means no filter.

        Returns:
            The filtered records, their count, and the cache flag.

        Raises:
            DataUnavailable: If the store cannot load the source file.
        """
        records, cached = self.store.get_candidates()
        if search:
            data = [r for r in records if matches(r, search)]
        else:
            data = list(records)
        return LookupResult(data=data, cached=cached)
