"""Candidate store: loads the source file and amortizes re-reads.

The parsed set is kept in a ``TimedCache`` owned by the store. Concurrent
callers that miss the cache at the same time each re-parse the file and
the last one to finish becomes the cached set; parsing is idempotent so
this only costs a redundant read.
"""

from __future__ import annotations

import logging
import pathlib
from typing import NamedTuple

from mockevm.cache import TimedCache
from mockevm.errors import DataUnavailable
from mockevm.models import CANDIDATES_CSV, CandidateRecord
from mockevm.parsing import parse_candidates

logger = logging.getLogger(__name__)


class StoreResult(NamedTuple):
    """Records returned by the store and whether they came from cache."""

    records: tuple[CandidateRecord, ...]
    cached: bool


def read_source(path: str) -> str:
    """Read the candidate source file as text.

    Args:
        path: Filesystem path to the delimited source file.

    Returns:
        The decoded contents, with any UTF-8 BOM removed.

    Raises:
        DataUnavailable: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        return pathlib.Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataUnavailable(path, str(exc)) from exc


class CandidateStore:
    """Produces the authoritative in-memory candidate set.

    Args:
        path: Source file path.
        cache: Cache slot to use; a fresh 5-minute cache if None.
    """

    def __init__(
        self,
        path: str = CANDIDATES_CSV,
        cache: TimedCache[tuple[CandidateRecord, ...]] | None = None,
    ) -> None:
        self.path = path
        self.cache: TimedCache[tuple[CandidateRecord, ...]] = (
            cache if cache is not None else TimedCache()
        )

    def get_candidates(self) -> StoreResult:
        """Return the candidate set, re-parsing the file when stale.

        Returns:
            A ``StoreResult``; ``cached`` is False when the file was read.

        Raises:
            DataUnavailable: If the source file cannot be read.
        """
        records = self.cache.get()
        if records is not None:
            logger.debug("Candidate cache hit (age %.1fs).", self.cache.age() or 0.0)
            return StoreResult(records, True)

        logger.info("Loading candidates from %s", self.path)
        records = tuple(parse_candidates(read_source(self.path)))
        self.cache.put(records)
        return StoreResult(records, False)
