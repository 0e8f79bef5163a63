"""Unit tests for mockevm.store."""

from __future__ import annotations

from pathlib import Path

import pytest

from mockevm.cache import TimedCache
from mockevm.errors import DataUnavailable
from mockevm.models import CandidateRecord
from mockevm.store import CandidateStore, read_source


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def sample_csv(tmp_path: Path) -> Path:
    """Write a small constituency-first source file."""
    path = tmp_path / "candidates.csv"
    path.write_text(
        "AC,District,Candidate,Phase,Ballot\n"
        "12-Kallio,Helsinki,Mika,Phase 1,1\n"
        "5-Laurea,Uusimaa,Aino,Phase 1,2\n",
        encoding="utf-8",
    )
    return path


def _store(path: Path, clock: FakeClock) -> CandidateStore:
    cache: TimedCache[tuple[CandidateRecord, ...]] = TimedCache(
        ttl_s=300, clock=clock
    )
    return CandidateStore(str(path), cache)


class TestReadSource:
    """Tests for reading the source file."""

    def test_strips_bom(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeffAC,District\n".encode("utf-8"))
        assert read_source(str(path)) == "AC,District\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataUnavailable) as excinfo:
            read_source(str(tmp_path / "missing.csv"))
        assert excinfo.value.path.endswith("missing.csv")
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_bad_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"AC,District\n5-Laur\xe9a,D,C,P,1\n")
        with pytest.raises(DataUnavailable):
            read_source(str(path))


class TestCandidateStore:
    """Tests for load, cache hit, and refresh behaviour."""

    def test_first_load_not_cached(self, sample_csv: Path) -> None:
        records, cached = _store(sample_csv, FakeClock()).get_candidates()
        assert cached is False
        assert [r.constituency_number for r in records] == [5, 12]

    def test_second_load_within_window_cached(self, sample_csv: Path) -> None:
        clock = FakeClock()
        store = _store(sample_csv, clock)
        first, _ = store.get_candidates()
        clock.now += 60
        second, cached = store.get_candidates()
        assert cached is True
        assert second is first

    def test_cache_hit_does_not_reread(self, sample_csv: Path) -> None:
        clock = FakeClock()
        store = _store(sample_csv, clock)
        store.get_candidates()
        sample_csv.unlink()
        clock.now += 299
        records, cached = store.get_candidates()
        assert cached is True
        assert len(records) == 2

    def test_reparse_after_window(self, sample_csv: Path) -> None:
        clock = FakeClock()
        store = _store(sample_csv, clock)
        store.get_candidates()
        sample_csv.write_text(
            "AC,District,Candidate,Phase,Ballot\n1-Uusi,Espoo,Leena,Phase 2,1\n",
            encoding="utf-8",
        )
        clock.now += 301
        records, cached = store.get_candidates()
        assert cached is False
        assert [r.candidate_name for r in records] == ["Leena"]

    def test_cached_set_is_immutable(self, sample_csv: Path) -> None:
        clock = FakeClock()
        store = _store(sample_csv, clock)
        records, _ = store.get_candidates()
        assert isinstance(records, tuple)
        with pytest.raises(AttributeError):
            records.clear()  # type: ignore[attr-defined]

        copy = list(records)
        copy.clear()
        clock.now += 10
        again, cached = store.get_candidates()
        assert cached is True
        assert [r.constituency_number for r in again] == [5, 12]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        store = _store(tmp_path / "missing.csv", FakeClock())
        with pytest.raises(DataUnavailable):
            store.get_candidates()

    def test_failed_refresh_keeps_nothing_cached(self, tmp_path: Path) -> None:
        store = _store(tmp_path / "missing.csv", FakeClock())
        with pytest.raises(DataUnavailable):
            store.get_candidates()
        assert store.cache.get() is None

    def test_empty_file_yields_empty_list(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        records, cached = _store(path, FakeClock()).get_candidates()
        assert records == ()
        assert cached is False

    def test_default_cache_created(self, sample_csv: Path) -> None:
        store = CandidateStore(str(sample_csv))
        assert store.cache.ttl_s == 300
