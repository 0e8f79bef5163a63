"""Tests for the mockevm CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mockevm.__main__ import build_parser, main


@pytest.fixture()
def sample_csv(tmp_path: Path) -> str:
    path = tmp_path / "candidates.csv"
    path.write_text(
        "AC,District,Candidate,Phase,Ballot\n"
        "12-Kallio,Helsinki,Mika,Phase 1,1\n"
        "5-Laurea,Uusimaa,Aino,Phase 1,2\n",
        encoding="utf-8",
    )
    return str(path)


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.ttl == 300
        assert args.search is None
        assert args.export is None

    def test_search_and_export_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--search", "x", "--export", "out.csv"])


class TestMain:
    """Tests for one-shot CLI modes."""

    def test_search_prints_json(
        self, sample_csv: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--csv", sample_csv, "--search", "laurea"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert body["total"] == 1
        assert body["data"][0]["constituencyNumber"] == 5

    def test_export(self, sample_csv: str, tmp_path: Path) -> None:
        out = tmp_path / "out.csv"
        assert main(["--csv", sample_csv, "--export", str(out)]) == 0
        assert out.read_text(encoding="utf-8").count("\n") == 3

    def test_missing_file_exit_code(self, tmp_path: Path) -> None:
        assert main(["--csv", str(tmp_path / "missing.csv"), "--search", "x"]) == 1
