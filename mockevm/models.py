"""Shared data containers and defaults for mockevm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CandidateRecord:
    """One candidate entry, keyed by constituency.

    Attributes:
        serial: 1-based index of the data line the record came from.
        district: District name.
        district_localized: District name in the local language.
        constituency_number: Leading number of the composite AC field.
        constituency_name: Raw composite AC field (e.g. "29-Runnisaidpur").
        constituency_name_localized: AC name in the local language.
        candidate_name: Candidate full name.
        candidate_name_localized: Candidate name in the local language.
        election_phase: Voting round label (e.g. "Phase 1").
        ballot_position: Row on the simulated ballot, 0 if unknown.
    """

    serial: int
    district: str
    constituency_number: int
    constituency_name: str
    candidate_name: str
    election_phase: str = ""
    ballot_position: int = 0
    district_localized: str = ""
    constituency_name_localized: str = ""
    candidate_name_localized: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping served to the front end."""
        return {
            "serial": self.serial,
            "district": self.district,
            "districtLocalized": self.district_localized,
            "constituencyNumber": self.constituency_number,
            "constituencyName": self.constituency_name,
            "constituencyNameLocalized": self.constituency_name_localized,
            "candidateName": self.candidate_name,
            "candidateNameLocalized": self.candidate_name_localized,
            "electionPhase": self.election_phase,
            "ballotPosition": self.ballot_position,
        }


# Column order used for tidy CSV exports
EXPORT_COLUMNS: tuple[str, ...] = (
    "serial",
    "district",
    "district_localized",
    "constituency_number",
    "constituency_name",
    "constituency_name_localized",
    "candidate_name",
    "candidate_name_localized",
    "election_phase",
    "ballot_position",
)

# Default source file, relative to the working directory
CANDIDATES_CSV = "public/assets/CandidateNameData.csv"

# Freshness window for the in-memory candidate set
CACHE_TTL_S: float = 5 * 60.0

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
