"""Column layouts for the supported candidate source-file variants.

Source files come in two column orders: constituency first, or district
first. Each variant is described by a ``ColumnLayout`` and registered
under a short name; ``detect_layout`` picks one per row by sniffing which
of the first two fields carries the ``"<number>-<name>"`` composite.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ── Compiled patterns ──────────────────────────────────────────────────────

CONSTITUENCY_FIELD_RE = re.compile(r"^\s*(\d+)-")


@dataclass(frozen=True)
class ColumnLayout:
    """Positional column indexes for one source-file variant.

    Attributes:
        name: Registry key.
        constituency: Index of the composite "<number>-<name>" field.
        district: Index of the district field.
        candidate_name: Index of the candidate name.
        election_phase: Index of the election phase label.
        ballot_position: Index of the ballot position.
        district_localized: Index of the localized district (optional).
        constituency_localized: Index of the localized AC name (optional).
        candidate_name_localized: Index of the localized candidate name
            (optional).
        min_fields: Rows with fewer fields than this are skipped.
    """

    name: str
    constituency: int
    district: int
    candidate_name: int
    election_phase: int
    ballot_position: int
    district_localized: int
    constituency_localized: int
    candidate_name_localized: int
    min_fields: int = 5

    def required_indexes(self) -> tuple[int, ...]:
        return (
            self.constituency,
            self.district,
            self.candidate_name,
            self.election_phase,
            self.ballot_position,
        )

    def validate(self) -> None:
        """Check the index table is usable.

        Raises:
            ValueError: If indexes collide, are negative, or a required
                index falls outside ``min_fields``.
        """
        indexes = self.required_indexes() + (
            self.district_localized,
            self.constituency_localized,
            self.candidate_name_localized,
        )
        if len(set(indexes)) != len(indexes):
            raise ValueError(f"Layout {self.name!r} has duplicate column indexes")
        if min(indexes) < 0:
            raise ValueError(f"Layout {self.name!r} has a negative column index")
        if max(self.required_indexes()) >= self.min_fields:
            raise ValueError(
                f"Layout {self.name!r} requires a column beyond min_fields="
                f"{self.min_fields}"
            )


LAYOUT_REGISTRY: dict[str, ColumnLayout] = {}


def register_layout(layout: ColumnLayout) -> None:
    """Validate a layout and register it under its name.

    Args:
        layout: The layout to register.

    Raises:
        ValueError: If the layout fails validation.
    """
    layout.validate()
    LAYOUT_REGISTRY[layout.name] = layout


def get_layout(name: str) -> ColumnLayout:
    """Retrieve a registered layout by name.

    Args:
        name: Lookup key.

    Returns:
        The layout.

    Raises:
        KeyError: If the name is not registered.
    """
    return LAYOUT_REGISTRY[name]


CONSTITUENCY_FIRST = ColumnLayout(
    name="constituency_first",
    constituency=0,
    district=1,
    candidate_name=2,
    election_phase=3,
    ballot_position=4,
    district_localized=5,
    constituency_localized=6,
    candidate_name_localized=7,
)

# Column 5 is unused in this variant
DISTRICT_FIRST = ColumnLayout(
    name="district_first",
    constituency=1,
    district=0,
    candidate_name=2,
    election_phase=3,
    ballot_position=4,
    district_localized=6,
    constituency_localized=7,
    candidate_name_localized=8,
)

register_layout(CONSTITUENCY_FIRST)
register_layout(DISTRICT_FIRST)


def detect_layout(fields: list[str]) -> ColumnLayout | None:
    """Pick the layout whose constituency column holds a numbered AC field.

    Field 0 is checked first, so a row where both leading fields look
    numbered is read as constituency-first.

    Args:
        fields: The split fields of one data row.

    Returns:
        The matching layout, or None if neither leading field matches.
    """
    if fields and CONSTITUENCY_FIELD_RE.match(fields[0]):
        return get_layout(CONSTITUENCY_FIRST.name)
    if len(fields) > 1 and CONSTITUENCY_FIELD_RE.match(fields[1]):
        return get_layout(DISTRICT_FIRST.name)
    return None
