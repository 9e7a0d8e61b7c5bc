from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from faculty.data import FacultyRecord


SEARCH_COLUMNS = ("Name", "Position", "Areas of Research", "Other Affiliations")
ALL_POSITIONS_LABEL = "All positions"


@dataclass(frozen=True)
class DirectoryFilters:
    query: str = ""
    position: str = ""


def normalize_filters(raw: Optional[dict]) -> DirectoryFilters:
    raw = raw or {}
    query = str(raw.get("q") or raw.get("query") or "").strip()
    position = raw.get("position") or ""
    if position == ALL_POSITIONS_LABEL:
        position = ""
    return DirectoryFilters(query=query, position=str(position))


def position_options(records: Iterable[FacultyRecord]) -> List[str]:
    return sorted({r.position for r in records if r.position})


def search_blob(record: FacultyRecord) -> str:
    # joined with spaces, so a query may match across two adjacent columns
    return " ".join(record[c] for c in SEARCH_COLUMNS).lower()


def filter_records(records: Iterable[FacultyRecord], query: str = "", position: str = "") -> List[FacultyRecord]:
    q = (query or "").lower().strip()
    out: List[FacultyRecord] = []
    for record in records:
        if q and q not in search_blob(record):
            continue
        if position and record.position != position:
            continue
        out.append(record)
    return out


def apply_filters(records: Iterable[FacultyRecord], filters: DirectoryFilters) -> List[FacultyRecord]:
    return filter_records(records, filters.query, filters.position)


def count_label(n: int) -> str:
    return f"{n} faculty"
