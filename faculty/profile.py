from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from faculty.data import FacultyRecord
from faculty.text import safe_link


DEGREES = (
    ("BSc", "BSc School"),
    ("MSc", "MSc School"),
    ("PhD", "PhD School"),
)

PROFILE_LINKS = ("Google Scholar", "LinkedIn")


def find_record(records: Iterable[FacultyRecord], faculty_id: Optional[str]) -> Optional[FacultyRecord]:
    """Return the record whose slug equals ``faculty_id``; on duplicate slugs the last one wins."""
    if not faculty_id:
        return None
    found = None
    for record in records:
        if record.id == faculty_id:
            found = record
    return found


def profile_links(record: FacultyRecord) -> List[Tuple[str, str]]:
    return [(label, safe_link(record[label])) for label in PROFILE_LINKS if record[label]]


def degree_history(record: FacultyRecord) -> List[Tuple[str, str]]:
    """(degree, "School, Degree (value)") for each degree column that is filled in."""
    rows = []
    for degree, school_col in DEGREES:
        value = record[degree]
        if not value:
            continue
        rows.append((degree, f"{record[school_col]}, {degree} ({value})"))
    return rows
