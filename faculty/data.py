from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import httpx
import pandas as pd

from faculty.config import DirectoryConfig
from faculty.csv_text import parse_csv
from faculty.text import slugify


logger = logging.getLogger(__name__)

NAME = "Name"
POSITION = "Position"


class FetchError(Exception):
    """The published sheet answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(f"CSV fetch failed: {status_code}")
        self.status_code = status_code


@dataclass(frozen=True)
class FacultyRecord:
    fields: Mapping[str, str] = field(default_factory=dict)
    id: str = ""
    photo_path: str = ""

    def get(self, column: str, default: str = "") -> str:
        return self.fields.get(column, default)

    def __getitem__(self, column: str) -> str:
        return self.fields.get(column, "")

    @property
    def name(self) -> str:
        return self.get(NAME)

    @property
    def position(self) -> str:
        return self.get(POSITION)

    def to_dict(self) -> Dict[str, str]:
        out = dict(self.fields)
        out["id"] = self.id
        out["photoPath"] = self.photo_path
        return out


def build_records(rows: Sequence[Sequence[str]], config: DirectoryConfig) -> List[FacultyRecord]:
    """Map tokenized rows (header first) to records, dropping rows without a Name."""
    if not rows:
        return []

    headers = [h.strip() for h in rows[0]]
    records: List[FacultyRecord] = []
    for row in rows[1:]:
        values: Dict[str, str] = {}
        for i, header in enumerate(headers):
            values[header] = (row[i] if i < len(row) else "").strip()
        name = values.get(NAME, "")
        if not name:
            continue
        slug = slugify(name)
        records.append(
            FacultyRecord(
                fields=MappingProxyType(values),
                id=slug,
                photo_path=config.photo_path(slug),
            )
        )
    return records


def records_to_frame(records: Iterable[FacultyRecord]) -> pd.DataFrame:
    rows = [r.to_dict() for r in records]
    if not rows:
        return pd.DataFrame(columns=[NAME, POSITION, "id", "photoPath"])
    return pd.DataFrame(rows).fillna("")


class FacultyLoader:
    """Fetches the published sheet and turns it into FacultyRecords.

    Every ``load()`` call goes back to the network; callers that want to keep
    records around for a page view hold on to the returned list themselves.
    """

    def __init__(self, config: DirectoryConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    async def fetch_csv(self) -> str:
        async with httpx.AsyncClient(
            timeout=self.config.fetch_timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(self.config.source_url)
        if not response.is_success:
            raise FetchError(response.status_code)
        return response.content.decode("utf-8-sig")

    async def load(self) -> List[FacultyRecord]:
        text = await self.fetch_csv()
        rows = parse_csv(text)
        records = build_records(rows, self.config)
        logger.info("Loaded %d faculty records from %d csv rows", len(records), len(rows))
        return records
