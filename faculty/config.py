from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


DEFAULT_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vTDh5KRyHBv2oVhE5ErC4ow0KKsapv5TTZek7rV1ZbWANn3nRR4vFxXZ3WjTGrpt9FLEtQq6EoX2rbt"
    "/pub?gid=0&single=true&output=csv"
)


@dataclass(frozen=True)
class DirectoryConfig:
    source_url: str = DEFAULT_CSV_URL
    photos_dir: str = "photos"
    photo_ext: str = ".jpg"
    # None: wait on the sheet indefinitely
    fetch_timeout: Optional[float] = None

    def photo_path(self, slug: str) -> str:
        return f"{self.photos_dir.rstrip('/')}/{slug}{self.photo_ext}"


def _as_timeout(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


def load_config() -> DirectoryConfig:
    """Build the config from FACULTY_* environment variables (and a local .env)."""
    load_dotenv()
    return DirectoryConfig(
        source_url=os.getenv("FACULTY_CSV_URL") or DEFAULT_CSV_URL,
        photos_dir=os.getenv("FACULTY_PHOTOS_DIR") or "photos",
        photo_ext=os.getenv("FACULTY_PHOTO_EXT") or ".jpg",
        fetch_timeout=_as_timeout(os.getenv("FACULTY_FETCH_TIMEOUT")),
    )


@lru_cache(maxsize=1)
def get_config() -> DirectoryConfig:
    return load_config()
