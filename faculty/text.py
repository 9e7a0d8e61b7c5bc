from __future__ import annotations

import re
import unicodedata
from typing import List, Optional


_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_COURSE_SEP = re.compile(r"[,\n]")


def slugify(value: Optional[str]) -> str:
    """'Åsa O'Brien & Co.' -> 'asa-o-brien-and-co'."""
    s = unicodedata.normalize("NFKD", value or "")
    s = s.encode("ascii", "ignore").decode("ascii")
    s = s.lower().strip().replace("&", " and ")
    s = _NON_ALNUM.sub("-", s)
    return s.strip("-")


def safe_link(url: Optional[str]) -> str:
    if not url:
        return ""
    return url if _SCHEME.match(url) else "https://" + url


def split_courses(value: Optional[str]) -> List[str]:
    return [c.strip() for c in _COURSE_SEP.split(value or "") if c.strip()]
