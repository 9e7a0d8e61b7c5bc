from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class DirectoryFiltersModel(BaseModel):
    q: str = ""
    position: str = ""


class FacultyListResponse(BaseModel):
    count: int
    faculty: List[Dict[str, str]] = Field(default_factory=list)


class PositionsResponse(BaseModel):
    positions: List[str]
