from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel


class ScrapeRunOut(BaseModel):
    id: int
    site: str
    status: str
    started_at: datetime
    finished_at: datetime | None
    found_count: int
    new_count: int
    updated_count: int
    duplicate_count: int
    error_count: int
    duration_ms: int
    error_summary: str | None

    class Config:
        from_attributes = True
