from __future__ import annotations

from pydantic import BaseModel, field_validator


class JobFilter(BaseModel):
    q: str | None = None
    category: str | None = None
    city: str | None = None
    region: str | None = None
    remote: bool = False
    hybrid: bool = False
    job_type: list[str] = []
    experience_level: list[str] = []
    source: list[str] = []
    days_ago: int | None = None
    hide_unknown_employer: bool = False
    favorites: bool = False
    salary_min: int | None = None
    salary_max: int | None = None

    @field_validator("job_type", "experience_level", "source", mode="before")
    @classmethod
    def split_csv(cls, value):
        if value is None or value == "":
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("q", "category", "city", "region", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
