from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class RawPosting:
    """A posting as emitted by a site adapter, before normalization.

    Only ``title`` and ``url`` are expected from every site; postings missing either
    are rejected during ingestion.
    """

    title: str | None
    url: str | None
    title_he: str | None = None
    company: str | None = None
    company_verified: bool = False
    location: str | None = None
    city: str | None = None
    region: str | None = None
    description: str | None = None
    description_he: str | None = None
    job_type: str | None = None
    experience_level: str | None = None
    category: str | None = None
    salary: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    skills: list[str] = field(default_factory=list)
    source_url: str | None = None
    posted_at: datetime | str | None = None
    is_remote: bool = False
    is_hybrid: bool = False


class SourceAdapter:
    source_name: str

    def fetch(self) -> list[RawPosting]:
        raise NotImplementedError
