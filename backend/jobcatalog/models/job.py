from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobcatalog.db.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    title: Mapped[str] = mapped_column(String(512), nullable=False)
    title_he: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(256), nullable=True, index=True)
    company_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    location: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(128), nullable=True, index=True)
    region: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    is_remote: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_hybrid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description_he: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    category: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    job_type: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    experience_level: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    skills: Mapped[list] = mapped_column(JSON, default=list, nullable=False)

    salary: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    salary_min: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    salary_max: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # url is the business key; a re-scrape of the same url is a merge, never a new row
    url: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False)
    source_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    source_site: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    posted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, index=True)
    last_seen_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    # Always points at a canonical row (one whose own duplicate_of_id is null).
    duplicate_of_id: Mapped[Optional[int]] = mapped_column(ForeignKey("jobs.id"), nullable=True, index=True)
    fingerprint: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)

    hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    sent_cv: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    @property
    def is_canonical(self) -> bool:
        return self.duplicate_of_id is None
