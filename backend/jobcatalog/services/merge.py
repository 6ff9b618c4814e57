from __future__ import annotations
import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from jobcatalog.models.job import Job
from jobcatalog.services.normalizer import NormalizedPosting
from jobcatalog.utils.hash import job_fingerprint

logger = logging.getLogger(__name__)

# Filled on an existing record only while it has no value of its own.
MERGEABLE_FIELDS = (
    "company",
    "salary",
    "salary_min",
    "salary_max",
    "description",
    "category",
    "experience_level",
    "job_type",
)


def _is_empty(value) -> bool:
    return value is None or value == ""


def merge_fields(existing: Job, incoming: NormalizedPosting) -> list[str]:
    filled: list[str] = []
    for name in MERGEABLE_FIELDS:
        new_value = getattr(incoming, name)
        if _is_empty(getattr(existing, name)) and not _is_empty(new_value):
            setattr(existing, name, new_value)
            filled.append(name)

    if "company" in filled:
        existing.fingerprint = job_fingerprint(existing.title, existing.company, existing.city)
    return filled


def merge_posting(existing: Job, incoming: NormalizedPosting, now: datetime | None = None) -> list[str]:
    """Fold a re-scraped posting into its stored record.

    Missing fields are filled in, existing values are kept, and the record is marked as
    seen now and active again.
    """
    now = now or datetime.utcnow()
    filled = merge_fields(existing, incoming)

    if existing.last_seen_at is None or existing.last_seen_at < now:
        existing.last_seen_at = now
    existing.is_active = True
    return filled


def sweep_stale(db: Session, source_site: str, staleness_hours: int = 72, now: datetime | None = None) -> int:
    now = now or datetime.utcnow()
    cutoff = now - timedelta(hours=staleness_hours)

    count = (
        db.query(Job)
        .filter(
            Job.source_site == source_site,
            Job.last_seen_at < cutoff,
            Job.is_active.is_(True),
        )
        .update({Job.is_active: False}, synchronize_session=False)
    )
    db.commit()

    if count:
        logger.info("Marked %d stale jobs from %s as inactive", count, source_site)
    return count
