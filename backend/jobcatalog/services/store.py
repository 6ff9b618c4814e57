from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobcatalog.models.job import Job


@dataclass(frozen=True)
class Inserted:
    job: Job


@dataclass(frozen=True)
class ConflictOnKey:
    existing_id: int


InsertResult = Union[Inserted, ConflictOnKey]


def find_by_url(db: Session, url: str) -> Job | None:
    return db.query(Job).filter(Job.url == url).first()


def find_canonical_by_fingerprint(db: Session, fingerprint: str) -> Job | None:
    return (
        db.query(Job)
        .filter(
            Job.fingerprint == fingerprint,
            Job.is_active.is_(True),
            Job.duplicate_of_id.is_(None),
        )
        .order_by(Job.id.asc())
        .first()
    )


def fuzzy_candidates(db: Session, city: str | None, limit: int) -> list[Job]:
    query = db.query(Job).filter(
        Job.is_active.is_(True),
        Job.duplicate_of_id.is_(None),
        Job.company.is_not(None),
    )
    if city:
        query = query.filter(Job.city == city)
    return query.order_by(Job.last_seen_at.desc()).limit(limit).all()


def canonical_id(db: Session, job_id: int) -> int:
    """Follow duplicate_of_id links until reaching a canonical row."""
    seen: set[int] = set()
    current = job_id
    while current not in seen:
        seen.add(current)
        parent = db.query(Job.duplicate_of_id).filter(Job.id == current).scalar()
        if parent is None:
            return current
        current = parent
    return current


def insert_job(db: Session, record: Job) -> InsertResult:
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = find_by_url(db, record.url)
        if existing is None:
            raise
        return ConflictOnKey(existing_id=existing.id)

    db.refresh(record)
    return Inserted(job=record)
