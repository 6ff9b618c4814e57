from __future__ import annotations
from datetime import datetime, timedelta

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from jobcatalog.core.constants import UNKNOWN_EMPLOYERS
from jobcatalog.models.job import Job
from jobcatalog.schemas.filters import JobFilter


def _like(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_job_query(db: Session, params: JobFilter, now: datetime | None = None) -> Query:
    """Catalog view: active canonical postings that the user has not hidden, narrowed by params."""
    query = db.query(Job).filter(
        Job.is_active.is_(True),
        Job.duplicate_of_id.is_(None),
        Job.hidden.is_not(True),
    )

    if params.q:
        like = _like(params.q)
        query = query.filter(
            or_(
                Job.title.ilike(like, escape="\\"),
                Job.title_he.ilike(like, escape="\\"),
                Job.company.ilike(like, escape="\\"),
                Job.description.ilike(like, escape="\\"),
                Job.description_he.ilike(like, escape="\\"),
            )
        )
    if params.category:
        query = query.filter(Job.category == params.category)
    if params.city:
        query = query.filter(Job.city.ilike(_like(params.city), escape="\\"))
    if params.region:
        query = query.filter(Job.region == params.region)

    if params.remote:
        query = query.filter(Job.is_remote.is_(True))
    if params.hybrid:
        query = query.filter(Job.is_hybrid.is_(True))

    if params.job_type:
        query = query.filter(Job.job_type.in_(params.job_type))
    if params.experience_level:
        query = query.filter(Job.experience_level.in_(params.experience_level))
    if params.source:
        query = query.filter(Job.source_site.in_(params.source))

    if params.days_ago and params.days_ago > 0:
        cutoff = (now or datetime.utcnow()) - timedelta(days=params.days_ago)
        query = query.filter(Job.posted_at >= cutoff)

    if params.hide_unknown_employer:
        query = query.filter(
            Job.company.is_not(None),
            Job.company != "",
            Job.company.not_in(UNKNOWN_EMPLOYERS),
        )

    if params.favorites:
        query = query.filter(Job.is_favorite.is_(True))

    # Range overlap: a posting qualifies when its band reaches into the requested one.
    if params.salary_min is not None:
        query = query.filter(Job.salary_max >= params.salary_min)
    if params.salary_max is not None:
        query = query.filter(Job.salary_min <= params.salary_max)

    return query
