from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime

from jobcatalog.crawlers.base import RawPosting
from jobcatalog.services.classifiers import classify_category, classify_experience_level, classify_job_type
from jobcatalog.utils.hash import job_fingerprint
from jobcatalog.utils.parsing import detect_region, detect_work_mode, parse_relative_date, parse_salary


@dataclass
class NormalizedPosting:
    title: str
    url: str
    source_site: str
    source_url: str
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
    posted_at: datetime | None = None
    is_remote: bool = False
    is_hybrid: bool = False
    fingerprint: str | None = None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _posted_at(value: datetime | str | None) -> datetime | None:
    if isinstance(value, datetime):
        return value
    return parse_relative_date(value)


def normalize_posting(raw: RawPosting, source_site: str) -> NormalizedPosting | None:
    """Map a site-shaped posting onto the catalog schema.

    Returns None when the posting lacks a title or url; callers count it as an error.
    """
    title = _clean(raw.title)
    url = _clean(raw.url)
    if not title or not url:
        return None

    company = _clean(raw.company)
    city = _clean(raw.city)
    location = _clean(raw.location)
    description = _clean(raw.description)
    salary = _clean(raw.salary)

    salary_min, salary_max = raw.salary_min, raw.salary_max
    if salary_min is None and salary_max is None:
        salary_min, salary_max = parse_salary(salary)

    work_mode = detect_work_mode(f"{title} {description or ''} {location or ''}")

    return NormalizedPosting(
        title=title,
        url=url,
        source_site=source_site,
        source_url=_clean(raw.source_url) or url,
        title_he=_clean(raw.title_he),
        company=company,
        company_verified=bool(raw.company_verified),
        location=location,
        city=city,
        region=detect_region(city or location) or _clean(raw.region),
        description=description,
        description_he=_clean(raw.description_he),
        job_type=classify_job_type(raw.job_type),
        experience_level=classify_experience_level(raw.experience_level),
        category=classify_category(_clean(raw.category) or title),
        salary=salary,
        salary_min=salary_min,
        salary_max=salary_max,
        skills=list(raw.skills or []),
        posted_at=_posted_at(raw.posted_at),
        is_remote=work_mode.is_remote or bool(raw.is_remote),
        is_hybrid=work_mode.is_hybrid or bool(raw.is_hybrid),
        fingerprint=job_fingerprint(title, company, city),
    )
