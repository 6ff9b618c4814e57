from __future__ import annotations
import logging
import time
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Callable, Iterable

from sqlalchemy import desc
from sqlalchemy.orm import Session

from jobcatalog.core.config import settings
from jobcatalog.core.constants import SOURCE_SITES
from jobcatalog.crawlers.base import RawPosting, SourceAdapter
from jobcatalog.crawlers.registry import ADAPTERS
from jobcatalog.models.job import Job
from jobcatalog.models.scrape_run import ScrapeRun
from jobcatalog.services.dedupe import Action, DuplicateResolver
from jobcatalog.services.merge import merge_fields, merge_posting, sweep_stale
from jobcatalog.services.normalizer import NormalizedPosting, normalize_posting
from jobcatalog.services.store import ConflictOnKey, insert_job

logger = logging.getLogger(__name__)


@dataclass
class IngestStats:
    found: int = 0
    inserted: int = 0
    duplicates: int = 0
    merged: int = 0
    errors: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def _build_record(posting: NormalizedPosting, duplicate_of_id: int | None, now: datetime) -> Job:
    return Job(
        title=posting.title,
        title_he=posting.title_he,
        company=posting.company,
        company_verified=posting.company_verified,
        location=posting.location,
        city=posting.city,
        region=posting.region,
        is_remote=posting.is_remote,
        is_hybrid=posting.is_hybrid,
        description=posting.description,
        description_he=posting.description_he,
        category=posting.category,
        job_type=posting.job_type,
        experience_level=posting.experience_level,
        skills=posting.skills,
        salary=posting.salary,
        salary_min=posting.salary_min,
        salary_max=posting.salary_max,
        url=posting.url,
        source_url=posting.source_url,
        source_site=posting.source_site,
        posted_at=posting.posted_at,
        last_seen_at=now,
        is_active=True,
        duplicate_of_id=duplicate_of_id,
        fingerprint=posting.fingerprint,
    )


def _merge_into(db: Session, job_id: int, posting: NormalizedPosting, now: datetime) -> str:
    existing = db.get(Job, job_id)
    if existing is None:
        raise LookupError(f"merge target job_id={job_id} disappeared")
    merge_posting(existing, posting, now)
    db.commit()
    return "merged"


def process_posting(db: Session, posting: NormalizedPosting, resolver: DuplicateResolver) -> str:
    """Resolve and persist one normalized posting.

    Returns "merged", "duplicate" or "inserted".
    """
    now = datetime.utcnow()
    resolution = resolver.resolve(posting)

    if resolution.action is Action.MERGE:
        return _merge_into(db, resolution.target_id, posting, now)

    duplicate_of_id = resolution.target_id if resolution.action is Action.MARK_DUPLICATE else None
    result = insert_job(db, _build_record(posting, duplicate_of_id, now))
    if isinstance(result, ConflictOnKey):
        # Another run stored the same url between our lookup and insert.
        logger.debug("Insert race on %s, merging into job_id=%s", posting.url, result.existing_id)
        return _merge_into(db, result.existing_id, posting, now)

    if duplicate_of_id is None:
        return "inserted"

    canonical = db.get(Job, duplicate_of_id)
    if canonical is not None and merge_fields(canonical, posting):
        db.commit()
    return "duplicate"


def ingest_batch(
    db: Session,
    source_site: str,
    raw_postings: Iterable[RawPosting],
    resolver: DuplicateResolver | None = None,
) -> IngestStats:
    resolver = resolver or DuplicateResolver(db)
    stats = IngestStats()

    for raw in raw_postings:
        stats.found += 1
        try:
            posting = normalize_posting(raw, source_site)
            if posting is None:
                stats.errors += 1
                logger.debug("%s: skipping posting without title or url", source_site)
                continue
            outcome = process_posting(db, posting, resolver)
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            stats.errors += 1
            logger.error("Error saving job from %s: title=%r error=%s", source_site, getattr(raw, "title", None), exc)
            continue

        if outcome == "inserted":
            stats.inserted += 1
        elif outcome == "duplicate":
            stats.duplicates += 1
        else:
            stats.merged += 1

    logger.info(
        "%s: %d unique, %d duplicates, %d merged, %d errors",
        source_site, stats.inserted, stats.duplicates, stats.merged, stats.errors,
    )
    return stats


def run_source(db: Session, source_site: str, adapter: SourceAdapter) -> dict:
    run = ScrapeRun(site=source_site, started_at=datetime.utcnow(), status="running")
    db.add(run)
    db.commit()
    db.refresh(run)

    started = time.monotonic()
    stats = IngestStats()
    error: str | None = None
    logger.info("Starting scrape for %s...", source_site)

    try:
        # Drained before any write, so a fetch that fails partway stores nothing.
        raw_postings = list(adapter.fetch())
        stats = ingest_batch(db, source_site, raw_postings)
        run.status = "success"
    except Exception as exc:  # noqa: BLE001
        db.rollback()
        error = str(exc)
        run.status = "failed"
        run.error_summary = error[: settings.error_summary_limit]
        logger.error("Scrape failed for %s: %s", source_site, exc)

    run.found_count = stats.found
    run.new_count = stats.inserted + stats.duplicates
    run.updated_count = stats.merged
    run.duplicate_count = stats.duplicates
    run.error_count = stats.errors
    run.duration_ms = int((time.monotonic() - started) * 1000)
    run.finished_at = datetime.utcnow()
    db.add(run)
    db.commit()

    return {
        "site": source_site,
        "status": run.status,
        "jobs_found": run.found_count,
        "jobs_new": run.new_count,
        "jobs_updated": run.updated_count,
        "duplicates": run.duplicate_count,
        "errors": run.error_count,
        "duration_ms": run.duration_ms,
        "error": error,
    }


def run_cycle(
    db: Session,
    site_ids: list[str] | None = None,
    *,
    delay_seconds: float | None = None,
    staleness_hours: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict:
    """Scrape sites one after another, then deactivate stale postings per source."""
    sites = list(site_ids) if site_ids else list(SOURCE_SITES)
    delay_seconds = settings.site_delay_seconds if delay_seconds is None else delay_seconds
    staleness_hours = settings.staleness_hours if staleness_hours is None else staleness_hours

    runnable: list[tuple[str, type[SourceAdapter]]] = []
    for site_id in sites:
        adapter_cls = ADAPTERS.get(site_id)
        if adapter_cls is None:
            logger.warning("Skipping %s: scraper not available", site_id)
            continue
        runnable.append((site_id, adapter_cls))

    results: list[dict] = []
    for index, (site_id, adapter_cls) in enumerate(runnable):
        try:
            results.append(run_source(db, site_id, adapter_cls()))
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            logger.error("Scraper %s threw an unexpected error: %s", site_id, exc)
            results.append({"site": site_id, "status": "failed", "error": str(exc)})

        if index < len(runnable) - 1 and delay_seconds > 0:
            sleep(delay_seconds)

    deactivated = 0
    for site_id in dict.fromkeys([*SOURCE_SITES, *sites]):
        try:
            deactivated += sweep_stale(db, site_id, staleness_hours)
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            logger.error("Stale sweep failed for %s: %s", site_id, exc)

    succeeded = [r for r in results if r["status"] == "success"]
    failed = [r["site"] for r in results if r["status"] == "failed"]
    summary = {
        "sources": results,
        "succeeded": len(succeeded),
        "failed_sources": failed,
        "jobs_found": sum(r.get("jobs_found", 0) for r in succeeded),
        "jobs_new": sum(r.get("jobs_new", 0) for r in succeeded),
        "deactivated": deactivated,
    }
    logger.info(
        "Scraping complete: %d succeeded, %d failed, %d total jobs, %d new",
        summary["succeeded"], len(failed), summary["jobs_found"], summary["jobs_new"],
    )
    return summary


def list_runs(db: Session, limit: int = 100) -> list[ScrapeRun]:
    return db.query(ScrapeRun).order_by(desc(ScrapeRun.started_at), desc(ScrapeRun.id)).limit(limit).all()
