from __future__ import annotations
from datetime import datetime, timedelta

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jobcatalog.crawlers import registry
from jobcatalog.crawlers.base import RawPosting, SourceAdapter
from jobcatalog.crawlers.registry import ADAPTERS, register_adapter
from jobcatalog.db.database import Base
from jobcatalog.models.job import Job
from jobcatalog.models.scrape_run import ScrapeRun
from jobcatalog.schemas.filters import JobFilter
from jobcatalog.schemas.run import ScrapeRunOut
from jobcatalog.services import store
from jobcatalog.services.filters import build_job_query
from jobcatalog.services.ingest_service import ingest_batch, list_runs, run_cycle, run_source
from jobcatalog.services.store import ConflictOnKey, Inserted, insert_job


def _session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    return TestingSession()


def _qa(url, **extra):
    return RawPosting(title="QA Engineer", url=url, company="Acme", city="Tel Aviv", **extra)


class FakeAdapter(SourceAdapter):
    def fetch(self):
        return [
            _qa("https://alljobs.example/1", salary="₪15,000 - ₪20,000"),
            RawPosting(title="Data Engineer", url="https://alljobs.example/2", company="Beta", city="Haifa"),
            RawPosting(title="", url="https://alljobs.example/3"),
        ]


class FailingAdapter(SourceAdapter):
    def fetch(self):
        raise RuntimeError("site layout changed " + "x" * 2000)


class PartialAdapter(SourceAdapter):
    def fetch(self):
        yield _qa("https://janglo.example/1")
        raise ConnectionError("listing page 2 timed out")


def test_unique_then_rescrape_then_cross_site_duplicate():
    db = _session()

    created = ingest_batch(db, "alljobs", [_qa("https://alljobs.example/1")])
    assert created.inserted == 1
    u1 = store.find_by_url(db, "https://alljobs.example/1")
    assert u1.is_active is True and u1.duplicate_of_id is None

    rescrape = RawPosting(
        title="Different title",
        url="https://alljobs.example/1",
        company="Acme",
        city="Tel Aviv",
        salary="₪15,000 - ₪20,000",
    )
    merged = ingest_batch(db, "alljobs", [rescrape])
    assert merged.merged == 1
    u1 = store.find_by_url(db, "https://alljobs.example/1")
    assert u1.title == "QA Engineer"
    assert u1.salary == "₪15,000 - ₪20,000"
    assert (u1.salary_min, u1.salary_max) == (15000, 20000)

    lowered = RawPosting(title="qa engineer", url="https://drushim.example/2", company="ACME", city="tel aviv")
    duplicate = ingest_batch(db, "drushim", [lowered])
    assert duplicate.duplicates == 1
    u2 = store.find_by_url(db, "https://drushim.example/2")
    assert u2.duplicate_of_id == u1.id

    assert [job.url for job in build_job_query(db, JobFilter()).all()] == ["https://alljobs.example/1"]


def test_fetch_failing_midway_stores_nothing():
    db = _session()

    summary = run_source(db, "janglo", PartialAdapter())

    assert summary["status"] == "failed"
    assert summary["jobs_found"] == 0
    assert "timed out" in summary["error"]
    assert db.query(Job).count() == 0


def test_cross_site_duplicate_is_hidden_from_catalog():
    db = _session()

    first = ingest_batch(db, "alljobs", [_qa("https://alljobs.example/1")])
    second = ingest_batch(db, "drushim", [_qa("https://drushim.example/9")])

    assert first.inserted == 1
    assert second.duplicates == 1 and second.inserted == 0

    u1 = store.find_by_url(db, "https://alljobs.example/1")
    u2 = store.find_by_url(db, "https://drushim.example/9")
    assert u1.duplicate_of_id is None
    assert u2.duplicate_of_id == u1.id

    catalog = build_job_query(db, JobFilter()).all()
    assert [job.url for job in catalog] == ["https://alljobs.example/1"]


def test_rescrape_merges_into_existing_record():
    db = _session()
    ingest_batch(db, "alljobs", [_qa("https://alljobs.example/1")])
    stats = ingest_batch(
        db, "alljobs", [_qa("https://alljobs.example/1", salary="₪15,000 - ₪20,000", description="Selenium")]
    )

    assert stats.merged == 1
    assert db.query(Job).count() == 1
    job = store.find_by_url(db, "https://alljobs.example/1")
    assert job.salary_min == 15000 and job.salary_max == 20000
    assert job.description == "Selenium"


def test_duplicate_enriches_canonical_missing_fields():
    db = _session()
    ingest_batch(db, "alljobs", [_qa("https://alljobs.example/1")])
    ingest_batch(db, "drushim", [_qa("https://drushim.example/9", salary="18000")])

    canonical = store.find_by_url(db, "https://alljobs.example/1")
    assert canonical.salary == "18000"
    assert canonical.salary_min == 18000


def test_malformed_postings_are_counted_not_stored():
    db = _session()
    stats = ingest_batch(
        db,
        "alljobs",
        [RawPosting(title=None, url="https://alljobs.example/1"), RawPosting(title="QA", url="  ")],
    )

    assert stats.found == 2
    assert stats.errors == 2
    assert db.query(Job).count() == 0


def test_url_race_is_merged(monkeypatch):
    db = _session()
    ingest_batch(db, "alljobs", [_qa("https://alljobs.example/1")])

    real_find = store.find_by_url
    calls = []

    def stale_lookup(session, url):
        # The first lookup misses, as if another writer stored the url right after it.
        calls.append(url)
        if len(calls) == 1:
            return None
        return real_find(session, url)

    monkeypatch.setattr(store, "find_by_url", stale_lookup)
    stats = ingest_batch(db, "alljobs", [_qa("https://alljobs.example/1", description="updated")])

    assert stats.merged == 1 and stats.errors == 0
    assert db.query(Job).count() == 1
    assert store.find_by_url(db, "https://alljobs.example/1").description == "updated"


def test_insert_job_reports_conflict_on_existing_url():
    db = _session()
    first = insert_job(db, Job(title="QA", url="https://a/1", source_url="https://a/1", source_site="alljobs"))
    second = insert_job(db, Job(title="QA 2", url="https://a/1", source_url="https://a/1", source_site="drushim"))

    assert isinstance(first, Inserted)
    assert second == ConflictOnKey(existing_id=first.job.id)


def test_run_cycle_isolates_site_failures_and_sweeps(monkeypatch):
    db = _session()
    db.add(
        Job(
            title="Old posting",
            url="https://glassdoor.example/1",
            source_url="https://glassdoor.example/1",
            source_site="glassdoor",
            last_seen_at=datetime.utcnow() - timedelta(hours=100),
        )
    )
    db.commit()

    monkeypatch.setitem(ADAPTERS, "alljobs", FakeAdapter)
    monkeypatch.setitem(ADAPTERS, "drushim", FailingAdapter)
    monkeypatch.delitem(ADAPTERS, "linkedin", raising=False)
    monkeypatch.delitem(ADAPTERS, "janglo", raising=False)
    sleeps = []

    result = run_cycle(db, ["alljobs", "linkedin", "drushim", "janglo"], delay_seconds=5, sleep=sleeps.append)

    assert result["succeeded"] == 1
    assert result["failed_sources"] == ["drushim"]
    assert result["jobs_found"] == 3
    assert result["jobs_new"] == 2
    assert result["deactivated"] == 1
    assert sleeps == [5]

    ok = next(r for r in result["sources"] if r["site"] == "alljobs")
    assert ok["status"] == "success" and ok["errors"] == 1

    failed_run = db.query(ScrapeRun).filter(ScrapeRun.site == "drushim").one()
    assert failed_run.status == "failed"
    assert len(failed_run.error_summary) == 1000
    assert failed_run.finished_at is not None

    runs = [ScrapeRunOut.model_validate(run) for run in list_runs(db)]
    assert {run.site for run in runs} == {"alljobs", "drushim"}
    assert store.find_by_url(db, "https://glassdoor.example/1").is_active is False


def test_register_adapter_records_site_id(monkeypatch):
    monkeypatch.setattr(registry, "ADAPTERS", dict(ADAPTERS))

    @register_adapter("xplace")
    class XPlaceAdapter(SourceAdapter):
        def fetch(self):
            return []

    assert registry.ADAPTERS["xplace"] is XPlaceAdapter
    assert XPlaceAdapter.source_name == "xplace"
