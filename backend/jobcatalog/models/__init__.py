from __future__ import annotations
from jobcatalog.models.job import Job
from jobcatalog.models.scrape_run import ScrapeRun

__all__ = ["Job", "ScrapeRun"]
