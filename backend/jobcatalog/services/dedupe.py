"""Three-layer duplicate resolution for incoming postings.

1. exact url match       -> MERGE into the stored record (a re-scrape)
2. fingerprint match     -> MARK_DUPLICATE of an active canonical record
3. fuzzy title+company   -> MARK_DUPLICATE of the closest active canonical record

Each layer short-circuits the next. The fuzzy layer compares against a capped candidate
pool, optionally scoped to the posting's city, so a single resolve() has bounded cost.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from rapidfuzz import fuzz, process
from sqlalchemy.orm import Session

from jobcatalog.core.config import settings
from jobcatalog.models.job import Job
from jobcatalog.services import store
from jobcatalog.services.normalizer import NormalizedPosting
from jobcatalog.utils.hash import job_fingerprint
from jobcatalog.utils.text import normalize_text

logger = logging.getLogger(__name__)


class Action(str, Enum):
    MERGE = "merge"
    MARK_DUPLICATE = "mark_duplicate"
    UNIQUE = "unique"


@dataclass
class Resolution:
    action: Action
    target_id: int | None = None
    layer: str | None = None
    score: float | None = None


def match_key(title: str | None, company: str | None) -> str:
    return f"{normalize_text(title)} {normalize_text(company)}"


class DuplicateResolver:
    def __init__(
        self,
        db: Session,
        *,
        score_cutoff: float | None = None,
        candidate_limit: int | None = None,
        scope_by_city: bool | None = None,
    ):
        self.db = db
        self.score_cutoff = settings.fuzzy_score_cutoff if score_cutoff is None else score_cutoff
        self.candidate_limit = settings.fuzzy_candidate_limit if candidate_limit is None else candidate_limit
        self.scope_by_city = settings.fuzzy_scope_by_city if scope_by_city is None else scope_by_city

    def resolve(self, posting: NormalizedPosting) -> Resolution:
        existing = store.find_by_url(self.db, posting.url)
        if existing:
            return Resolution(Action.MERGE, target_id=existing.id, layer="url")

        posting.fingerprint = job_fingerprint(posting.title, posting.company, posting.city)
        fp_match = store.find_canonical_by_fingerprint(self.db, posting.fingerprint)
        if fp_match:
            logger.debug(
                'Duplicate (fingerprint): "%s" from %s matches "%s" from %s',
                posting.title, posting.source_site, fp_match.title, fp_match.source_site,
            )
            return Resolution(
                Action.MARK_DUPLICATE,
                target_id=store.canonical_id(self.db, fp_match.id),
                layer="fingerprint",
            )

        fuzzy = self.fuzzy_match(posting)
        if fuzzy:
            match, score = fuzzy
            logger.debug(
                'Duplicate (fuzzy %.1f): "%s" from %s matches "%s" from %s',
                score, posting.title, posting.source_site, match.title, match.source_site,
            )
            return Resolution(
                Action.MARK_DUPLICATE,
                target_id=store.canonical_id(self.db, match.id),
                layer="fuzzy",
                score=score,
            )

        return Resolution(Action.UNIQUE)

    def fuzzy_match(self, posting: NormalizedPosting) -> tuple[Job, float] | None:
        if not normalize_text(posting.title) or not normalize_text(posting.company):
            return None

        city = posting.city if self.scope_by_city else None
        candidates = store.fuzzy_candidates(self.db, city, self.candidate_limit)
        if not candidates:
            return None

        choices = {job.id: match_key(job.title, job.company) for job in candidates}
        try:
            best = process.extractOne(
                match_key(posting.title, posting.company),
                choices,
                scorer=fuzz.ratio,
                score_cutoff=self.score_cutoff,
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning("Fuzzy matching failed for %s, treating as unique: %s", posting.url, exc)
            return None

        if best is None:
            return None
        _choice, score, job_id = best
        by_id = {job.id: job for job in candidates}
        return by_id[job_id], float(score)
