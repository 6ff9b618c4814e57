from __future__ import annotations
import hashlib

from jobcatalog.utils.text import normalize_text


def job_fingerprint(title: str | None, company: str | None, city: str | None) -> str:
    raw = "|".join([normalize_text(title), normalize_text(company), normalize_text(city)])
    return hashlib.md5(raw.encode("utf-8")).hexdigest()
