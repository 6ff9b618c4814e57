from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from jobcatalog.core.constants import CITY_TO_REGION

REMOTE_KEYWORDS = ("remote", "עבודה מרחוק", "מהבית", "from home", "work from home", "wfh")
HYBRID_KEYWORDS = ("hybrid", "היברידי", "היברידית", "flexible")

_SALARY_STRIP_RE = re.compile(r"[₪,\s]")
_SALARY_RANGE_RE = re.compile(r"(\d+)\s*[-–]\s*(\d+)")
_SALARY_SINGLE_RE = re.compile(r"(\d+)")

_DAYS_RE = re.compile(r"(\d+)\s*(days?|ימים|יום)")
_HOURS_RE = re.compile(r"(\d+)\s*(hours?|שעות|שעה)")
_WEEKS_RE = re.compile(r"(\d+)\s*(weeks?|שבועות|שבוע)")
_MONTHS_RE = re.compile(r"(\d+)\s*(months?|חודשים|חודש)")


@dataclass
class WorkMode:
    is_remote: bool = False
    is_hybrid: bool = False


def detect_region(city: str | None) -> str | None:
    if not city:
        return None
    lower = city.lower().strip()
    for name, region in CITY_TO_REGION:
        if name in lower:
            return region
    return None


def detect_work_mode(text: str | None) -> WorkMode:
    if not text:
        return WorkMode()
    lower = text.lower()
    return WorkMode(
        is_remote=any(k in lower for k in REMOTE_KEYWORDS),
        is_hybrid=any(k in lower for k in HYBRID_KEYWORDS),
    )


def parse_salary(text: str | None) -> tuple[int | None, int | None]:
    """Parse salary text such as ``"₪15,000 - ₪25,000"`` into (min, max) in ILS."""
    if not text:
        return None, None
    cleaned = _SALARY_STRIP_RE.sub("", text)

    m = _SALARY_RANGE_RE.search(cleaned)
    if m:
        return int(m.group(1)), int(m.group(2))

    m = _SALARY_SINGLE_RE.search(cleaned)
    if m:
        value = int(m.group(1))
        return value, value

    return None, None


def parse_relative_date(text: str | None, *, now: datetime | None = None) -> datetime | None:
    """Parse "3 days ago" / "לפני 3 ימים" style strings, falling back to ISO dates.

    Months are approximated as 30 days.
    """
    if not text:
        return None
    now = now or datetime.utcnow()
    lower = text.lower().strip()

    if lower in ("today", "היום"):
        return now
    if lower in ("yesterday", "אתמול"):
        return now - timedelta(days=1)

    m = _DAYS_RE.search(lower)
    if m:
        return now - timedelta(days=int(m.group(1)))
    m = _HOURS_RE.search(lower)
    if m:
        return now - timedelta(hours=int(m.group(1)))
    m = _WEEKS_RE.search(lower)
    if m:
        return now - timedelta(weeks=int(m.group(1)))
    m = _MONTHS_RE.search(lower)
    if m:
        return now - timedelta(days=30 * int(m.group(1)))

    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None) - (parsed.utcoffset() or timedelta(0))
    return parsed
