from __future__ import annotations
from datetime import datetime, timedelta

from jobcatalog.utils.parsing import detect_region, detect_work_mode, parse_relative_date, parse_salary

NOW = datetime(2024, 6, 1, 12, 0, 0)


def test_detect_region_by_city_substring():
    assert detect_region("Tel Aviv-Yafo") == "TEL_AVIV"
    assert detect_region("חיפה והקריות") == "HAIFA"
    assert detect_region("Beer Sheva") == "SOUTH"
    assert detect_region("Atlantis") is None
    assert detect_region(None) is None


def test_detect_work_mode():
    assert detect_work_mode("Remote friendly backend role").is_remote
    assert detect_work_mode("עבודה מהבית").is_remote
    mode = detect_work_mode("Hybrid, 3 days in office")
    assert mode.is_hybrid and not mode.is_remote
    assert detect_work_mode(None) == detect_work_mode("")


def test_parse_salary():
    assert parse_salary("₪15,000 - ₪25,000") == (15000, 25000)
    assert parse_salary("15,000–18,000") == (15000, 18000)
    assert parse_salary("20000") == (20000, 20000)
    assert parse_salary("competitive") == (None, None)
    assert parse_salary(None) == (None, None)


def test_parse_relative_date_english_and_hebrew():
    assert parse_relative_date("today", now=NOW) == NOW
    assert parse_relative_date("אתמול", now=NOW) == NOW - timedelta(days=1)
    assert parse_relative_date("3 days ago", now=NOW) == NOW - timedelta(days=3)
    assert parse_relative_date("לפני 2 ימים", now=NOW) == NOW - timedelta(days=2)
    assert parse_relative_date("5 hours ago", now=NOW) == NOW - timedelta(hours=5)
    assert parse_relative_date("2 weeks ago", now=NOW) == NOW - timedelta(weeks=2)
    assert parse_relative_date("1 month ago", now=NOW) == NOW - timedelta(days=30)


def test_parse_relative_date_iso_and_garbage():
    assert parse_relative_date("2024-05-01T10:00:00+03:00", now=NOW) == datetime(2024, 5, 1, 7, 0, 0)
    assert parse_relative_date("2024-05-01", now=NOW) == datetime(2024, 5, 1)
    assert parse_relative_date("sometime soon", now=NOW) is None
    assert parse_relative_date(None) is None
