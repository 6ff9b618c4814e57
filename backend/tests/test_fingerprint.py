from __future__ import annotations
import pytest

from jobcatalog.utils.hash import job_fingerprint
from jobcatalog.utils.text import normalize_text

RLM = chr(0x200F)
LRE = chr(0x202A)
PDF = chr(0x202C)
ZWSP = chr(0x200B)
BOM = chr(0xFEFF)


def test_normalize_text_folds_case_punctuation_and_whitespace():
    assert normalize_text("  Senior   Backend-Developer!! ") == "senior backend developer"
    assert normalize_text(None) == ""
    assert normalize_text("") == ""


def test_normalize_text_keeps_hebrew_and_drops_direction_marks():
    assert normalize_text(f"מפתח{RLM} Full-Stack, תל אביב") == "מפתח full stack תל אביב"
    assert normalize_text(f"{LRE}QA{PDF} Engineer") == "qa engineer"


def test_other_formatting_characters_become_separators():
    assert normalize_text(f"ab{ZWSP}cd") == "ab cd"
    assert normalize_text(f"{BOM}Acme") == "acme"


@pytest.mark.parametrize(
    "text",
    [
        "QA  Engineer (Automation) – Tel-Aviv",
        "מהנדס/ת תוכנה בכיר/ה",
        f"{RLM}דרושים{RLM} מפתחים{LRE}!{PDF}",
        "C++ / C# developer, 5+ yrs.",
        "Café Résumé Straße",
        f"ab{ZWSP}cd{BOM}",
        "   ",
    ],
)
def test_normalize_text_is_idempotent(text):
    once = normalize_text(text)
    assert normalize_text(once) == once


def test_fingerprint_is_stable_across_case_and_spacing():
    a = job_fingerprint("QA Engineer", "Acme", "Tel Aviv")
    b = job_fingerprint("  qa   engineer ", "ACME", "tel aviv")
    c = job_fingerprint("QA Engineer", "Acme", "Haifa")

    assert a == b
    assert a != c
    assert len(a) == 32


def test_fingerprint_tolerates_missing_fields():
    a = job_fingerprint("QA Engineer", None, None)
    b = job_fingerprint("QA Engineer", "", "")
    assert a == b
    assert a != job_fingerprint("QA Engineer", "Acme", None)
