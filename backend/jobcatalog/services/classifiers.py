"""Keyword classifiers mapping scraped free text onto the catalog vocabularies.

Each table is an ordered sequence of ``(code, keywords)`` pairs. The first code whose
keywords appear in the lowercased input wins, so the order of the rows is part of the
contract: "software" rows are consulted before "qa" rows, "entry" before "junior", and
so on. Some keywords carry a trailing space on purpose (``"bi "``, ``"vp "``) to avoid
matching inside longer words.
"""
from __future__ import annotations

from jobcatalog.core.constants import CATEGORIES, DEFAULT_CATEGORY, EXPERIENCE_LEVELS, JOB_TYPES

KeywordTable = tuple[tuple[str, tuple[str, ...]], ...]

CATEGORY_PATTERNS: KeywordTable = (
    ("SOFTWARE", ("software", "תוכנה", "הייטק", "hi-tech", "hitech", "פיתוח", "fullstack", "full-stack",
                  "full stack", "backend", "frontend", "developer", "מפתח", "programmer", "תכנות")),
    ("HARDWARE", ("hardware", "חומרה", "אלקטרוניקה", "electronics", "embedded", "firmware")),
    ("QA", ("qa", "בדיקות", "quality", "testing", "בודק", "automation", "אוטומציה")),
    ("DATA", ("data", "דאטה", "מידע", "analytics", "אנליטיקה", "bi ", "machine learning", "ml", "ai ",
              "בינה מלאכותית")),
    ("DEVOPS", ("devops", "דבאופס", "cloud", "ענן", "infrastructure", "sre", "platform", "kubernetes", "docker")),
    ("PRODUCT", ("product", "מוצר", "ניהול מוצר", "product management")),
    ("DESIGN", ("design", "עיצוב", "ux", "ui", "גרפי", "graphic")),
    ("MARKETING", ("marketing", "שיווק", "seo", "sem", "digital marketing", "שיווק דיגיטלי", "content", "תוכן")),
    ("SALES", ("sales", "מכירות", "business development", "פיתוח עסקי", "account")),
    ("HR", ("hr", "human resources", "משאבי אנוש", "recruitment", "גיוס")),
    ("FINANCE", ("finance", "כספים", "חשבונאות", "accounting", "כלכלה", "bookkeep")),
    ("ADMIN", ("admin", "אדמיניסטרציה", "office", "משרד", "secretary", "מזכיר")),
    ("LEGAL", ("legal", "משפט", "law", "עורך דין", "lawyer", "compliance")),
    ("MEDICAL", ("medical", "רפואה", "healthcare", "בריאות", "pharma", "clinical", "nurse", "אח ", "אחות",
                 "doctor", "רופא")),
    ("EDUCATION", ("education", "הדרכה", "הוראה", "training", "teach", "מורה", "מדריך", "tutor")),
    ("ENGINEERING", ("engineering", "הנדסה", "מהנדס", "mechanical", "civil", "electrical")),
    ("CUSTOMER_SERVICE", ("customer service", "שירות לקוחות", "support", "תמיכה", "help desk")),
    ("LOGISTICS", ("logistics", "לוגיסטיקה", "supply chain", "שרשרת", "warehouse", "מחסן", "shipping", "משלוח")),
    ("MANAGEMENT", ("management", "ניהול", "מנהל", "manager", "director", "דירקטור", "vp ", "cto", "ceo", "coo",
                    "cfo")),
    ("SCIENCE", ("science", "מדע", "biotech", "ביוטק", "chemistry", "כימיה", "biology", "ביולוגיה", "research",
                 "מחקר")),
    ("SECURITY", ("security", "אבטח", "cyber", "סייבר", "infosec", "penetration")),
)

JOB_TYPE_PATTERNS: KeywordTable = (
    ("FULL_TIME", ("full time", "full-time", "fulltime", "משרה מלאה", "מלאה")),
    ("PART_TIME", ("part time", "part-time", "parttime", "משרה חלקית", "חלקית")),
    ("CONTRACT", ("contract", "חוזה", "outsource", "מיקור חוץ")),
    ("FREELANCE", ("freelance", "פרילנס", "עצמאי", "independent")),
    ("INTERNSHIP", ("internship", "intern", "סטאז", "סטודנט", "student")),
    ("TEMPORARY", ("temporary", "temp ", "זמני", "זמנית")),
)

EXPERIENCE_PATTERNS: KeywordTable = (
    ("ENTRY", ("entry", "ללא ניסיון", "no experience", "ניסיון", "junior", "0-1", "0 -")),
    ("JUNIOR", ("junior", "ג'וניור", "ג׳וניור", "1-2", "1-3", "ניסיון מועט")),
    ("MID", ("mid", "middle", "ביניים", "3-5", "2-5", "ניסיון בינוני")),
    ("SENIOR", ("senior", "בכיר", "ניסיון רב", "5+", "5-", "6+", "7+", "experienced")),
    ("EXECUTIVE", ("executive", "director", "דירקטור", "vp", "head of", "ראש", "chief", "c-level", "מנהל בכיר")),
)


def match_keywords(text: str, table: KeywordTable) -> str | None:
    lower = text.lower()
    for code, keywords in table:
        if any(kw in lower for kw in keywords):
            return code
    return None


def match_label(text: str, labels: dict[str, dict[str, str]]) -> str | None:
    lower = text.lower()
    for code, label in labels.items():
        if lower == label["he"].lower() or lower == label["en"].lower():
            return code
    return None


def classify_category(text: str | None) -> str | None:
    if not text:
        return None
    return match_keywords(text, CATEGORY_PATTERNS) or match_label(text, CATEGORIES) or DEFAULT_CATEGORY


def classify_job_type(text: str | None) -> str | None:
    if not text:
        return None
    return match_keywords(text, JOB_TYPE_PATTERNS) or match_label(text, JOB_TYPES)


def classify_experience_level(text: str | None) -> str | None:
    if not text:
        return None
    return match_keywords(text, EXPERIENCE_PATTERNS) or match_label(text, EXPERIENCE_LEVELS)
