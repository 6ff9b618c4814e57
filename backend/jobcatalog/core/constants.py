from __future__ import annotations

# Region codes with their Hebrew and English labels.
REGIONS: dict[str, dict[str, str]] = {
    "NORTH": {"he": "צפון", "en": "North"},
    "HAIFA": {"he": "חיפה", "en": "Haifa"},
    "SHARON": {"he": "שרון", "en": "Sharon"},
    "CENTER": {"he": "מרכז", "en": "Center"},
    "TEL_AVIV": {"he": "תל אביב", "en": "Tel Aviv"},
    "JERUSALEM": {"he": "ירושלים", "en": "Jerusalem"},
    "SOUTH": {"he": "דרום", "en": "South"},
    "JUDEA_SAMARIA": {"he": "יהודה ושומרון", "en": "Judea & Samaria"},
    "REMOTE": {"he": "עבודה מרחוק", "en": "Remote"},
}

# Checked in order; the first city name contained in the input wins.
CITY_TO_REGION: tuple[tuple[str, str], ...] = (
    ("תל אביב", "TEL_AVIV"), ("tel aviv", "TEL_AVIV"), ("ramat gan", "TEL_AVIV"), ("רמת גן", "TEL_AVIV"),
    ("בני ברק", "TEL_AVIV"), ("bnei brak", "TEL_AVIV"), ("גבעתיים", "TEL_AVIV"), ("givatayim", "TEL_AVIV"),
    ("הרצליה", "TEL_AVIV"), ("herzliya", "TEL_AVIV"), ("פתח תקווה", "CENTER"), ("petah tikva", "CENTER"),
    ("ירושלים", "JERUSALEM"), ("jerusalem", "JERUSALEM"),
    ("חיפה", "HAIFA"), ("haifa", "HAIFA"),
    ("באר שבע", "SOUTH"), ("beer sheva", "SOUTH"), ("beersheba", "SOUTH"),
    ("נתניה", "SHARON"), ("netanya", "SHARON"), ("כפר סבא", "SHARON"), ("kfar saba", "SHARON"),
    ("רעננה", "SHARON"), ("raanana", "SHARON"), ("הוד השרון", "SHARON"), ("hod hasharon", "SHARON"),
    ("ראשון לציון", "CENTER"), ("rishon lezion", "CENTER"),
    ("אשדוד", "SOUTH"), ("ashdod", "SOUTH"), ("אשקלון", "SOUTH"), ("ashkelon", "SOUTH"),
    ("רחובות", "CENTER"), ("rehovot", "CENTER"), ("לוד", "CENTER"), ("lod", "CENTER"),
    ("רמלה", "CENTER"), ("ramla", "CENTER"), ("מודיעין", "CENTER"), ("modiin", "CENTER"),
    ("נצרת", "NORTH"), ("nazareth", "NORTH"), ("טבריה", "NORTH"), ("tiberias", "NORTH"),
    ("עפולה", "NORTH"), ("afula", "NORTH"), ("כרמיאל", "NORTH"), ("karmiel", "NORTH"),
    ("אילת", "SOUTH"), ("eilat", "SOUTH"),
    ("יקנעם", "NORTH"), ("yokneam", "NORTH"),
    ("קיסריה", "SHARON"), ("caesarea", "SHARON"),
)

CATEGORIES: dict[str, dict[str, str]] = {
    "SOFTWARE": {"he": "הייטק-תוכנה", "en": "Software Development"},
    "HARDWARE": {"he": "הייטק-חומרה", "en": "Hardware Engineering"},
    "QA": {"he": "בדיקות תוכנה", "en": "QA & Testing"},
    "DATA": {"he": "דאטה ומידע", "en": "Data & Analytics"},
    "DEVOPS": {"he": "דבאופס", "en": "DevOps & Infrastructure"},
    "PRODUCT": {"he": "ניהול מוצר", "en": "Product Management"},
    "DESIGN": {"he": "עיצוב", "en": "Design & UX"},
    "MARKETING": {"he": "שיווק", "en": "Marketing"},
    "SALES": {"he": "מכירות", "en": "Sales"},
    "HR": {"he": "משאבי אנוש", "en": "Human Resources"},
    "FINANCE": {"he": "כספים", "en": "Finance & Accounting"},
    "ADMIN": {"he": "אדמיניסטרציה", "en": "Administration"},
    "LEGAL": {"he": "משפטים", "en": "Legal"},
    "MEDICAL": {"he": "רפואה", "en": "Medical & Healthcare"},
    "EDUCATION": {"he": "הדרכה/הוראה", "en": "Education & Training"},
    "ENGINEERING": {"he": "הנדסה", "en": "Engineering"},
    "CUSTOMER_SERVICE": {"he": "שירות לקוחות", "en": "Customer Service"},
    "LOGISTICS": {"he": "לוגיסטיקה", "en": "Logistics & Supply Chain"},
    "MANAGEMENT": {"he": "ניהול", "en": "Management & Executive"},
    "SCIENCE": {"he": "מדעים", "en": "Science & Biotech"},
    "SECURITY": {"he": "אבטחת מידע", "en": "Cybersecurity"},
    "OTHER": {"he": "כללי", "en": "Other"},
}

DEFAULT_CATEGORY = "OTHER"

JOB_TYPES: dict[str, dict[str, str]] = {
    "FULL_TIME": {"he": "משרה מלאה", "en": "Full-time"},
    "PART_TIME": {"he": "משרה חלקית", "en": "Part-time"},
    "CONTRACT": {"he": "חוזה", "en": "Contract"},
    "FREELANCE": {"he": "פרילנס", "en": "Freelance"},
    "INTERNSHIP": {"he": "סטאז'", "en": "Internship"},
    "TEMPORARY": {"he": "זמנית", "en": "Temporary"},
}

EXPERIENCE_LEVELS: dict[str, dict[str, str]] = {
    "ENTRY": {"he": "ללא ניסיון", "en": "Entry Level"},
    "JUNIOR": {"he": "ניסיון מועט", "en": "Junior (1-2 years)"},
    "MID": {"he": "ניסיון בינוני", "en": "Mid Level (3-5 years)"},
    "SENIOR": {"he": "ניסיון רב", "en": "Senior (5+ years)"},
    "EXECUTIVE": {"he": "בכיר", "en": "Executive / Director"},
}

SOURCE_SITES: dict[str, dict[str, str]] = {
    "alljobs": {"name": "AllJobs", "url": "https://www.alljobs.co.il/"},
    "drushim": {"name": "Drushim", "url": "https://www.drushim.co.il/"},
    "jobmaster": {"name": "JobMaster", "url": "https://www.jobmaster.co.il/"},
    "linkedin": {"name": "LinkedIn", "url": "https://www.linkedin.com/jobs/jobs-in-israel/"},
    "indeed": {"name": "Indeed", "url": "https://il.indeed.com/"},
    "gotfriends": {"name": "GotFriends", "url": "https://www.gotfriends.co.il/"},
    "sqlink": {"name": "SQLink", "url": "https://www.sqlink.com/"},
    "ethosia": {"name": "Ethosia", "url": "https://www.ethosia.co.il/"},
    "secrettelaviv": {"name": "Secret Tel Aviv", "url": "https://www.secrettelaviv.com/jobs"},
    "janglo": {"name": "Janglo", "url": "https://www.janglo.net/jobs"},
    "taasuka": {"name": "Taasuka", "url": "https://www.taasuka.gov.il/"},
    "govil": {"name": "Gov.il Careers", "url": "https://www.gov.il/he/departments/topics/careers/"},
    "shatil": {"name": "Shatil", "url": "https://www.shatil.org.il/jobs"},
    "taasiya": {"name": "Taasiya", "url": "https://www.taasiya.co.il/"},
    "jobkarov": {"name": "JobKarov", "url": "https://www.jobkarov.com/"},
    "xplace": {"name": "xPlace", "url": "https://www.xplace.com/il/"},
    "nbn": {"name": "NBN Job Board", "url": "https://www.nbn.org.il/jobboard/"},
    "glassdoor": {"name": "Glassdoor", "url": "https://www.glassdoor.com/Job/israel-jobs-SRCH_IL.0,6_IN119.htm"},
}

# Placeholder employer names treated as "unknown" by the catalog filters.
UNKNOWN_EMPLOYERS: tuple[str, ...] = ("לא צוין", "N/A", "Unknown", "חסוי", "confidential", "Confidential")
