from __future__ import annotations
import re

# LRM, RLM and the bidi embedding marks are dropped outright; any other formatting
# character falls through to the disallowed class below and becomes a space.
_DIRECTION_MARKS_RE = re.compile("[\u200e\u200f\u202a-\u202c]")
# Latin word characters, the Hebrew block and whitespace survive.
_DISALLOWED_RE = re.compile("[^a-z0-9_\u0590-\u05ff\\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    if not text:
        return ""
    lowered = _DIRECTION_MARKS_RE.sub("", text.lower())
    spaced = _DISALLOWED_RE.sub(" ", lowered)
    return _WHITESPACE_RE.sub(" ", spaced).strip()
