from __future__ import annotations
import re
from typing import Any, Dict, FrozenSet, List

# LRM, RLM and the embedding/override controls U+202A..U+202E
DIRECTIONAL_MARKS: FrozenSet[str] = frozenset(
    ["\u200e", "\u200f"] + [chr(c) for c in range(0x202A, 0x202F)]
)

# hyphen-minus, en dash, em dash
DASH_CHARS: FrozenSet[str] = frozenset(["-", "\u2013", "\u2014"])

# curly/straight double quotes, geresh, gershayim, apostrophe, backtick + ASCII punctuation
PUNCT_CHARS: FrozenSet[str] = frozenset(
    ["\u201c", "\u201d", '"', "\u05f3", "\u05f4", "'", "`"]
    + list(".,;:!?()[]{}<>\\/|")
)

_MARKS_TABLE: Dict[int, Any] = {ord(ch): None for ch in DIRECTIONAL_MARKS}
_DASH_TABLE: Dict[int, Any] = {ord(ch): " " for ch in DASH_CHARS}
_PUNCT_TABLE: Dict[int, Any] = {ord(ch): None for ch in PUNCT_CHARS}
_SPACE_RE = re.compile(r"\s+")


def normalize_hebrew(text: Any) -> str:
    """Canonical comparison form of free Hebrew text.
    - Missing / non-string input -> ""
    - Lowercase (Hebrew has no case, Latin parts fold)
    - Strip bidi marks
    - Dashes become spaces
    - Drop quotes, geresh/gershayim and ASCII punctuation
    - Collapse whitespace and trim
    """
    if not isinstance(text, str) or not text:
        return ""
    t = text.lower()
    t = t.translate(_MARKS_TABLE)
    t = t.translate(_DASH_TABLE)
    t = t.translate(_PUNCT_TABLE)
    t = _SPACE_RE.sub(" ", t)
    return t.strip()


def split_tokens(normalized: str) -> List[str]:
    return [p for p in normalized.split(" ") if p]
