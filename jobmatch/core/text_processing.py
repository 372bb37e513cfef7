from __future__ import annotations

import re
import unicodedata
from typing import Iterable

# Shared by the scorer and CV intake so both compare text the same way.


def normalize_text(text: str) -> str:
    """
    Deterministic normalization before any comparison.

    - stable across platforms
    - remove unicode quirks (smart quotes, non-breaking spaces)
    - collapse whitespace
    """
    if not text:
        return ""
    t = unicodedata.normalize("NFKC", text)
    t = t.replace("\u00a0", " ")
    # Normalize common unicode dashes to '-'
    t = re.sub(r"[\u2010-\u2015]", "-", t)
    t = " ".join(t.split())
    return t


def fold(text: str) -> str:
    """Comparison key: normalized and lower-cased."""
    return normalize_text(text).lower()


def contains_either(a: str, b: str) -> bool:
    """
    True when either string contains the other, ignoring case.
    Blank input never matches.
    """
    fa, fb = fold(a), fold(b)
    if not fa or not fb:
        return False
    return fa in fb or fb in fa


def any_contains_either(candidates: Iterable[str], target: str) -> bool:
    return any(contains_either(c, target) for c in candidates or [])


def contains_term(text: str, term: str) -> bool:
    """
    Whole-term search: "go" matches "Go, Rust" but not "google".
    Terms may carry punctuation (c++, node.js, ci/cd).
    """
    ft = fold(term)
    if not ft:
        return False
    pattern = r"(?<![a-z0-9])" + re.escape(ft) + r"(?![a-z0-9])"
    return re.search(pattern, fold(text)) is not None
