from __future__ import annotations

from .types import MatchCategory

EXCELLENT = MatchCategory(
    label="Excellent Match",
    description="Your profile closely fits this role's skills, experience, location and education needs.",
    tone="green",
)
GOOD = MatchCategory(
    label="Good Match",
    description="You meet most of this role's requirements, with a few gaps.",
    tone="blue",
)
FAIR = MatchCategory(
    label="Fair Match",
    description="You meet some of this role's requirements; review the missing skills before applying.",
    tone="yellow",
)
LOW = MatchCategory(
    label="Low Match",
    description="This role asks for quite a bit that isn't on your profile yet.",
    tone="gray",
)

# Checked top-down, first hit wins.
_BANDS = (
    (80, EXCELLENT),
    (60, GOOD),
    (40, FAIR),
)


def get_match_category(score: float) -> MatchCategory:
    for floor, category in _BANDS:
        if score >= floor:
            return category
    return LOW
