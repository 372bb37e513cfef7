from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from jobmatch.core.text_processing import any_contains_either, contains_either, fold
from jobmatch.models import Education, LocationType

# Scoring policy. Full credit on every factor adds up to 100.
SKILLS_WEIGHT = 40
EXPERIENCE_WEIGHT = 30
LOCATION_WEIGHT = 15
EDUCATION_WEIGHT = 15


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def round_half_up(x: float) -> int:
    # round() is banker's rounding; scores use the usual 0.5-rounds-up rule.
    return int(math.floor(x + 0.5))


def skills_points(
        candidate_skills: Sequence[str],
        required_skills: Sequence[str],
) -> Tuple[float, List[str], List[str]]:
    """
    Share of required skills covered by the candidate, times the weight.
    A requirement is covered when any candidate skill contains it, or it
    contains that skill (case-insensitive).
    Returns (points, matched, missing); matched/missing keep posting order.
    """
    if not required_skills:
        return float(SKILLS_WEIGHT), [], []

    matched: List[str] = []
    missing: List[str] = []
    for req in required_skills:
        if any_contains_either(candidate_skills, req):
            matched.append(req)
        else:
            missing.append(req)

    return SKILLS_WEIGHT * (len(matched) / len(required_skills)), matched, missing


def experience_points(candidate_years: float, required_years: float) -> float:
    if not required_years or required_years <= 0:
        return float(EXPERIENCE_WEIGHT)
    if candidate_years >= required_years:
        return float(EXPERIENCE_WEIGHT)
    return clamp(EXPERIENCE_WEIGHT * (candidate_years / required_years), 0.0, float(EXPERIENCE_WEIGHT))


def location_points(
        candidate_location: str,
        job_city: str,
        job_location: str,
        location_type: LocationType,
) -> float:
    """
    All-or-nothing: remote postings always match, and so does a posting
    that names no city or location. Otherwise the candidate's location has
    to line up with the posting's city or location text.
    """
    if location_type == LocationType.REMOTE:
        return float(LOCATION_WEIGHT)

    city = fold(job_city)
    where = fold(job_location)
    if not city and not where:
        return float(LOCATION_WEIGHT)

    loc = fold(candidate_location)
    if not loc:
        return 0.0

    if city and (city in loc or loc in city):
        return float(LOCATION_WEIGHT)
    if where and where in loc:
        return float(LOCATION_WEIGHT)
    return 0.0


def education_points(education: Sequence[Education], required_education: Optional[str]) -> float:
    if not required_education:
        return float(EDUCATION_WEIGHT)
    for e in education or []:
        if contains_either(e.degree, required_education):
            return float(EDUCATION_WEIGHT)
    return 0.0
