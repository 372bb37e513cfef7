from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from jobmatch.core.dates import total_years_of_experience, utc_now
from jobmatch.models import CandidateProfile, JobPosting, LocationType

from .scoring import (
    EXPERIENCE_WEIGHT,
    education_points,
    experience_points,
    location_points,
    skills_points,
    clamp,
    round_half_up,
)
from .types import MatchBreakdown, RankedCandidate, RecommendedJob, ScoredJob


def _match_reasons(
        *,
        job: JobPosting,
        matched: List[str],
        e_points: float,
        l_points: float,
        ed_points: float,
) -> List[str]:
    reasons: List[str] = []
    if matched:
        reasons.append(f"{len(matched)} matching skill{'s' if len(matched) > 1 else ''}")
    if job.required_experience > 0 and e_points >= EXPERIENCE_WEIGHT:
        reasons.append("Experience level matches")
    if l_points > 0:
        if job.location_type == LocationType.REMOTE:
            reasons.append("Remote work available")
        else:
            reasons.append("Location matches")
    if job.required_education and ed_points > 0:
        reasons.append("Education requirement met")
    return reasons


def score_job(candidate: CandidateProfile, job: JobPosting, *, now: Optional[datetime] = None) -> ScoredJob:
    years = total_years_of_experience(candidate.experience, now=now)

    s_points, matched, missing = skills_points(candidate.skills, job.required_skills)
    e_points = experience_points(years, job.required_experience)
    l_points = location_points(candidate.location, job.city, job.location, job.location_type)
    ed_points = education_points(candidate.education, job.required_education)

    total = int(clamp(round_half_up(s_points + e_points + l_points + ed_points), 0, 100))

    breakdown = MatchBreakdown(
        total_score=total,
        skills_points=s_points,
        experience_points=e_points,
        location_points=l_points,
        education_points=ed_points,
        skills_matched=matched,
        skills_missing=missing,
        candidate_years=years,
        reasons=_match_reasons(job=job, matched=matched, e_points=e_points, l_points=l_points, ed_points=ed_points),
    )
    return ScoredJob(job=job, score=total, breakdown=breakdown)


def calculate_match_score(candidate: CandidateProfile, job: JobPosting, *, now: Optional[datetime] = None) -> int:
    return score_job(candidate, job, now=now).score


def _check_limit(limit: Optional[int]) -> None:
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")


def rank_jobs(
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        limit: Optional[int] = None,
        *,
        now: Optional[datetime] = None,
) -> List[ScoredJob]:
    """
    Score every posting once and return them best-first, with breakdowns.
    Equal scores keep their input order (list.sort is stable).
    """
    _check_limit(limit)
    # One clock reading per ranking so every posting sees the same "now".
    pinned = now if now is not None else utc_now()
    scored = [score_job(candidate, j, now=pinned) for j in jobs]
    scored.sort(key=lambda x: x.score, reverse=True)
    return scored if limit is None else scored[:limit]


def get_recommended_jobs(
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        limit: Optional[int] = None,
        *,
        now: Optional[datetime] = None,
) -> List[RecommendedJob]:
    return [RecommendedJob(job=s.job, match_score=s.score) for s in rank_jobs(candidate, jobs, limit, now=now)]


def rank_candidates(
        job: JobPosting,
        candidates: Sequence[CandidateProfile],
        limit: Optional[int] = None,
        *,
        now: Optional[datetime] = None,
) -> List[RankedCandidate]:
    _check_limit(limit)
    pinned = now if now is not None else utc_now()
    ranked = [RankedCandidate(candidate=c, match_score=calculate_match_score(c, job, now=pinned)) for c in candidates]
    ranked.sort(key=lambda x: x.match_score, reverse=True)
    return ranked if limit is None else ranked[:limit]
