from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from jobmatch.models import CandidateProfile, JobPosting


@dataclass(frozen=True)
class MatchBreakdown:
    total_score: int
    # Raw factor contributions, unrounded
    skills_points: float
    experience_points: float
    location_points: float
    education_points: float

    skills_matched: List[str] = field(default_factory=list)
    skills_missing: List[str] = field(default_factory=list)
    candidate_years: float = 0.0
    # Human-friendly explanation lines (stable order)
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_score": self.total_score,
            "factors": {
                "skills": self.skills_points,
                "experience": self.experience_points,
                "location": self.location_points,
                "education": self.education_points,
            },
            "skills_matched": list(self.skills_matched),
            "skills_missing": list(self.skills_missing),
            "candidate_years": round(self.candidate_years, 2),
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class ScoredJob:
    job: JobPosting
    score: int
    breakdown: MatchBreakdown


@dataclass(frozen=True)
class RecommendedJob:
    job: JobPosting
    match_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {"job": self.job.to_dict(), "match_score": self.match_score}


@dataclass(frozen=True)
class RankedCandidate:
    candidate: CandidateProfile
    match_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {"candidate": self.candidate.to_dict(), "match_score": self.match_score}


@dataclass(frozen=True)
class MatchCategory:
    label: str
    description: str
    tone: str  # badge colour hint: green | blue | yellow | gray

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "description": self.description, "tone": self.tone}
