from .category import get_match_category
from .engine import calculate_match_score, get_recommended_jobs, rank_candidates, rank_jobs, score_job
from .types import MatchBreakdown, MatchCategory, RankedCandidate, RecommendedJob, ScoredJob

__all__ = [
    "calculate_match_score",
    "get_match_category",
    "get_recommended_jobs",
    "rank_candidates",
    "rank_jobs",
    "score_job",
    "MatchBreakdown",
    "MatchCategory",
    "RankedCandidate",
    "RecommendedJob",
    "ScoredJob",
]
