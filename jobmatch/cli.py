from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from jobmatch import config
from jobmatch.cv import parse_cv_text
from jobmatch.io.resume_loader import load_resume_text
from jobmatch.matching import get_match_category, rank_jobs
from jobmatch.matching.types import ScoredJob
from jobmatch.models import CandidateProfile, JobPosting, RecordError

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Input files missing or unreadable; reported to the user, exit code 2."""


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise InputError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InputError(f"Could not read JSON from {path}: {exc}") from exc


def load_candidate(path: Path) -> CandidateProfile:
    try:
        return CandidateProfile.from_dict(_read_json(path))
    except RecordError as exc:
        raise InputError(f"Invalid candidate record in {path}: {exc}") from exc


def load_jobs(path: Path) -> List[JobPosting]:
    data = _read_json(path)
    # Accept a bare list or an export shaped like {"jobs": [...]}
    if isinstance(data, dict) and "jobs" in data:
        data = data["jobs"]
    if not isinstance(data, list):
        raise InputError(f"Expected a list of job postings in {path}")
    jobs: List[JobPosting] = []
    for idx, raw in enumerate(data):
        try:
            jobs.append(JobPosting.from_dict(raw))
        except RecordError as exc:
            raise InputError(f"Invalid job posting #{idx} in {path}: {exc}") from exc
    return jobs


def candidate_from_resume(*, text_path: Optional[str], pdf_path: Optional[str], location: str) -> CandidateProfile:
    loaded = load_resume_text(resume_text_path=text_path, resume_pdf_path=pdf_path)
    if not loaded.ok:
        raise InputError(f"Could not extract any text from resume: {loaded.path}")
    return parse_cv_text(loaded.text).to_profile(location=location)


def result_to_dict(candidate: CandidateProfile, ranked: Sequence[ScoredJob], considered: int) -> Dict[str, Any]:
    return {
        "candidate": candidate.to_dict(),
        "considered_jobs": considered,
        "matches": [
            {
                "job": m.job.to_dict(),
                "match_score": m.score,
                "category": get_match_category(m.score).to_dict(),
                "breakdown": m.breakdown.to_dict(),
            }
            for m in ranked
        ],
    }


def print_human_summary(ranked: Sequence[ScoredJob], considered: int) -> None:
    print("\n=== Recommended Jobs ===")
    print(f"Postings considered: {considered}")
    for idx, m in enumerate(ranked, start=1):
        j = m.job
        title = j.title or j.job_id or "(untitled)"
        company = f" @ {j.company}" if j.company else ""
        where = j.city or j.location
        loc = f" - {where} ({j.location_type.value})" if where else f" ({j.location_type.value})"
        cat = get_match_category(m.score)
        print(f"\n{idx}) {title}{company}{loc}")
        print(f"   score: {m.score}% [{cat.label}]")
        if m.breakdown.reasons:
            print(f"   why: {', '.join(m.breakdown.reasons)}")
        if m.breakdown.skills_missing:
            print(f"   missing skills: {', '.join(m.breakdown.skills_missing)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank job postings for a candidate profile")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--candidate", type=str, help="Path to a candidate profile JSON")
    src.add_argument("--resume-text", type=str, help="Build the candidate from a resume .txt")
    src.add_argument("--resume-pdf", type=str, help="Build the candidate from a resume .pdf")
    parser.add_argument("--location", type=str, default="", help="Candidate location when building from a resume")
    parser.add_argument("--jobs", type=str, required=True, help="Path to a JSON list of job postings")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="How many matches to show (default: JOBMATCH_DEFAULT_LIMIT or 10)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--log-level", type=str, default=None, help="Override JOBMATCH_LOG_LEVEL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)

    limit = config.JOBMATCH_DEFAULT_LIMIT if args.limit is None else args.limit
    if limit < 0:
        print("[jobmatch] --limit must be zero or more", file=sys.stderr)
        return 2

    try:
        if args.candidate:
            candidate = load_candidate(Path(args.candidate))
        else:
            candidate = candidate_from_resume(
                text_path=args.resume_text,
                pdf_path=args.resume_pdf,
                location=args.location,
            )
        jobs = load_jobs(Path(args.jobs))
    except InputError as exc:
        print(f"[jobmatch] {exc}", file=sys.stderr)
        return 2

    logger.info("Ranking %d postings (limit=%d)", len(jobs), limit)
    ranked = rank_jobs(candidate, jobs, limit)

    if args.json:
        print(json.dumps(result_to_dict(candidate, ranked, len(jobs)), indent=2))
    else:
        print_human_summary(ranked, len(jobs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
