import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from jobmatch.models import CandidateProfile, JobPosting

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Every time-dependent test scores against this instant.
PINNED_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_text(fixtures_dir):
    """load_text("file.ext") -> str"""
    def _load(name: str) -> str:
        return (fixtures_dir / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture
def load_json(load_text):
    def _load(name: str):
        return json.loads(load_text(name))
    return _load


@pytest.fixture
def now() -> datetime:
    return PINNED_NOW


@pytest.fixture
def candidate(load_json) -> CandidateProfile:
    return CandidateProfile.from_dict(load_json("candidate.json"))


@pytest.fixture
def jobs(load_json) -> list[JobPosting]:
    return [JobPosting.from_dict(j) for j in load_json("jobs.json")]
