from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from jobmatch.core.text_processing import contains_term, fold, normalize_text
from jobmatch.models import CandidateProfile, Education, WorkExperience

logger = logging.getLogger(__name__)

MAX_EXPERIENCE_ENTRIES = 5
MAX_EDUCATION_ENTRIES = 3

SKILL_VOCABULARY = (
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "php", "ruby",
    "go", "rust", "swift", "kotlin", "scala", "matlab",
    # Web
    "html", "css", "react", "angular", "vue", "next.js", "node.js", "express",
    "django", "flask", "spring", "laravel", "asp.net", "jquery",
    # Databases
    "sql", "mysql", "postgresql", "mongodb", "redis", "oracle", "firebase",
    "dynamodb", "cassandra", "elasticsearch",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git",
    "ci/cd", "terraform", "ansible",
    # Mobile
    "android", "ios", "react native", "flutter", "xamarin",
    # Design
    "figma", "adobe xd", "photoshop", "illustrator", "sketch", "ui/ux",
    # Data & ML
    "machine learning", "deep learning", "data analysis", "tensorflow",
    "pytorch", "scikit-learn", "pandas", "numpy",
    # Other
    "agile", "scrum", "project management", "leadership", "communication",
    "problem solving", "teamwork",
)

_JOB_TITLE_WORDS = (
    "engineer", "developer", "designer", "manager", "analyst",
    "consultant", "specialist", "coordinator", "director", "lead",
    "senior", "junior", "intern",
)

_DEGREE_WORDS = (
    "bachelor's", "bachelors", "bachelor", "bs", "ba", "bsc", "bba", "btech",
    "master's", "masters", "master", "ms", "ma", "msc", "mba", "mtech",
    "phd", "doctorate", "diploma", "associate",
)

_DEGREE_RANK: Dict[str, int] = {
    "phd": 5,
    "doctorate": 5,
    "master": 4,
    "mba": 4,
    "bachelor": 3,
    "diploma": 2,
    "associate": 1,
}

_RANGE_RE = re.compile(r"\b(\d{4})\s?-\s?(\d{4}|present|current)\b", re.IGNORECASE)
_YEAR_RE = re.compile(r"\b(19|20)\d{2}\b")
_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# Pakistani mobile numbers: +92, 0092 or a leading 0 before 3xx
_PHONE_RE = re.compile(r"(?:\+92|0092|0)\s?3\d{2}\s?\d{7}|\+92\s?\d{10}")
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
_GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
_URL_RE = re.compile(r"https?://[\w.-]+\.\w{2,}/?\S*", re.IGNORECASE)
_SOCIAL_HOSTS = ("linkedin.com", "github.com", "facebook.com", "twitter.com", "instagram.com")


@dataclass(frozen=True)
class ContactDetails:
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None


@dataclass(frozen=True)
class ParsedCV:
    skills: List[str] = field(default_factory=list)
    experience: List[WorkExperience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    contact: ContactDetails = field(default_factory=ContactDetails)

    def to_profile(self, *, location: str = "", name: Optional[str] = None) -> CandidateProfile:
        return CandidateProfile(
            skills=list(self.skills),
            experience=list(self.experience),
            location=location,
            education=list(self.education),
            name=name,
        )


def _display_skill(skill: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in skill.split(" "))


def _profile_url(pattern: re.Pattern, text: str) -> Optional[str]:
    m = pattern.search(text)
    return f"https://{m.group(0)}" if m else None


def extract_contact(text: str) -> ContactDetails:
    """
    Email, phone and profile links. Phone numbers come back without spaces;
    LinkedIn and GitHub handles are turned into https URLs. The portfolio is
    the first other http(s) link that is not a social-network profile.
    """
    text = text or ""
    email = _EMAIL_RE.search(text)
    phone = _PHONE_RE.search(text)
    portfolio = next(
        (u.rstrip(".,;)") for u in _URL_RE.findall(text) if not any(h in u.lower() for h in _SOCIAL_HOSTS)),
        None,
    )
    return ContactDetails(
        email=email.group(0) if email else None,
        phone=re.sub(r"\s", "", phone.group(0)) if phone else None,
        linkedin=_profile_url(_LINKEDIN_RE, text),
        github=_profile_url(_GITHUB_RE, text),
        portfolio=portfolio,
    )


def extract_skills(text: str) -> List[str]:
    return [_display_skill(s) for s in SKILL_VOCABULARY if contains_term(text, s)]


def _lines(text: str) -> List[str]:
    return [normalize_text(line) for line in (text or "").splitlines()]


def _find_range(*candidates: str) -> Optional[re.Match]:
    for c in candidates:
        m = _RANGE_RE.search(c)
        if m:
            return m
    return None


def extract_experience(text: str) -> List[WorkExperience]:
    """
    Heuristic: a short line naming a job title ("Senior Developer at Acme",
    or title then company on the next line) with a "2019 - 2022" or
    "2020 - Present" range on the same or next line.
    """
    lines = _lines(text)
    out: List[WorkExperience] = []

    for i, line in enumerate(lines):
        if not line or len(line) >= 100:
            continue
        if not any(contains_term(line, w) for w in _JOB_TITLE_WORDS):
            continue

        nxt = lines[i + 1] if i + 1 < len(lines) else ""
        head = _RANGE_RE.sub("", line).strip(" ,|-")
        if " at " in head:
            title, company = (p.strip() for p in head.split(" at ", 1))
        else:
            title, company = head, _RANGE_RE.sub("", nxt).strip(" ,|-")
        if not title or not company:
            continue

        m = _find_range(line, nxt)
        start: Optional[str] = None
        end: Optional[str] = None
        current = False
        if m:
            start = m.group(1)
            if m.group(2).lower() in ("present", "current"):
                current = True
            else:
                end = m.group(2)

        out.append(WorkExperience(start_date=start, end_date=end, is_current=current, title=title, company=company))
        if len(out) >= MAX_EXPERIENCE_ENTRIES:
            break

    return out


def extract_education(text: str) -> List[Education]:
    lines = _lines(text)
    out: List[Education] = []

    for i, line in enumerate(lines):
        if not line or len(line) >= 150:
            continue
        if not any(contains_term(line, w) for w in _DEGREE_WORDS):
            continue
        institution = lines[i + 1] if i + 1 < len(lines) else ""
        if not institution:
            continue
        year = _YEAR_RE.search(line)
        out.append(Education(degree=line, institution=institution, year=year.group(0) if year else None))
        if len(out) >= MAX_EDUCATION_ENTRIES:
            break

    return out


def parse_cv_text(text: str) -> ParsedCV:
    parsed = ParsedCV(
        skills=extract_skills(text),
        experience=extract_experience(text),
        education=extract_education(text),
        contact=extract_contact(text),
    )
    logger.debug(
        "Parsed CV: %d skills, %d experience entries, %d education entries",
        len(parsed.skills), len(parsed.experience), len(parsed.education),
    )
    return parsed


def highest_degree(education: Sequence[Education]) -> Optional[str]:
    best_rank = 0
    best: Optional[str] = None
    for e in education or []:
        degree = fold(e.degree)
        for key, rank in _DEGREE_RANK.items():
            if key in degree and rank > best_rank:
                best_rank, best = rank, e.degree
    return best
