from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

DateLike = Union[str, date, datetime, None]


class LocationType(str, Enum):
    ON_SITE = "on-site"
    REMOTE = "remote"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, raw: Any) -> "LocationType":
        """
        Lenient parse for portal values ("On-site", "onsite", "Remote", ...).
        Unknown or missing values fall back to on-site, which never grants
        location credit on its own.
        """
        if isinstance(raw, cls):
            return raw
        key = normalize_whitespace(str(raw or "")).lower().replace("_", "-").replace(" ", "-")
        if key in ("onsite", "on-site"):
            return cls.ON_SITE
        try:
            return cls(key)
        except ValueError:
            return cls.ON_SITE


class RecordError(ValueError):
    """A record handed to the engine does not have the expected shape."""


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def _clean_list(values: Any, *, field_name: str) -> List[str]:
    if values is None:
        return []
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise RecordError(f"{field_name} must be a list of strings, got {type(values).__name__}")
    out: List[str] = []
    for v in values:
        nv = normalize_whitespace(str(v)) if v is not None else ""
        if nv:
            out.append(nv)
    return out


def _require_mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise RecordError(f"{kind} record must be a mapping, got {type(data).__name__}")
    return data


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    # Document-store records use camelCase; JSON written by hand often uses snake_case.
    for k in keys:
        if k in data and data[k] is not None:
            return data[k]
    return default


def _flag(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in ("true", "yes", "1")
    return bool(raw)


@dataclass(frozen=True)
class WorkExperience:
    start_date: DateLike
    end_date: DateLike = None
    is_current: bool = False

    title: Optional[str] = None
    company: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "WorkExperience":
        d = _require_mapping(data, "experience")
        return cls(
            start_date=_pick(d, "startDate", "start_date"),
            end_date=_pick(d, "endDate", "end_date"),
            is_current=_flag(_pick(d, "isCurrent", "is_current", default=False)),
            title=_pick(d, "title"),
            company=_pick(d, "company"),
        )


@dataclass(frozen=True)
class Education:
    degree: str
    institution: Optional[str] = None
    year: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "degree", normalize_whitespace(self.degree))

    @classmethod
    def from_dict(cls, data: Any) -> "Education":
        d = _require_mapping(data, "education")
        year = _pick(d, "year")
        return cls(
            degree=str(_pick(d, "degree", default="")),
            institution=_pick(d, "institution"),
            year=str(year) if year is not None else None,
        )


@dataclass(frozen=True)
class CandidateProfile:
    """
    What the matcher knows about a job seeker.
    Missing data is empty lists / empty location, never placeholders.
    """
    skills: List[str] = field(default_factory=list)
    experience: List[WorkExperience] = field(default_factory=list)
    location: str = ""
    education: List[Education] = field(default_factory=list)

    # Display-only passthrough
    candidate_id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", _clean_list(self.skills, field_name="skills"))
        object.__setattr__(self, "experience", list(self.experience or []))
        object.__setattr__(self, "location", normalize_whitespace(self.location or ""))
        object.__setattr__(self, "education", list(self.education or []))

    @classmethod
    def from_dict(cls, data: Any) -> "CandidateProfile":
        d = _require_mapping(data, "candidate")
        # Portal user documents nest the seeker data under "profile".
        body = d.get("profile") if isinstance(d.get("profile"), Mapping) else d

        raw_exp = _pick(body, "experience", default=[])
        raw_edu = _pick(body, "education", default=[])
        if not isinstance(raw_exp, (list, tuple)):
            raise RecordError("experience must be a list of entries")
        if not isinstance(raw_edu, (list, tuple)):
            raise RecordError("education must be a list of entries")

        cid = _pick(d, "uid", "id", "candidate_id")
        return cls(
            skills=_pick(body, "skills", default=[]),
            experience=[WorkExperience.from_dict(e) for e in raw_exp],
            location=str(_pick(body, "location", default="")),
            education=[Education.from_dict(e) for e in raw_edu],
            candidate_id=str(cid) if cid is not None else None,
            name=_pick(body, "fullName", "name") or _pick(d, "displayName", "name"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for e in d["experience"]:
            for k in ("start_date", "end_date"):
                if isinstance(e[k], (date, datetime)):
                    e[k] = e[k].isoformat()
        return d


@dataclass(frozen=True)
class JobPosting:
    """
    The requirements side of a match. Only the fields below feed scoring.
    """
    required_skills: List[str] = field(default_factory=list)
    required_experience: float = 0.0
    location: str = ""
    city: str = ""
    location_type: LocationType = LocationType.ON_SITE
    required_education: Optional[str] = None

    job_id: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_skills", _clean_list(self.required_skills, field_name="required_skills"))
        try:
            years = float(self.required_experience or 0)
        except (TypeError, ValueError):
            raise RecordError(f"required_experience must be numeric, got {self.required_experience!r}") from None
        object.__setattr__(self, "required_experience", max(0.0, years))
        object.__setattr__(self, "location", normalize_whitespace(self.location or ""))
        object.__setattr__(self, "city", normalize_whitespace(self.city or ""))
        object.__setattr__(self, "location_type", LocationType.parse(self.location_type))
        edu = normalize_whitespace(self.required_education or "")
        object.__setattr__(self, "required_education", edu or None)

    @classmethod
    def from_dict(cls, data: Any) -> "JobPosting":
        d = _require_mapping(data, "job")

        location_type = _pick(d, "locationType", "location_type")
        if location_type is None and _pick(d, "isRemote", "is_remote", default=False):
            location_type = LocationType.REMOTE

        company = _pick(d, "company", "companyName")
        if isinstance(company, Mapping):
            company = company.get("name")

        jid = _pick(d, "id", "job_id")
        return cls(
            required_skills=_pick(d, "requiredSkills", "required_skills", "skills", default=[]),
            required_experience=_pick(d, "requiredExperience", "required_experience", "minExperience", default=0),
            location=str(_pick(d, "location", default="")),
            city=str(_pick(d, "city", default="")),
            location_type=location_type or LocationType.ON_SITE,
            required_education=_pick(d, "requiredEducation", "required_education"),
            job_id=str(jid) if jid is not None else None,
            title=_pick(d, "title"),
            company=company,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["location_type"] = self.location_type.value
        return d
