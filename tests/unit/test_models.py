import pytest

from jobmatch.models import (
    CandidateProfile,
    Education,
    JobPosting,
    LocationType,
    RecordError,
    WorkExperience,
)


def test_candidate_from_portal_user_document(load_json):
    c = CandidateProfile.from_dict(load_json("candidate.json"))
    assert c.candidate_id == "seeker-001"
    assert c.name == "Ayesha Khan"
    assert c.location == "Lahore, Punjab"
    assert c.skills == ["React", "TypeScript", "Node.js", "SQL"]
    assert c.experience[1] == WorkExperience(
        start_date="2021-02", end_date=None, is_current=True, title="Senior Frontend Developer", company="Systems Ltd"
    )
    assert c.education == [Education(degree="Bachelor's in Computer Science", institution="FAST NUCES", year="2018")]


def test_candidate_from_flat_snake_case_record():
    c = CandidateProfile.from_dict(
        {
            "skills": ["  Python ", "", "Django"],
            "experience": [{"start_date": "2020-01", "is_current": "true"}],
            "location": None,
        }
    )
    assert c.skills == ["Python", "Django"]
    assert c.experience[0].is_current is True
    assert c.location == ""
    assert c.education == []


def test_candidate_defaults_are_empty():
    c = CandidateProfile()
    assert c.skills == [] and c.experience == [] and c.education == []
    assert c.location == ""


def test_job_from_portal_document(load_json):
    raw = load_json("jobs.json")[0]
    j = JobPosting.from_dict(raw)
    assert j.job_id == "job-frontend-lahore"
    assert j.company == "Tkxel"
    assert j.required_skills == ["React", "TypeScript"]
    assert j.required_experience == 3.0
    assert j.location_type is LocationType.ON_SITE
    assert j.required_education == "Bachelor's"


def test_job_is_remote_flag_maps_to_location_type():
    assert JobPosting.from_dict({"isRemote": True}).location_type is LocationType.REMOTE
    # explicit locationType wins
    assert JobPosting.from_dict({"isRemote": True, "locationType": "hybrid"}).location_type is LocationType.HYBRID


def test_job_legacy_min_experience_key():
    assert JobPosting.from_dict({"minExperience": "2"}).required_experience == 2.0


def test_job_blank_education_means_no_requirement():
    assert JobPosting(required_education="   ").required_education is None
    assert JobPosting.from_dict({"requiredEducation": ""}).required_education is None


def test_job_negative_experience_is_no_requirement():
    assert JobPosting(required_experience=-3).required_experience == 0.0


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("on-site", LocationType.ON_SITE),
        ("On-site", LocationType.ON_SITE),
        ("onsite", LocationType.ON_SITE),
        ("on_site", LocationType.ON_SITE),
        ("Remote", LocationType.REMOTE),
        ("HYBRID", LocationType.HYBRID),
        ("somewhere", LocationType.ON_SITE),
        (None, LocationType.ON_SITE),
    ],
)
def test_location_type_parse(raw, expected):
    assert LocationType.parse(raw) is expected


def test_record_errors():
    with pytest.raises(RecordError):
        CandidateProfile.from_dict(["not", "a", "mapping"])
    with pytest.raises(RecordError):
        CandidateProfile.from_dict({"skills": "python"})
    with pytest.raises(RecordError):
        CandidateProfile.from_dict({"experience": {"startDate": "2020"}})
    with pytest.raises(RecordError):
        JobPosting.from_dict({"requiredExperience": "lots"})
    with pytest.raises(RecordError):
        JobPosting.from_dict("job-1")


def test_record_error_is_a_value_error():
    assert issubclass(RecordError, ValueError)


def test_to_dict_is_json_friendly():
    from datetime import date

    c = CandidateProfile(experience=[WorkExperience(start_date=date(2020, 1, 1))])
    assert c.to_dict()["experience"][0]["start_date"] == "2020-01-01"
    assert JobPosting(location_type=LocationType.REMOTE).to_dict()["location_type"] == "remote"
