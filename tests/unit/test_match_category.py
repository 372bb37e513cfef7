import pytest

from jobmatch.matching import get_match_category


@pytest.mark.parametrize(
    "score,label",
    [
        (100, "Excellent Match"),
        (85, "Excellent Match"),
        (80, "Excellent Match"),
        (79, "Good Match"),
        (60, "Good Match"),
        (59, "Fair Match"),
        (40, "Fair Match"),
        (39, "Low Match"),
        (0, "Low Match"),
    ],
)
def test_band_boundaries(score, label):
    assert get_match_category(score).label == label


def test_category_carries_description_and_tone():
    cat = get_match_category(85)
    assert cat.description
    assert cat.tone == "green"
    assert get_match_category(10).tone == "gray"
    assert cat.to_dict() == {"label": "Excellent Match", "description": cat.description, "tone": "green"}


def test_every_band_has_its_own_description():
    descriptions = {get_match_category(s).description for s in (90, 70, 50, 10)}
    assert len(descriptions) == 4
