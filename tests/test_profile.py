import pytest

from services import profile as profile_svc, persistence
from services.errors import ValidationError


def test_default_profile_when_nothing_stored():
    profile = profile_svc.get_profile()
    assert profile["onboarded"] is False
    assert profile["alignment_scores"] == {"clarity": 5, "energy": 5, "confidence": 5}


def test_complete_onboarding():
    profile = profile_svc.complete_onboarding(" Sam ", "Indie hacker", ["Build an audience"],
                                              "intermediate", ["SaaS"])
    assert profile["name"] == "Sam"
    assert profile["onboarded"] is True
    assert profile_svc.get_profile()["goals"] == ["Build an audience"]


def test_onboarding_requires_name():
    with pytest.raises(ValidationError) as exc:
        profile_svc.complete_onboarding("", "", [], "beginner", [])
    assert exc.value.title == "Name Required"


def test_save_profile_filters_keys_and_clamps_scores():
    profile_svc.save_profile({"mission": "Calm tools", "password": "x",
                              "alignment_scores": {"clarity": 14, "energy": 0}})
    profile = profile_svc.get_profile()
    assert profile["mission"] == "Calm tools"
    assert "password" not in persistence.load_dict("profile")
    assert profile["alignment_scores"] == {"clarity": 10, "energy": 1, "confidence": 5}


def test_invalid_experience_rejected():
    with pytest.raises(ValidationError):
        profile_svc.save_profile({"experience": "guru"})


def test_skip_and_reset():
    profile_svc.skip_onboarding()
    assert profile_svc.get_profile()["onboarded"] is True
    assert profile_svc.reset_profile()["onboarded"] is False


def test_alignment_average():
    assert profile_svc.alignment_average({}) == 5
    assert profile_svc.alignment_average({"alignment_scores": {"clarity": 9, "energy": 6, "confidence": 7}}) == 7
