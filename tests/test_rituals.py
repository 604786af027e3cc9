import datetime as dt

import pytest

from services import rituals
from services.errors import ValidationError


def test_check_in_requires_focus():
    with pytest.raises(ValidationError) as exc:
        rituals.submit_check_in("high", "high", "   ")
    assert exc.value.title == "Focus Required"
    assert rituals.list_check_ins() == []


def test_check_in_rejects_unknown_level():
    with pytest.raises(ValidationError):
        rituals.submit_check_in("ecstatic", "high", "Ship it")


def test_one_check_in_per_day():
    rituals.submit_check_in("low", "low", "First", date="2024-05-01")
    rituals.submit_check_in("high", "medium", "Second", date="2024-05-01")
    rituals.submit_check_in("medium", "medium", "Earlier", date="2024-04-30")
    check_ins = rituals.list_check_ins()
    assert [c["date"] for c in check_ins] == ["2024-04-30", "2024-05-01"]
    assert rituals.check_in_for("2024-05-01")["focus"] == "Second"


def test_todays_check_in_defaults_to_today():
    assert rituals.todays_check_in() is None
    rituals.submit_check_in("high", "high", "  Launch  ")
    today = rituals.todays_check_in()
    assert today["date"] == dt.date.today().isoformat()
    assert today["focus"] == "Launch"


def test_reflection_requires_accomplishments():
    with pytest.raises(ValidationError) as exc:
        rituals.submit_reflection("")
    assert exc.value.title == "Accomplishments Required"


def test_reflection_values_are_clamped():
    reflection = rituals.submit_reflection("Shipped", tasks_completed=40, focus_achieved=0,
                                           energy_used=11, satisfaction_level=-3)
    assert reflection.tasks_completed == 20
    assert reflection.focus_achieved == 1
    assert reflection.energy_used == 10
    assert reflection.satisfaction_level == 1
    assert rituals.todays_reflection()["accomplishments"] == "Shipped"
