import datetime as dt

import pytest

from services import analyzer
from services.analyzer import ProductivityPattern


def _day(i):
    # 2024-01-01 is a Monday
    return (dt.date(2024, 1, 1) + dt.timedelta(days=i)).isoformat()


def _check_in(i, mood="medium", energy="medium"):
    return {"date": _day(i), "mood": mood, "energy": energy, "focus": "ship", "completed": True}


def _reflection(i, tasks=3, focus=5, satisfaction=7):
    return {"date": _day(i), "tasks_completed": tasks, "focus_achieved": focus,
            "satisfaction_level": satisfaction, "accomplishments": "x", "completed": True}


def test_pearson_perfect_and_undefined():
    assert analyzer.pearson([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)
    assert analyzer.pearson([1, 2, 3], [3, 2, 1]) == pytest.approx(-1.0)
    assert analyzer.pearson([2, 2, 2], [1, 5, 9]) == 0
    assert analyzer.pearson([1], [1]) == 0
    assert analyzer.pearson([], []) == 0


def test_average_and_level_score():
    assert analyzer.average([]) == 0
    assert analyzer.average([1, 2, 3]) == 2
    assert analyzer.level_score("high") == 3
    assert analyzer.level_score("bogus") == 1


def test_too_few_check_ins_gives_default_pattern():
    pattern = analyzer.analyze_patterns([_check_in(0), _check_in(1)], [_reflection(0), _reflection(1)])
    assert pattern == ProductivityPattern()
    assert pattern.best_mood_day == "Monday"
    assert pattern.average_mood_score == 2
    assert pattern.average_productivity == 5


def test_no_productive_days_gives_default_pattern():
    check_ins = [_check_in(i) for i in range(5)]
    assert analyzer.analyze_patterns(check_ins, []) == ProductivityPattern()


def test_combine_days_defaults_and_filtering():
    combined = analyzer.combine_days(
        [_check_in(2), _check_in(0), _check_in(1)],
        [_reflection(0, tasks=4), _reflection(1, tasks=0)],
    )
    # day 1 had no tasks, day 2 had no reflection
    assert [d["date"] for d in combined] == [_day(0)]
    assert combined[0]["tasks_completed"] == 4


def test_best_mood_and_energy():
    check_ins = [
        _check_in(0, mood="high", energy="low"),
        _check_in(1, mood="high", energy="low"),
        _check_in(2, mood="low", energy="high"),
        _check_in(3, mood="medium", energy="high"),
    ]
    reflections = [
        _reflection(0, tasks=6, focus=3),
        _reflection(1, tasks=8, focus=4),
        _reflection(2, tasks=2, focus=9),
        _reflection(3, tasks=3, focus=7),
    ]
    pattern = analyzer.analyze_patterns(check_ins, reflections)
    assert pattern.best_mood_for_productivity == "high"
    assert pattern.best_energy_for_focus == "high"
    assert pattern.average_tasks_on_high_mood == 7
    assert pattern.average_tasks_on_low_mood == 2
    assert pattern.high_energy_days == 2
    assert pattern.productivity_trend == "stable"
    assert pattern.best_mood_day in {"Monday", "Tuesday"}


def test_ties_prefer_high():
    check_ins = [_check_in(i, mood=m) for i, m in enumerate(["low", "medium", "high"])]
    reflections = [_reflection(i, tasks=3) for i in range(3)]
    assert analyzer.analyze_patterns(check_ins, reflections).best_mood_for_productivity == "high"


def test_focus_correlation_positive():
    levels = ["low", "medium", "high", "low", "high"]
    check_ins = [_check_in(i, mood=lvl, energy=lvl) for i, lvl in enumerate(levels)]
    reflections = [_reflection(i, focus={"low": 2, "medium": 5, "high": 9}[lvl]) for i, lvl in enumerate(levels)]
    pattern = analyzer.analyze_patterns(check_ins, reflections)
    assert pattern.focus_correlation > 0.9


@pytest.mark.parametrize("older,recent,expected", [
    (2, 5, "improving"),
    (5, 2, "declining"),
    (4, 4, "stable"),
])
def test_trend(older, recent, expected):
    check_ins = [_check_in(i) for i in range(14)]
    reflections = [_reflection(i, tasks=older if i < 7 else recent) for i in range(14)]
    assert analyzer.analyze_patterns(check_ins, reflections).productivity_trend == expected


def test_recommendations_for_matching_state():
    pattern = ProductivityPattern(focus_correlation=0.7, productivity_trend="declining")
    recs = analyzer.get_productivity_recommendations("high", "high", pattern)
    assert len(recs) == 4
    assert recs[0].startswith("You're in your most productive mood")
    assert "declining" in recs[-1]


def test_recommendations_for_low_state():
    recs = analyzer.get_productivity_recommendations("low", "low", ProductivityPattern())
    assert recs[0].startswith("Low mood detected")
    assert recs[1].startswith("Low energy")


def test_chart_frame_joins_by_date():
    check_ins = [_check_in(1, mood="high", energy="low")]
    reflections = [_reflection(i, tasks=i) for i in range(10)]
    frame = analyzer.chart_frame(check_ins, reflections)
    assert len(frame) == 7
    assert list(frame.index)[0] == "Jan 04"
    # day 1 fell out of the window; no check-in means score 1
    assert set(frame["mood"]) == {1}

    frame = analyzer.chart_frame(check_ins, reflections[:3])
    assert frame.loc["Jan 02", "mood"] == 3
    assert frame.loc["Jan 02", "energy"] == 1


def test_chart_frame_empty():
    assert analyzer.chart_frame([], []).empty


def test_mood_distribution():
    check_ins = [_check_in(0, mood="high"), _check_in(1, mood="high"), _check_in(2, mood="low")]
    assert analyzer.mood_distribution(check_ins) == {"High": 2, "Medium": 0, "Low": 1}
