from app.api.schemas.wellness import WellnessInput
from app.services.wellness_engine import calculate_wellness


def _check(stress, sleep_hours, energy):
    return calculate_wellness(WellnessInput(stress=stress, sleep_hours=sleep_hours, energy=energy))


def test_average_day_is_medium_and_normal():
    result = _check(6, 4, 4)
    assert result.score == 4.3
    assert result.level == "medium"
    assert result.mode == "normal"
    assert result.tips == [
        "Consider breaking your tasks into smaller chunks.",
        "Aim for 7-8 hours of sleep tonight. Sleep is crucial for memory.",
        "Moderate day: focus on your most important tasks only.",
    ]


def test_worst_case_switches_to_light_mode_with_every_warning():
    result = _check(10, 0, 0)
    assert result.score == 0.0
    assert result.level == "low"
    assert result.mode == "light"
    assert len(result.tips) == 7
    assert result.tips[0].startswith("Try a 5-minute breathing exercise")
    assert result.tips[-1].startswith("Light Mode activated")


def test_good_day_only_gets_encouragement():
    result = _check(2, 8, 9)
    assert result.score == 9.0
    assert result.level == "good"
    assert result.tips == ["You're doing great! Perfect time for challenging tasks."]


def test_threshold_scores_stay_medium():
    upper = _check(1, 8, 2)
    assert upper.score == 7.0
    assert upper.level == "medium"
    assert upper.mode == "normal"

    lower = _check(10, 8, 2)
    assert lower.score == 4.0
    assert lower.level == "medium"
    assert lower.mode == "normal"


def test_sleep_credit_is_capped_at_eight_hours():
    assert _check(5, 8, 5).score == _check(5, 12, 5).score


def test_score_moves_with_each_input():
    base = _check(5, 6, 5).score
    assert _check(7, 6, 5).score < base
    assert _check(5, 7, 5).score > base
    assert _check(5, 6, 7).score > base
