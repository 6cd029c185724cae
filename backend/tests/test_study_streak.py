from datetime import date

from app.api.schemas.dashboard import Streak
from app.services.study_streak import advance_streak, reset_current_streak

DAY = date(2026, 3, 4)


def test_first_session_starts_streak():
    streak = advance_streak(None, DAY)
    assert (streak.current_streak, streak.longest_streak, streak.last_active) == (1, 1, DAY)


def test_same_day_session_is_idempotent():
    existing = Streak(current_streak=3, longest_streak=5, last_active=DAY)
    assert advance_streak(existing, DAY) == existing


def test_consecutive_day_extends_and_tracks_longest():
    existing = Streak(current_streak=5, longest_streak=5, last_active=date(2026, 3, 3))
    streak = advance_streak(existing, DAY)
    assert streak.current_streak == 6
    assert streak.longest_streak == 6


def test_gap_resets_current_but_keeps_longest():
    existing = Streak(current_streak=4, longest_streak=9, last_active=date(2026, 3, 1))
    streak = advance_streak(existing, DAY)
    assert streak.current_streak == 1
    assert streak.longest_streak == 9
    assert streak.last_active == DAY


def test_reset_current_streak():
    existing = Streak(current_streak=4, longest_streak=9, last_active=DAY)
    assert reset_current_streak(existing).current_streak == 0
    assert reset_current_streak(existing).longest_streak == 9
