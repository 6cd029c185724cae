"""Study streak bookkeeping."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from app.api.schemas.dashboard import Streak


def advance_streak(streak: Optional[Streak], completed_on: date) -> Streak:
    """Return the streak after a study session finished on ``completed_on``."""
    if streak is None:
        return Streak(current_streak=1, longest_streak=1, last_active=completed_on)

    if streak.last_active == completed_on:
        return streak.model_copy()

    if streak.last_active == completed_on - timedelta(days=1):
        current = streak.current_streak + 1
    else:
        current = 1
    return Streak(
        current_streak=current,
        longest_streak=max(streak.longest_streak, current),
        last_active=completed_on,
    )


def reset_current_streak(streak: Streak) -> Streak:
    return streak.model_copy(update={"current_streak": 0})
