from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


ROTATION_SIZE = 3


@dataclass(frozen=True)
class QuizDay:
    """Seeds for one calendar day: `date_key` is YYYY-MM-DD, `rotation` cycles 0..N-1."""

    date_key: str
    rotation: int

    @property
    def day_seed(self) -> str:
        return f"{self.date_key}-{self.rotation}"

    def user_seed(self, user_id: str) -> str:
        return f"{user_id}-{self.date_key}"


def quiz_day(today: dt.date | None = None, rotation_size: int = ROTATION_SIZE) -> QuizDay:
    if rotation_size <= 0:
        raise ValueError(f"rotation_size must be positive, got {rotation_size}")
    if today is None:
        today = dt.datetime.now(dt.timezone.utc).date()
    return QuizDay(date_key=today.isoformat(), rotation=today.day % rotation_size)
