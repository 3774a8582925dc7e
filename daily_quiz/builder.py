

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Dict, Iterable, List

from .models import Difficulty, Question
from .quota import DEFAULT_QUOTAS, QuotaTable
from .shuffle import seeded_shuffle


logger = logging.getLogger(__name__)


def group_by_difficulty(pool: Iterable[Question]) -> Dict[Difficulty, List[Question]]:
    """Partition the pool by difficulty, keeping pool order inside each group."""
    groups: Dict[Difficulty, List[Question]] = {}
    for q in pool:
        groups.setdefault(q.difficulty, []).append(q)
    return groups


def _pick_from_group(
    groups: Dict[Difficulty, List[Question]],
    difficulty: Difficulty,
    n: int,
    day_seed: str,
) -> List[Question]:
    shuffled = seeded_shuffle(groups.get(difficulty, []), f"{day_seed}-{difficulty.value}")
    return shuffled[:n]


def build_daily_set(
    pool: Iterable[Question],
    day_seed: str,
    quotas: QuotaTable = DEFAULT_QUOTAS,
) -> List[Question]:
    """
    Build the difficulty-ordered daily set for `day_seed`.

    Each difficulty block is drawn from its own seeded shuffle and the blocks
    are concatenated in quota order. Short groups are backfilled from the rest
    of the pool; an undersized pool simply gives a shorter list.
    """
    quotas.check_labels()
    pool = list(pool)
    target = quotas.target_size
    groups = group_by_difficulty(pool)

    result: List[Question] = []
    for difficulty, n in quotas:
        result.extend(_pick_from_group(groups, difficulty, n, day_seed))

    if len(result) < target:
        needed = target - len(result)
        picked_ids = {q.id for q in result}
        remaining = [q for q in pool if q.id not in picked_ids]
        filler = seeded_shuffle(remaining, f"{day_seed}-filler")[:needed]
        result.extend(filler)
        logger.warning(
            "Difficulty groups short by %d for seed %s; filled %d from the remaining pool",
            needed,
            day_seed,
            len(filler),
        )
        if len(result) < target:
            logger.warning("Pool exhausted: daily set has %d of %d questions", len(result), target)
    elif len(result) > target:
        logger.warning("Daily set overflowed to %d items; truncating to %d", len(result), target)
        del result[target:]

    return result


def build_user_quiz(
    pool: Iterable[Question],
    day_seed: str,
    user_id: str,
    *,
    date_key: str | None = None,
    quotas: QuotaTable = DEFAULT_QUOTAS,
) -> List[Question]:
    """
    Daily set for `day_seed`, re-ordered for one user.

    The user ordering is seeded with `"{user_id}-{date_key}"`; `date_key`
    falls back to `day_seed` when the caller has no separate calendar key.
    """
    daily = build_daily_set(pool, day_seed, quotas)
    key = day_seed if date_key is None else date_key
    return seeded_shuffle(daily, f"{user_id}-{key}")


class DailyQuiz:
    """
    High-level API used by the web service.

    Holds the static pool and a validated quota table. Daily sets are pure
    functions of the day seed, so a few recent ones are kept in memory.

    Usage:

    ```python
    quiz = DailyQuiz(pool)
    questions = quiz.for_user("alice", day_seed="2024-05-01-1", date_key="2024-05-01")
    ```
    """

    def __init__(
        self,
        pool: Iterable[Question],
        quotas: QuotaTable = DEFAULT_QUOTAS,
        cache_size: int = 4,
    ) -> None:
        self._pool = tuple(pool)
        self._quotas = quotas.validate()
        self._cache_size = cache_size
        self._daily_sets: OrderedDict[str, tuple[Question, ...]] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def quotas(self) -> QuotaTable:
        return self._quotas

    def __len__(self) -> int:
        return len(self._pool)

    def daily_set(self, day_seed: str) -> List[Question]:
        with self._lock:
            cached = self._daily_sets.get(day_seed)
        if cached is None:
            cached = tuple(build_daily_set(self._pool, day_seed, self._quotas))
            if self._cache_size > 0:
                with self._lock:
                    self._daily_sets[day_seed] = cached
                    while len(self._daily_sets) > self._cache_size:
                        self._daily_sets.popitem(last=False)
        return list(cached)

    def for_user(self, user_id: str, day_seed: str, date_key: str | None = None) -> List[Question]:
        key = day_seed if date_key is None else date_key
        return seeded_shuffle(self.daily_set(day_seed), f"{user_id}-{key}")
