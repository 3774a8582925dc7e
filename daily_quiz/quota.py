from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Tuple

from .models import Difficulty


DAILY_SET_SIZE = 30


class QuotaConfigError(ValueError):
    """Raised when a quota table can't produce a well-formed daily set."""


@dataclass(frozen=True)
class QuotaTable:
    """
    How many questions to draw per difficulty, in progression order.

    Iteration order is the order the blocks appear in the daily set, so the
    default table yields an Easy block, then Medium, then Hard.
    """

    counts: Tuple[Tuple[Difficulty, int], ...]
    target_size: int = DAILY_SET_SIZE

    @classmethod
    def from_mapping(
        cls, counts: Mapping[str | Difficulty, int], target_size: int = DAILY_SET_SIZE
    ) -> "QuotaTable":
        items = []
        for label, n in counts.items():
            try:
                difficulty = Difficulty(label)
            except ValueError as exc:
                raise QuotaConfigError(f"Unknown difficulty label in quota table: {label!r}") from exc
            items.append((difficulty, n))
        return cls(tuple(items), target_size=target_size)

    def __iter__(self) -> Iterator[Tuple[Difficulty, int]]:
        return iter(self.counts)

    def __getitem__(self, difficulty: Difficulty) -> int:
        for label, n in self.counts:
            if label == difficulty:
                return n
        raise KeyError(difficulty)

    def as_dict(self) -> Dict[str, int]:
        return {label.value: n for label, n in self.counts}

    @property
    def total(self) -> int:
        return sum(n for _, n in self.counts)

    def check_labels(self) -> "QuotaTable":
        """Every difficulty exactly once, each with a non-negative int count."""
        labels = [label for label, _ in self.counts]
        if len(set(labels)) != len(labels):
            raise QuotaConfigError(f"Duplicate difficulty labels in quota table: {labels}")
        missing = [d.value for d in Difficulty if d not in labels]
        if missing:
            raise QuotaConfigError(f"Quota table is missing difficulty labels: {missing}")
        for label, n in self.counts:
            if not isinstance(n, int) or isinstance(n, bool) or n < 0:
                raise QuotaConfigError(f"Quota for {label.value} must be a non-negative int, got {n!r}")
        return self

    def validate(self) -> "QuotaTable":
        """Fail loudly on a table that doesn't describe a full daily set."""
        self.check_labels()
        if self.target_size <= 0:
            raise QuotaConfigError(f"Target size must be positive, got {self.target_size}")
        if self.total != self.target_size:
            raise QuotaConfigError(
                f"Quota counts sum to {self.total}, expected {self.target_size}"
            )
        return self


DEFAULT_QUOTAS = QuotaTable(
    (
        (Difficulty.EASY, 4),
        (Difficulty.MEDIUM, 5),
        (Difficulty.HARD, 21),
    )
)
