from __future__ import annotations

import random
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def seeded_shuffle(items: Sequence[T], seed: str) -> List[T]:
    """
    Deterministic Fisher-Yates shuffle.

    Every call builds its own `random.Random(seed)`, so the result depends only
    on `items` and `seed`. String seeds are hashed with SHA-512 by `random`,
    which keeps the stream stable across processes (unlike `hash()`).
    The input is never modified; a new list is returned.
    """
    rng = random.Random(seed)
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out
