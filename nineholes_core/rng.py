from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar('T')


class RandomSource:
    """Seedable tie-breaker for the AI. Pass a seed to make its choices reproducible."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def seed(self, value: Optional[int]) -> None:
        self._rng.seed(value)

    def uniform(self) -> float:
        """A float in [0, 1)."""
        return self._rng.random()

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """A uniformly chosen element of ``items``, or None when it is empty."""
        if not items:
            return None
        return items[int(self.uniform() * len(items))]
