"""
Free-play selector.

Strategy:
  - Draw from random.Random; unseeded by default so every game differs.
  - Uses the same bucket-then-index logic as the daily selector.

Notes:
  - Passing an int seed to reset() makes runs reproducible for tests and
    batch experiments; it is not the cross-platform daily contract.
"""

from __future__ import annotations

import random

from .base import BaseSelector, register


@register
class RandomSelector(BaseSelector):
    id = "random"
    name = "Random"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.rng = random.Random()

    def reset(self, seed: int | None = None) -> None:
        super().reset(seed)
        if seed is not None:
            self.rng.seed(seed)

    def draw(self) -> float:
        return self.rng.random()
