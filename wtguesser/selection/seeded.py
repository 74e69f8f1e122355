"""
Daily challenge selector.

Strategy:
  - Seed a SeededRandom (FNV-1a + Mulberry32) with a shared string, by
    default today's UTC date in ISO form ("2026-10-18").
  - Every player with the same seed gets the same bucket draw and the same
    index draw, hence the same target and the same alias set.

Notes:
  - reset() must be called before each selection to restart the sequence;
    a fresh instance with the same seed always replays the same draws.
"""

from __future__ import annotations

import datetime as dt

from .base import BaseSelector, register
from .rng import SeededRandom


def daily_seed(today: dt.date | None = None) -> str:
    """ISO calendar date used as the daily seed (UTC when `today` is omitted)."""
    day = today or dt.datetime.now(dt.timezone.utc).date()
    return day.isoformat()


@register
class DailySelector(BaseSelector):
    id = "daily"
    name = "Daily Challenge"
    version = "1.0.0"
    deterministic = True

    def __init__(self):
        super().__init__()
        self._rng = SeededRandom(daily_seed())
        self.seed = self._rng.seed

    def reset(self, seed: str | None = None) -> None:
        """Restart the draw sequence from `seed` (today's date if None)."""
        self.seed = seed if seed is not None else daily_seed()
        self._rng = SeededRandom(str(self.seed))

    def draw(self) -> float:
        return self._rng.next()
