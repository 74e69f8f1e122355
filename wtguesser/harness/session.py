"""
One game against one target: attempts, hint gating and feedback.

Rules:
  - MAX_ATTEMPTS misses lose the game; a match wins it immediately.
  - Blank guesses are ignored (no attempt spent).
  - Hints unlock by attempts used: NATION always, RANK >= 1, BR >= 2,
    CLASS >= 3, ARMAMENT >= 4. The image blur shrinks by BLUR_STEP per attempt.
  - Hard mode resolves free text with Roman numeral conversion and, when the
    guess names a pool vehicle, records a comparison row (nation/rank/BR/class).
  - Easy mode offers a hint-filtered list of pool vehicles instead.

The session never touches I/O; callers render hints and read results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from wtguesser.datasets.models import Difficulty, Target
from wtguesser.engine import resolve_guess, validate_guess
from wtguesser.engine.naming import rank_to_number

# Game configuration
MAX_ATTEMPTS = 6
MAX_BLUR = 30
BLUR_STEP = 6
SUGGESTIONS_LIMIT = 10

# (attempts needed, label); NATION is always visible
HINT_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (0, "NATION"),
    (1, "RANK"),
    (2, "BR"),
    (3, "CLASS"),
    (4, "ARMAMENT"),
)


@dataclass(frozen=True)
class Feedback:
    """Comparison of a wrong (but real) vehicle against the target."""
    vehicle_name: str
    nation: str
    nation_correct: bool
    rank: str
    rank_indicator: str     # 'correct' | 'higher' | 'lower' (where the target sits)
    br: float
    br_indicator: str
    vehicle_class: str
    class_correct: bool


@dataclass(frozen=True)
class GuessResult:
    guess: str
    correct: bool
    attempts: int           # attempts used after this guess
    feedback: Feedback | None = None


def _indicator(guessed: float, target: float, tolerance: float) -> str:
    if abs(guessed - target) < tolerance:
        return "correct"
    return "higher" if guessed < target else "lower"


def generate_feedback(guessed: Target, target: Target) -> Feedback:
    """
    Compare a guessed vehicle with the target.

    Indicators say where the target is relative to the guess: a rank III
    guess against a rank V target reads 'higher'. Ranks compare by their
    labels ("IV" -> 4). BR counts as equal within 0.05.
    """
    return Feedback(
        vehicle_name=guessed.display_name,
        nation=guessed.nation,
        nation_correct=guessed.nation.lower() == target.nation.lower(),
        rank=guessed.rank_label,
        rank_indicator=_indicator(
            rank_to_number(guessed.rank_label), rank_to_number(target.rank_label), tolerance=1),
        br=guessed.battle_rating,
        br_indicator=_indicator(guessed.battle_rating, target.battle_rating, tolerance=0.05),
        vehicle_class=guessed.vehicle_class,
        class_correct=guessed.vehicle_class.lower() == target.vehicle_class.lower(),
    )


def normalize_for_search(text: str) -> str:
    """Lowercase, with runs of '-', '_' and whitespace collapsed to one space."""
    return re.sub(r"[-_\s]+", " ", text.lower()).strip()


def matches_search(name: str, query: str) -> bool:
    return normalize_for_search(query) in normalize_for_search(name)


@dataclass
class GameSession:
    target: Target
    difficulty: Difficulty = Difficulty.HARD
    pool: Sequence[Target] = ()
    attempts: int = 0
    won: bool = False
    lost: bool = False
    history: List[GuessResult] = field(default_factory=list)
    feedback: List[Feedback] = field(default_factory=list)

    @property
    def convert_roman(self) -> bool:
        return self.difficulty is Difficulty.HARD

    @property
    def finished(self) -> bool:
        return self.won or self.lost

    @property
    def attempts_left(self) -> int:
        return MAX_ATTEMPTS - self.attempts

    @property
    def blur(self) -> int:
        return max(0, MAX_BLUR - self.attempts * BLUR_STEP)

    def submit(self, guess: str) -> GuessResult | None:
        """
        Judge one guess. Returns None for blank input (nothing recorded).

        Raises RuntimeError once the game is over.
        """
        if self.finished:
            raise RuntimeError("game is already over")
        if not validate_guess(guess):
            return None

        if resolve_guess(guess, self.target.display_name, self.target.aliases, self.convert_roman):
            self.won = True
            result = GuessResult(guess=guess, correct=True, attempts=self.attempts)
            self.history.append(result)
            return result

        fb = None
        if self.difficulty is Difficulty.HARD:
            guessed = self._find_in_pool(guess)
            if guessed is not None:
                fb = generate_feedback(guessed, self.target)
                self.feedback.append(fb)

        self.attempts += 1
        if self.attempts >= MAX_ATTEMPTS:
            self.lost = True

        result = GuessResult(guess=guess, correct=False, attempts=self.attempts, feedback=fb)
        self.history.append(result)
        return result

    def skip_hint(self) -> bool:
        """Spend an attempt to reveal the next hint; never spends the last one."""
        if self.finished or self.attempts >= MAX_ATTEMPTS - 1:
            return False
        self.attempts += 1
        return True

    def revealed_hints(self) -> List[Tuple[str, str]]:
        values = {
            "NATION": self.target.nation,
            "RANK": self.target.rank_label,
            "BR": f"{self.target.battle_rating:.1f}",
            "CLASS": self.target.vehicle_class,
            "ARMAMENT": self.target.armament,
        }
        return [(label, values[label]) for need, label in HINT_THRESHOLDS if self.attempts >= need]

    def _hint_filtered(self, entries: Sequence[Target]) -> List[Target]:
        out = [v for v in entries if v.nation == self.target.nation]
        if self.attempts >= 1:
            out = [v for v in out if v.rank_label == self.target.rank_label]
        if self.attempts >= 3:
            out = [v for v in out if v.vehicle_class == self.target.vehicle_class]
        return out

    def _find_in_pool(self, guess: str) -> Target | None:
        wanted = guess.strip().lower()
        for v in self.pool:
            if v.display_name.lower() == wanted:
                return v
        return None

    def filtered_pool(self, query: str = "") -> List[Target]:
        """Easy mode list: pool narrowed by revealed hints and the typed query, sorted by name."""
        out = self._hint_filtered(self.pool)
        if query.strip():
            out = [v for v in out if matches_search(v.display_name, query)]
        return sorted(out, key=lambda v: v.display_name.casefold())

    def suggestions(self, query: str) -> List[Target]:
        """
        Hard mode autocomplete: unique names narrowed by hints and the query,
        prefix matches first, at most SUGGESTIONS_LIMIT entries.
        """
        if not query.strip():
            return []

        seen = set()
        unique: List[Target] = []
        for v in self.pool:
            key = v.display_name.lower()
            if key not in seen:
                seen.add(key)
                unique.append(v)

        wanted = normalize_for_search(query)
        hits = [v for v in self._hint_filtered(unique) if matches_search(v.display_name, query)]
        hits.sort(key=lambda v: (
            not normalize_for_search(v.display_name).startswith(wanted),
            v.display_name.casefold(),
        ))
        return hits[:SUGGESTIONS_LIMIT]
