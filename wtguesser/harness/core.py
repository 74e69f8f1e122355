"""
Experiment harness core primitives.

- run_case:  replay a scripted list of guesses against one target.
- run_batch: cross-resolve every vehicle's display name against every other
             vehicle in a dataset and report collisions (false positives).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List, Sequence

import numpy as np

from wtguesser.datasets.models import Difficulty, Target, VehicleRecord, describe
from wtguesser.engine import resolve_guess
from .session import GameSession


def run_case(
        target: Target,
        guesses: Iterable[str],
        *,
        difficulty: Difficulty = Difficulty.HARD,
        pool: Sequence[Target] = (),
) -> Dict:
    """
    Play guesses in order until the session wins, loses or runs out of input.

    Blank guesses are skipped by the session and do not show up in history.

    Returns:
        dict with keys:
            success (bool), attempts (int), time_ms (float),
            history (list[(guess, correct)]), answer (str)
    """
    session = GameSession(target=target, difficulty=difficulty, pool=pool)

    t0 = time.perf_counter()
    for guess in guesses:
        if session.finished:
            break
        session.submit(guess)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": session.won,
        "attempts": session.attempts,
        "time_ms": dt,
        "history": [(r.guess, r.correct) for r in session.history],
        "answer": target.display_name,
    }


def run_batch(
        records: Sequence[VehicleRecord],
        *,
        convert_roman: bool = True,
        sample: int | None = None,
        on_progress: Callable[[int, int], None] | None = None,
) -> Dict:
    """
    Cross-resolve display names over a dataset.

    matrix[i, j] is True when guessing vehicle i's display name is accepted
    for target j. The diagonal should be all True (every vehicle recognises
    its own name); off-diagonal hits are collisions a player could exploit.

    If 'sample' is provided, only the first K records are scanned (quadratic).

    Returns:
        dict with keys:
            names (list[str]), matrix (np.ndarray[bool]), rows (list[dict]),
            self_misses (list[str]), collisions (int)
    """
    pool = list(records)
    if sample is not None:
        pool = pool[:sample]

    targets = [describe(r) for r in pool]
    n = len(targets)
    matrix = np.zeros((n, n), dtype=bool)

    for j, target in enumerate(targets):
        for i, guessed in enumerate(targets):
            matrix[i, j] = resolve_guess(
                guessed.display_name, target.display_name, target.aliases, convert_roman
            )
        if on_progress is not None:
            on_progress(j + 1, n)

    off_diagonal = matrix & ~np.eye(n, dtype=bool)
    rows: List[Dict] = []
    for j, target in enumerate(targets):
        accepted = [targets[i].display_name for i in np.flatnonzero(off_diagonal[:, j])]
        rows.append({
            "identifier": target.record.identifier,
            "name": target.display_name,
            "self_match": bool(matrix[j, j]),
            "collisions": len(accepted),
            "accepted_names": accepted,
        })

    return {
        "names": [t.display_name for t in targets],
        "matrix": matrix,
        "rows": rows,
        "self_misses": [t.display_name for k, t in enumerate(targets) if not matrix[k, k]],
        "collisions": int(off_diagonal.sum()),
    }
