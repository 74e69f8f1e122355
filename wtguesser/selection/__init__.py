from __future__ import annotations
from typing import List
from .base import BaseSelector, REGISTRY, register
from .rng import SeededRandom, fnv1a_32
from .seeded import daily_seed

from . import seeded  # noqa: F401
from . import uniform  # noqa: F401


def create_selector(selector_id: str) -> BaseSelector:
    """
    Factory: instantiate a registered selector by id.
    """
    try:
        cls = REGISTRY[selector_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown selector id: {selector_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_selector_ids() -> List[str]:
    """
    Return all registered selector ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
