from __future__ import annotations
import math
from typing import Dict, List, Sequence, Type, TypeVar

from wtguesser.datasets.models import SELECTION_BUCKETS, VehicleRecord, VehicleType

T = TypeVar("T")

# ---- Global selector registry ----
REGISTRY: Dict[str, Type["BaseSelector"]] = {}


def register(cls: Type["BaseSelector"]) -> Type["BaseSelector"]:
    """
    Decorator: @register on a selector class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate selector id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that selectors inherit ----
class BaseSelector:
    id = "base"
    name = "Base"
    version = "0.0.0"
    deterministic = False  # same seed -> same target for every player

    def __init__(self):
        self.seed = None

    def reset(self, seed=None) -> None:
        self.seed = seed

    def draw(self) -> float:
        """One uniform draw in [0, 1)."""
        raise NotImplementedError("Override in subclass")

    def choose_index(self, n: int) -> int:
        """floor(draw * n); the same indexing for seeded and unseeded play."""
        if n <= 0:
            raise ValueError("cannot choose from an empty pool")
        return int(math.floor(self.draw() * n))

    def choose(self, items: Sequence[T]) -> T:
        return items[self.choose_index(len(items))]

    def select(self, records: Sequence[VehicleRecord]) -> VehicleRecord:
        """
        Pick a target from `records` with exactly two draws.

        First draw: a vehicle-type bucket from SELECTION_BUCKETS.
        Second draw: an index into the candidates of that bucket.

        Empty bucket fallbacks: medium tanks, then every record of a bucket
        type, then every record.
        """
        if not records:
            raise ValueError("candidate pool is empty")

        bucket = self.choose(SELECTION_BUCKETS)
        candidates: List[VehicleRecord] = [r for r in records if r.vehicle_type == bucket.value]

        if not candidates:
            candidates = [r for r in records if r.vehicle_type == VehicleType.MEDIUM_TANK.value]
        if not candidates:
            bucket_types = {b.value for b in SELECTION_BUCKETS}
            candidates = [r for r in records if r.vehicle_type in bucket_types]
        if not candidates:
            candidates = list(records)

        return self.choose(candidates)
