"""
Core data types for vehicle records and the targets built from them.

Closed vocabularies (nation, vehicle type, difficulty) are enums and are
validated here, at the loading boundary. The formatter and matcher downstream
accept any string.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Tuple

from wtguesser.engine.naming import (
    format_name,
    generate_aliases,
    nation_name,
    to_roman,
    vehicle_class,
)


class Nation(str, Enum):
    USA = "usa"
    GERMANY = "germany"
    USSR = "ussr"
    BRITAIN = "britain"
    JAPAN = "japan"
    CHINA = "china"
    ITALY = "italy"
    FRANCE = "france"
    SWEDEN = "sweden"
    ISRAEL = "israel"


class VehicleType(str, Enum):
    TANK = "tank"
    LIGHT_TANK = "light_tank"
    MEDIUM_TANK = "medium_tank"
    HEAVY_TANK = "heavy_tank"
    TANK_DESTROYER = "tank_destroyer"
    SPAA = "spaa"
    LBV = "lbv"
    MBV = "mbv"
    HBV = "hbv"


class Difficulty(str, Enum):
    EASY = "EASY"  # assisted: pick from a hint-filtered list
    HARD = "HARD"  # free text, Roman numerals convert to digits


# Type buckets drawn from when picking a target. Order is part of the seeded
# contract: changing it changes every daily challenge.
SELECTION_BUCKETS: Tuple[VehicleType, ...] = (
    VehicleType.MEDIUM_TANK,
    VehicleType.HEAVY_TANK,
    VehicleType.TANK_DESTROYER,
    VehicleType.SPAA,
    VehicleType.LIGHT_TANK,
)

UNKNOWN_ARMAMENT = "Unknown Armament"


@dataclass(frozen=True)
class VehicleRecord:
    """One dataset row, immutable once loaded."""
    identifier: str          # unique key, e.g. "germ_marder_1a3"
    country_code: str        # Nation value, e.g. "germany"
    rank: int                # era, 1..9
    battle_rating: float     # realistic ground BR
    vehicle_type: str        # VehicleType value
    armament_raw: str = UNKNOWN_ARMAMENT
    image_url: str = ""


@dataclass(frozen=True)
class Target:
    """Display-side view of a record: formatted name, aliases and hint labels."""
    record: VehicleRecord
    display_name: str
    aliases: Tuple[str, ...]
    nation: str
    rank_label: str
    vehicle_class: str

    @property
    def battle_rating(self) -> float:
        return self.record.battle_rating

    @property
    def armament(self) -> str:
        return self.record.armament_raw

    @property
    def image_url(self) -> str:
        return self.record.image_url


@lru_cache(maxsize=None)
def describe(record: VehicleRecord) -> Target:
    """
    Build (once) the Target for a record.

    Memoized per record, so the name and alias set are computed the first
    time a vehicle is chosen or displayed and reused afterwards.
    """
    name = format_name(record.identifier, record.country_code)
    return Target(
        record=record,
        display_name=name,
        aliases=tuple(generate_aliases(name, record.identifier)),
        nation=nation_name(record.country_code),
        rank_label=to_roman(record.rank),
        vehicle_class=vehicle_class(record.vehicle_type),
    )


def record_from_dict(raw: Dict) -> VehicleRecord:
    """
    Validate one plain dict (JSON row) and turn it into a VehicleRecord.

    Raises ValueError on a missing identifier, an unknown nation or vehicle
    type, or non-numeric rank / battle rating.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"record must be an object, got {type(raw).__name__}")

    identifier = raw.get("identifier")
    if not isinstance(identifier, str) or not identifier.strip():
        raise ValueError(f"record has no identifier: {raw!r}")

    try:
        nation = Nation(str(raw.get("country_code", "")).lower())
        vtype = VehicleType(str(raw.get("vehicle_type", "")).lower())
        rank = int(raw.get("rank", 0))
        br = float(raw.get("battle_rating", 0.0))
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid record {identifier!r}: {e}") from e

    return VehicleRecord(
        identifier=identifier.strip(),
        country_code=nation.value,
        rank=rank,
        battle_rating=br,
        vehicle_type=vtype.value,
        armament_raw=str(raw.get("armament_raw") or UNKNOWN_ARMAMENT),
        image_url=str(raw.get("image_url") or ""),
    )


def record_to_dict(record: VehicleRecord) -> Dict:
    """Dataclass -> plain dict (stable key order)."""
    return asdict(record)
