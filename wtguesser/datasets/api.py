"""
HTTP dataset provider for the public War Thunder vehicles API.

Responsibilities:
- fetch_candidates: tech-tree vehicles of one type (no premiums, packs,
                    squadron, marketplace or event vehicles)
- fetch_details:    one vehicle's full payload -> VehicleRecord
- fetch_nation:     every ground vehicle of one nation, paged, memoized in
                    an explicit NationCache
- fetch_mystery_vehicle: target selection with the fallback chain
                    (chosen type -> medium tanks -> broad fetch)

The matching core never touches the network; this module only produces
VehicleRecords for it.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

import requests

from .models import (
    SELECTION_BUCKETS,
    UNKNOWN_ARMAMENT,
    Difficulty,
    Nation,
    VehicleRecord,
    VehicleType,
    record_from_dict,
)

logger = logging.getLogger(__name__)

API_BASE = "https://www.wtvehiclesapi.sgambe.serv00.net/api"
PAGE_SIZE = 200
MAX_NATION_PAGES = 15
REQUEST_TIMEOUT = 30

GROUND_TYPES = frozenset(t.value for t in VehicleType)
_EXCLUSION_FLAGS = ("is_premium", "is_pack", "squadron_vehicle", "on_marketplace")


class VehicleDataError(RuntimeError):
    """Raised when the provider cannot produce usable vehicle data."""


class NationCache:
    """Per-nation record cache owned by the provider. Clear it to force a refetch."""

    def __init__(self) -> None:
        self._data: Dict[str, List[VehicleRecord]] = {}

    def __contains__(self, nation: str) -> bool:
        return nation.lower() in self._data

    def get(self, nation: str) -> List[VehicleRecord] | None:
        hit = self._data.get(nation.lower())
        return list(hit) if hit is not None else None

    def put(self, nation: str, records: List[VehicleRecord]) -> None:
        self._data[nation.lower()] = list(records)

    def clear(self) -> None:
        self._data.clear()


def is_tech_tree(row: Dict) -> bool:
    """True for regular research vehicles (no premium/pack/squadron/marketplace/event)."""
    if any(row.get(flag) for flag in _EXCLUSION_FLAGS):
        return False
    return not row.get("event")


def _battle_rating(row: Dict) -> float:
    return float(
        row.get("realistic_ground_br") or row.get("realistic_br") or row.get("arcade_br") or 0.0
    )


def _armament(weapons: List[Dict]) -> str:
    """
    Main gun as "<caliber>mm <NAME>": first cannon/gun, else the first weapon.
    Calibers may arrive as strings ("75"); unparseable ones count as 0.
    """
    if not weapons:
        return UNKNOWN_ARMAMENT

    main_gun = next(
        (w for w in weapons
         if "cannon" in w.get("weapon_type", "") or "gun" in w.get("weapon_type", "")),
        weapons[0],
    )
    ammos = main_gun.get("ammos") or [{}]
    try:
        caliber = float(ammos[0].get("caliber") or 0)
    except (TypeError, ValueError):
        caliber = 0.0
    if caliber.is_integer():
        caliber = int(caliber)
    gun_name = str(main_gun.get("name", "")).replace("_", " ").upper()
    return f"{caliber}mm {gun_name}" if caliber > 0 else gun_name


def record_from_api(row: Dict) -> VehicleRecord:
    """Map an API vehicle payload (list or detail) onto a VehicleRecord."""
    if not isinstance(row, dict):
        raise ValueError(f"vehicle payload must be an object, got {type(row).__name__}")
    images = row.get("images") or {}
    return record_from_dict({
        "identifier": row.get("identifier"),
        "country_code": row.get("country"),
        "rank": row.get("era") or 0,
        "battle_rating": _battle_rating(row),
        "vehicle_type": row.get("vehicle_type"),
        "armament_raw": _armament(row.get("weapons") or []),
        "image_url": images.get("image") or "",
    })


class VehicleApiClient:
    """Thin requests-based client; pass a Session (or a test double) to reuse connections."""

    def __init__(self, base_url: str = API_BASE, *, session=None,
                 cache: NationCache | None = None, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else NationCache()
        self.timeout = timeout

    def _get(self, path: str, params: Dict | None = None):
        return self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)

    def fetch_candidates(self, vehicle_type: str, limit: int = 100) -> List[Dict]:
        """
        Tech-tree vehicles of one type. Transport or decode failures are
        logged and yield an empty list so callers can fall back.
        """
        params = {
            "type": vehicle_type,
            "limit": str(limit),
            "excludeEventVehicles": "true",
            "isPack": "false",
            "isPremium": "false",
            "isSquadronVehicle": "false",
            "isOnMarketplace": "false",
        }
        try:
            r = self._get("/vehicles", params)
            if not r.ok:
                logger.warning("vehicle list for %s returned HTTP %s", vehicle_type, r.status_code)
                return []
            rows = r.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("vehicle list fetch for %s failed: %s", vehicle_type, exc)
            return []

        if not isinstance(rows, list):
            return []
        return [row for row in rows if isinstance(row, dict) and is_tech_tree(row)]

    def fetch_broad(self, limit: int = 500) -> List[Dict]:
        """Any vehicles, filtered locally to tech-tree ground vehicles of the selection buckets."""
        buckets = {b.value for b in SELECTION_BUCKETS}
        try:
            r = self._get("/vehicles", {"limit": str(limit)})
        except requests.RequestException as exc:
            raise VehicleDataError(
                "Vehicle database is unreachable. Check your connection or try again later."
            ) from exc
        if not r.ok:
            raise VehicleDataError(f"API Error: {r.status_code}")

        try:
            rows = r.json()
        except ValueError as exc:
            raise VehicleDataError("Vehicle database returned malformed data.") from exc
        if not isinstance(rows, list):
            return []
        return [
            row for row in rows
            if isinstance(row, dict) and row.get("vehicle_type") in buckets and is_tech_tree(row)
        ]

    def fetch_details(self, identifier: str) -> VehicleRecord:
        """Full payload for one vehicle (armament, image) as a VehicleRecord."""
        try:
            r = self._get(f"/vehicles/{identifier}")
        except requests.RequestException as exc:
            raise VehicleDataError(f"Failed to fetch vehicle details for {identifier}") from exc
        if not r.ok:
            raise VehicleDataError(f"Failed to fetch vehicle details for {identifier}: HTTP {r.status_code}")
        try:
            return record_from_api(r.json())
        except ValueError as exc:
            raise VehicleDataError(f"Malformed vehicle details for {identifier}: {exc}") from exc

    def fetch_nation(self, nation: Nation | str) -> List[VehicleRecord]:
        """
        Every tech-tree ground vehicle of a nation, paged by PAGE_SIZE up to
        MAX_NATION_PAGES. Results are memoized in self.cache.
        """
        code = Nation(str(getattr(nation, "value", nation)).lower()).value
        cached = self.cache.get(code)
        if cached is not None:
            logger.debug("nation cache hit for %s", code)
            return cached

        records: List[VehicleRecord] = []
        for page in range(MAX_NATION_PAGES):
            params = {"country": code, "limit": str(PAGE_SIZE), "page": str(page)}
            try:
                r = self._get("/vehicles", params)
            except requests.RequestException as exc:
                raise VehicleDataError(f"Failed to fetch vehicles for {code}") from exc
            if not r.ok:
                raise VehicleDataError(f"Failed to fetch vehicles for {code}: HTTP {r.status_code}")

            try:
                rows = r.json()
            except ValueError as exc:
                raise VehicleDataError(f"Malformed vehicle list for {code}") from exc
            if not isinstance(rows, list):
                break
            for row in rows:
                if not isinstance(row, dict) or row.get("vehicle_type") not in GROUND_TYPES:
                    continue
                if not is_tech_tree(row):
                    continue
                try:
                    records.append(record_from_api(row))
                except ValueError as exc:
                    logger.debug("skipping %s: %s", row.get("identifier"), exc)
            if len(rows) < PAGE_SIZE:
                break

        self.cache.put(code, records)
        return list(records)


def fetch_mystery_vehicle(
        client: VehicleApiClient,
        selector,
        difficulty: Difficulty,
) -> Tuple[VehicleRecord, List[VehicleRecord]]:
    """
    Pick a target through the API.

    Draw order matches offline selection: one draw for the type bucket, one
    for the candidate index. Seeded selectors (and easy mode, which needs a
    full suggestion pool) request 1000 rows so every player sees the same list.

    Returns:
      (target_record, pool) where pool holds all candidates in easy mode and is
      empty otherwise.
    """
    bucket = selector.choose(SELECTION_BUCKETS)
    wide = difficulty is Difficulty.EASY or selector.deterministic
    candidates = client.fetch_candidates(bucket.value, 1000 if wide else 100)

    if not candidates:
        logger.warning("no tech-tree vehicles for %s; falling back to medium tanks", bucket.value)
        fallback_limit = 500 if difficulty is Difficulty.EASY else 200
        candidates = client.fetch_candidates(VehicleType.MEDIUM_TANK.value, fallback_limit)

    if not candidates:
        logger.warning("medium tank fallback failed; attempting broad fetch")
        candidates = client.fetch_broad(500)

    if not candidates:
        raise VehicleDataError("No suitable vehicles found. The API may be experiencing instability.")

    choice = candidates[selector.choose_index(len(candidates))]
    vehicle = client.fetch_details(choice["identifier"])

    pool: List[VehicleRecord] = []
    if difficulty is Difficulty.EASY:
        for row in candidates:
            try:
                pool.append(record_from_api(row))
            except ValueError as exc:
                logger.debug("skipping %s in pool: %s", row.get("identifier"), exc)
    return vehicle, pool
