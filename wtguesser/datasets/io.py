from __future__ import annotations
import json
from pathlib import Path
from typing import Iterable, List

from .models import VehicleRecord, record_from_dict, record_to_dict

# Bundled sample dataset (a few dozen ground vehicles across all nations)
SAMPLE_DATASET = Path(__file__).parent / "data" / "vehicles_sample.json"


def read_records(p: Path | str) -> List[VehicleRecord]:
    """
    Read a UTF-8 JSON array of vehicle rows into VehicleRecords.
    Raises FileNotFoundError if the path doesn't exist and ValueError if the
    root isn't a list or any row fails validation.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"dataset root must be a JSON array: {p}")
    return [record_from_dict(row) for row in raw]


def write_records(records: Iterable[VehicleRecord], p: Path | str) -> str:
    """
    Write records as a pretty-printed UTF-8 JSON array with a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    rows = [record_to_dict(r) for r in records]
    p.write_text(json.dumps(rows, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return str(p)
