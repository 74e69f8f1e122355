"""
Dataset validator for wtguesser.

What this module does:
- Validate a vehicle dataset file (JSON array of records).
- Enforce row rules (identifier present, known nation, known vehicle type,
  numeric rank and battle rating).
- Detect duplicate identifiers and display-name collisions (two different
  identifiers formatting to the same name can never be told apart by a guess).
- Compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wtguesser.datasets import validate_dataset, pretty_summary
    rep = validate_dataset("wtguesser/datasets/data/vehicles_sample.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import json

from .models import VehicleRecord, describe, record_from_dict


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DatasetReport:
    """Validation result for one dataset file."""
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    count: int                # number of VALID records
    unique_count: int         # unique identifiers among valid records
    sha256: str               # SHA-256 of raw file bytes (empty string if missing)
    invalid_rows: int         # rows rejected by record_from_dict
    duplicate_ids: List[str] = field(default_factory=list)
    name_collisions: Dict[str, List[str]] = field(default_factory=dict)
    nations: Dict[str, int] = field(default_factory=dict)  # valid records per nation
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[VehicleRecord], int, List[str]]:
    """
    Load rows from a dataset file and validate them one by one.

    Returns:
      (valid_records, invalid_count, messages)
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return [], 0, [f"not valid JSON: {e.msg} (line {e.lineno})"]

    if not isinstance(raw, list):
        return [], 0, ["dataset root must be a JSON array"]

    valid: List[VehicleRecord] = []
    invalid = 0
    for row in raw:
        try:
            valid.append(record_from_dict(row))
        except ValueError:
            invalid += 1
    return valid, invalid, []


def _name_collisions(records: List[VehicleRecord]) -> Dict[str, List[str]]:
    """Display name -> identifiers, for names shared by more than one identifier."""
    by_name: Dict[str, set] = defaultdict(set)
    for r in records:
        by_name[describe(r).display_name.lower()].add(r.identifier)
    return {name: sorted(ids) for name, ids in sorted(by_name.items()) if len(ids) > 1}


# -----------------------------
# Public API
# -----------------------------

def validate_dataset(dataset_path: str) -> Dict:
    """
    Validate a vehicle dataset.

    Parameters
    ----------
    dataset_path : str
        Path to a JSON array of vehicle rows.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DatasetReport schema) with:
          - counts, SHA-256, invalid/duplicate diagnostics
          - per-nation record counts
          - display-name collisions
          - `passed` boolean (strict: non-empty, no invalid rows, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(dataset_path)

    if not p.exists():
        rep = DatasetReport(
            path=dataset_path, exists=False, count=0, unique_count=0,
            sha256="", invalid_rows=0, issues=[f"dataset file not found: {dataset_path}"],
        )
        return asdict(rep)

    records, invalid, issues = _load_and_check(p)

    id_counts = Counter(r.identifier for r in records)
    duplicates = sorted(i for i, c in id_counts.items() if c > 1)
    collisions = _name_collisions(records)

    if not records:
        issues.append("dataset contains 0 valid records")
    if invalid:
        issues.append(f"dataset has {invalid} invalid row(s)")
    if duplicates:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        issues.append(f"duplicate identifiers (e.g., {duplicates[:5]})")
    if collisions:
        # Not fatal: both vehicles still resolve, they just can't be told apart
        issues.append(f"{len(collisions)} display name(s) shared by several identifiers")

    passed = bool(records) and invalid == 0 and not duplicates

    rep = DatasetReport(
        path=str(p),
        exists=True,
        count=len(records),
        unique_count=len(id_counts),
        sha256=_sha256_file(p),
        invalid_rows=invalid,
        duplicate_ids=duplicates,
        name_collisions=collisions,
        nations=dict(sorted(Counter(r.country_code for r in records).items())),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        vehicles=42 (uniq=42, invalid=0, sha=abc123def456) | nations=10 | name collisions=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"vehicles={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_rows']}, sha={sha}) "
        f"| nations={len(report.get('nations', {}))} "
        f"| name collisions={len(report.get('name_collisions', {}))} | {status}"
    )
