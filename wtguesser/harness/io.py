"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-target collision rows into a tidy CSV (one row per target).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Accepted names are joined with " | " so a row stays one CSV cell; names
  themselves never contain a pipe.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["identifier", "name", "self_match", "collisions", "accepted_names"]


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize collision rows (see harness.core.run_batch) to CSV.

    Schema (columns):
      identifier, name, self_match, collisions, accepted_names

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow({
                "identifier": r["identifier"],
                "name": r["name"],
                "self_match": r["self_match"],
                "collisions": r["collisions"],
                "accepted_names": " | ".join(r.get("accepted_names", [])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dataset, roman, sample, outdir)
      - dataset: output of datasets.validate_dataset(...)
      - num_vehicles, collisions, self_misses
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
