# apps/cli/collisions.py
"""
CLI entry point for scanning a dataset for guess collisions.

This script:
  1) Validates the dataset (prints counts + SHA, flags duplicate ids).
  2) Resolves every vehicle's display name against every other vehicle.
  3) Writes:
       - CSV:  one row per target with the foreign names it accepts
       - JSON: manifest with config, dataset report, git commit, totals
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wtguesser.datasets import SAMPLE_DATASET, pretty_summary, read_records, validate_dataset
from wtguesser.harness import run_batch
from wtguesser.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    """
    Parse CLI args, validate the dataset, run the scan with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wtguesser — cross-vehicle collision scan")
    ap.add_argument("--dataset", default=str(SAMPLE_DATASET), help="path to vehicles JSON")
    ap.add_argument("--no-roman", dest="roman", action="store_false",
                    help="disable Roman numeral conversion (easy-mode matching)")
    ap.add_argument("--sample", type=int, help="scan only the first K vehicles")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate dataset and print a one-liner summary
    rep = validate_dataset(args.dataset)
    print(pretty_summary(rep))
    if not rep["exists"]:
        sys.exit(1)

    records = read_records(args.dataset)
    total = min(len(records), args.sample) if args.sample else len(records)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    bar = tqdm(total=total, ncols=80, desc="Scanning", unit="target") if mode == "bar" else None

    def on_progress(done: int, n: int) -> None:
        if bar is not None:
            bar.update(1)
        elif mode == "plain" and (done == n or done % 25 == 0):
            elapsed = time.time() - start
            sys.stderr.write(f"\r[{done}/{n}] {100.0 * done / max(1, n):5.1f}% | elapsed {elapsed:6.1f}s")
            sys.stderr.flush()

    # 3) Run the scan
    result = run_batch(records, convert_roman=args.roman, sample=args.sample, on_progress=on_progress)

    if bar is not None:
        bar.close()
    elif mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"collisions_{run_id}.csv"
    manifest_path = outdir / f"collisions_{run_id}_manifest.json"

    write_csv(result["rows"], str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dataset": rep,
        "num_vehicles": len(result["names"]),
        "collisions": result["collisions"],
        "self_misses": result["self_misses"],
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Collisions: {result['collisions']} | self misses: {len(result['self_misses'])}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
