"""
Download tech-tree ground vehicles from the public vehicles API and write a
static dataset.

What it does:
- Pages through every nation (or the ones given with --nation).
- Keeps regular research vehicles only (no premiums, packs, squadron,
  marketplace or event vehicles).
- De-duplicates by identifier while preserving API order, and writes JSON.

Usage:
    python -m script.fetch_vehicles --out wtguesser/datasets/data/vehicles.json
    # only two nations:
    python -m script.fetch_vehicles --nation germany --nation ussr --out vehicles.json
"""

import argparse
import logging

from wtguesser.datasets import Nation, validate_dataset, pretty_summary, write_records
from wtguesser.datasets.api import API_BASE, VehicleApiClient


def unique_by_identifier(records):
    seen = set()
    out = []
    for r in records:
        if r.identifier not in seen:
            seen.add(r.identifier)
            out.append(r)
    return out


def main():
    ap = argparse.ArgumentParser(description="Fetch a static vehicle dataset")
    ap.add_argument("--base-url", default=API_BASE)
    ap.add_argument("--nation", action="append", choices=[n.value for n in Nation],
                    help="nation to fetch (repeatable; default: all)")
    ap.add_argument("--out", default="wtguesser/datasets/data/vehicles.json")
    ap.add_argument("-v", "--verbose", action="store_true", help="log provider warnings and cache hits")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    client = VehicleApiClient(args.base_url)
    records = []
    for nation in args.nation or [n.value for n in Nation]:
        batch = client.fetch_nation(nation)
        print(f"{nation}: {len(batch)} vehicles")
        records.extend(batch)

    records = unique_by_identifier(records)
    write_records(records, args.out)
    print(f"Wrote {len(records)} vehicles -> {args.out}")
    print(pretty_summary(validate_dataset(args.out)))


if __name__ == "__main__":
    main()
