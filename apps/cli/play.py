# apps/cli/play.py
"""
CLI entry point for playing wtguesser in a terminal.

This script:
  1) Validates the dataset (prints counts + SHA, flags duplicate ids), or
     with --online asks the vehicles API instead.
  2) Picks a target with the requested selector (daily = seeded by date).
  3) Runs the guess loop: hints unlock on each miss, blank input is ignored,
     ':skip' reveals the next hint, ':list' shows candidates/suggestions.
"""

from __future__ import annotations

import argparse
import sys

from wtguesser.datasets import (
    SAMPLE_DATASET,
    Difficulty,
    describe,
    pretty_summary,
    read_records,
    validate_dataset,
)
from wtguesser.datasets.api import API_BASE, VehicleApiClient, VehicleDataError, fetch_mystery_vehicle
from wtguesser.harness.session import MAX_ATTEMPTS, GameSession
from wtguesser.selection import create_selector, daily_seed, get_selector_ids


def _print_hints(session: GameSession) -> None:
    for label, value in session.revealed_hints():
        print(f"  {label:<9} {value}")
    print(f"  {'IMAGE':<9} blur {session.blur}px")


def _print_feedback(session: GameSession) -> None:
    fb = session.feedback[-1]
    nation = "ok" if fb.nation_correct else "x"
    cls = "ok" if fb.class_correct else "x"
    print(f"  {fb.vehicle_name}: nation {fb.nation} [{nation}] | rank {fb.rank} [{fb.rank_indicator}] "
          f"| BR {fb.br:.1f} [{fb.br_indicator}] | class {fb.vehicle_class} [{cls}]")


def _print_list(session: GameSession, query: str) -> None:
    if session.difficulty is Difficulty.EASY:
        entries = session.filtered_pool(query)[:50]
    else:
        entries = session.suggestions(query)
    if not entries:
        print("  (no matching vehicles)")
    for v in entries:
        print(f"  - {v.display_name}")


def main():
    """
    Parse CLI args, validate the dataset, pick a target and run the guess loop.
    """
    selector_choices = ", ".join(get_selector_ids())

    ap = argparse.ArgumentParser(description="wtguesser — identify the mystery vehicle")
    ap.add_argument("--dataset", default=str(SAMPLE_DATASET), help="path to vehicles JSON")
    ap.add_argument("--mode", choices=["easy", "hard"], default="hard",
                    help="easy = pick from a filtered list, hard = free text")
    ap.add_argument("--selector", default="random", help=f"selector id (one of: {selector_choices})")
    ap.add_argument("--daily", action="store_true", help="shortcut for --selector daily")
    ap.add_argument("--seed", help="seed string for the daily selector (default: today's UTC date)")
    ap.add_argument("--show-aliases", action="store_true", help="print the accepted aliases (debug)")
    ap.add_argument("--online", action="store_true",
                    help="draw the target from the vehicles API instead of --dataset")
    ap.add_argument("--api-url", default=API_BASE, help="vehicles API base URL (with --online)")
    args = ap.parse_args()

    difficulty = Difficulty.EASY if args.mode == "easy" else Difficulty.HARD

    selector = create_selector("daily" if args.daily else args.selector)
    if selector.deterministic:
        selector.reset(args.seed or daily_seed())
        print(f"Daily challenge: {selector.seed}")
    else:
        selector.reset()

    if args.online:
        # 1+2) Target and easy-mode pool straight from the API
        try:
            record, pool_records = fetch_mystery_vehicle(VehicleApiClient(args.api_url), selector, difficulty)
        except VehicleDataError as e:
            print(f"Could not load a vehicle: {e}")
            sys.exit(1)
        target = describe(record)
        pool = [describe(r) for r in pool_records]
    else:
        # 1) Validate dataset and print a one-liner summary
        rep = validate_dataset(args.dataset)
        print(pretty_summary(rep))
        if not rep["exists"]:
            sys.exit(1)

        # 2) Pick the target
        records = read_records(args.dataset)
        target = describe(selector.select(records))
        pool = [describe(r) for r in records]

    session = GameSession(target=target, difficulty=difficulty, pool=pool)
    if args.show_aliases:
        print(f"[debug] {target.display_name}: {', '.join(target.aliases)}")

    # 3) Guess loop
    print(f"Identify the vehicle. {MAX_ATTEMPTS} attempts. Commands: :skip, :list [query], :quit")
    while not session.finished:
        _print_hints(session)
        try:
            line = input(f"[{session.attempts_left} left] > ")
        except EOFError:
            print()
            break

        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":skip":
            if not session.skip_hint():
                print("No more hints available!")
            continue
        if cmd.startswith(":list"):
            _print_list(session, cmd[len(":list"):].strip())
            continue

        result = session.submit(line)
        if result is None:
            print("Enter a vehicle name first!")
            continue
        if result.correct:
            break
        if result.feedback is not None:
            _print_feedback(session)
        if not session.finished:
            print(f"Incorrect! New intel unlocked. {session.attempts_left} attempts left.")

    if session.won:
        print(f"Identified: {target.display_name} (attempts: {session.attempts + 1}/{MAX_ATTEMPTS})")
    else:
        print(f"Failed to identify. It was: {target.display_name}")


if __name__ == "__main__":
    main()
