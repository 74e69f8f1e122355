import csv
import json
from pathlib import Path

from wtguesser.datasets import SAMPLE_DATASET, VehicleRecord, describe, read_records
from wtguesser.harness import run_batch, run_case, write_csv, write_manifest
from wtguesser.harness.io import timestamp_id


def test_run_case_smoke():
    target = describe(VehicleRecord("ussr_t_34_85", "ussr", 3, 5.7, "medium_tank"))
    r = run_case(target, ["IS-2", "", "T-34-85 ", "KV-1"])
    assert "success" in r and "history" in r
    assert r["success"] is True
    assert r["attempts"] == 1
    assert r["history"] == [("IS-2", False), ("T-34-85 ", True)]
    assert r["answer"] == "T-34-85"

def test_run_case_loss():
    target = describe(VehicleRecord("cn_cm11", "china", 6, 9.3, "medium_tank"))
    r = run_case(target, ["Ariete"] * 8)
    assert r["success"] is False
    assert r["attempts"] == 6
    assert len(r["history"]) == 6

def test_run_batch_on_sample():
    records = read_records(SAMPLE_DATASET)
    seen = []
    res = run_batch(records, on_progress=lambda done, n: seen.append((done, n)))
    n = len(records)
    assert res["matrix"].shape == (n, n)
    assert res["self_misses"] == []
    assert seen[-1] == (n, n)

    names = res["names"]
    m = res["matrix"]
    tiger = names.index("Pzkpfw VI Ausf E Tiger")
    pz4 = names.index("Pzkpfw IV Ausf H")
    marder_1a3 = names.index("Marder-1A3")
    marder_df = names.index("Marder DF-105")
    assert m[tiger, pz4]
    assert m[marder_1a3, marder_df]
    assert not m[marder_df, marder_1a3]
    assert res["collisions"] >= 3

    row = res["rows"][marder_df]
    assert row["self_match"] is True
    assert "Marder-1A3" in row["accepted_names"]

def test_run_batch_sample_limit():
    records = read_records(SAMPLE_DATASET)
    res = run_batch(records, sample=5)
    assert len(res["names"]) == 5
    assert len(res["rows"]) == 5

def test_write_outputs(tmp_path: Path):
    records = read_records(SAMPLE_DATASET)
    res = run_batch(records, sample=15)

    csv_path = write_csv(res["rows"], str(tmp_path / "out" / "collisions.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 15
    assert rows[0]["identifier"] == "us_m4a1"
    by_name = {r["name"]: r for r in rows}
    assert "Marder-1A3" in by_name["Marder DF-105"]["accepted_names"].split(" | ")

    run_id = timestamp_id()
    assert run_id.endswith("Z") and "T" in run_id
    manifest_path = write_manifest({"run_id": run_id, "collisions": res["collisions"]},
                                   str(tmp_path / "manifest.json"))
    data = json.loads(Path(manifest_path).read_text(encoding="utf-8"))
    assert data["collisions"] == res["collisions"]
