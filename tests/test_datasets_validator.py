import json
from pathlib import Path

import pytest
from wtguesser.datasets import (
    SAMPLE_DATASET, VehicleRecord, describe, pretty_summary, read_records,
    validate_dataset, write_records,
)
from wtguesser.datasets.models import record_from_dict


def _row(identifier, country="germany", vtype="medium_tank", rank=3, br=5.0):
    return {"identifier": identifier, "country_code": country, "rank": rank,
            "battle_rating": br, "vehicle_type": vtype}


def _write(p: Path, rows):
    p.write_text(json.dumps(rows), encoding="utf-8")


def test_sample_dataset_happy_path():
    rep = validate_dataset(str(SAMPLE_DATASET))
    assert rep["passed"] is True
    assert rep["count"] == 46 and rep["unique_count"] == 46
    assert rep["name_collisions"] == {}
    assert len(rep["nations"]) == 10
    s = pretty_summary(rep)
    assert "vehicles=46" in s and "nations=10" in s and s.endswith("| OK")


def test_read_sample_records():
    records = read_records(SAMPLE_DATASET)
    assert len(records) == 46
    assert all(isinstance(r, VehicleRecord) for r in records)
    assert records[0].identifier == "us_m4a1"


def test_validate_flags_invalid_and_duplicates(tmp_path: Path):
    p = tmp_path / "vehicles.json"
    _write(p, [
        _row("germ_leopard_1"),
        _row("germ_leopard_1"),
        _row("atl_tank", country="atlantis"),
        _row("germ_maus", vtype="submarine"),
        {"country_code": "germany"},
    ])
    rep = validate_dataset(str(p))
    assert rep["passed"] is False
    assert rep["invalid_rows"] == 3
    assert rep["duplicate_ids"] == ["germ_leopard_1"]
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("| FAIL")


def test_validate_reports_name_collisions(tmp_path: Path):
    p = tmp_path / "vehicles.json"
    _write(p, [_row("germ_panther_d"), _row("germany_panther_d")])
    rep = validate_dataset(str(p))
    assert rep["passed"] is True  # not fatal
    assert rep["name_collisions"] == {"panther d": ["germ_panther_d", "germany_panther_d"]}
    assert "name collisions=1" in pretty_summary(rep)


def test_validate_missing_file(tmp_path: Path):
    rep = validate_dataset(str(tmp_path / "nope.json"))
    assert rep["exists"] is False and rep["passed"] is False
    assert rep["sha256"] == ""
    assert any("not found" in msg for msg in rep["issues"])


@pytest.mark.parametrize("content,needle", [
    ("{not json", "not valid JSON"),
    ('{"identifier": "x"}', "JSON array"),
    ("[]", "0 valid records"),
])
def test_validate_bad_files(tmp_path: Path, content, needle):
    p = tmp_path / "vehicles.json"
    p.write_text(content, encoding="utf-8")
    rep = validate_dataset(str(p))
    assert rep["passed"] is False
    assert any(needle in msg for msg in rep["issues"])


def test_read_records_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_records(tmp_path / "missing.json")
    p = tmp_path / "obj.json"
    p.write_text('{"a": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        read_records(p)


@pytest.mark.parametrize("raw", [
    "germ_leopard_1",
    {"identifier": "  "},
    _row("x", country="atlantis"),
    _row("x", vtype="boat"),
    _row("x", rank="five"),
    _row("x", br=None),
])
def test_record_from_dict_rejects(raw):
    with pytest.raises(ValueError):
        record_from_dict(raw)


def test_record_from_dict_normalizes():
    r = record_from_dict({"identifier": " germ_leopard_1 ", "country_code": "GERMANY",
                          "rank": "5", "battle_rating": "8.3", "vehicle_type": "Medium_Tank"})
    assert r == VehicleRecord("germ_leopard_1", "germany", 5, 8.3, "medium_tank")
    assert r.armament_raw == "Unknown Armament"


def test_write_then_read(tmp_path: Path):
    records = read_records(SAMPLE_DATASET)[:5]
    out = write_records(records, tmp_path / "sub" / "out.json")
    text = Path(out).read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert read_records(out) == records


def test_describe_is_memoized():
    rec = VehicleRecord("germ_marder_df_105", "germany", 6, 8.3, "tank_destroyer")
    t = describe(rec)
    assert describe(rec) is t
    assert t.display_name == "Marder DF-105"
    assert t.nation == "Germany" and t.rank_label == "VI"
    assert t.vehicle_class == "TANK DESTROYER"
    assert t.aliases[0] == "marder df-105"
