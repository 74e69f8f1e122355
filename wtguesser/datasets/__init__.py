from .validator import validate_dataset, pretty_summary
from .io import read_records, write_records, SAMPLE_DATASET
from .models import (
    Difficulty,
    Nation,
    Target,
    VehicleRecord,
    VehicleType,
    describe,
)

__all__ = [
    "validate_dataset",
    "pretty_summary",
    "read_records",
    "write_records",
    "SAMPLE_DATASET",
    "Difficulty",
    "Nation",
    "Target",
    "VehicleRecord",
    "VehicleType",
    "describe",
]
