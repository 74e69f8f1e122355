from .core import run_case, run_batch
from .io import write_csv, write_manifest
from .session import GameSession, MAX_ATTEMPTS

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest", "GameSession", "MAX_ATTEMPTS"]
