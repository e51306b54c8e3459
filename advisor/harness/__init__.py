from .session import GameSession, TurnResult
from .core import run_case, run_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["GameSession", "TurnResult", "run_case", "run_batch", "summarize",
           "write_csv", "write_manifest"]
