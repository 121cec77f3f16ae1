from .config import SimulationConfig
from .core import run_case, run_batch, choose_solutions, CaseResult, BatchResult, Status
from .histogram import AttemptsHistogram
from .io import write_csv, write_manifest, write_histogram_csv, format_histogram

__all__ = [
    "SimulationConfig",
    "run_case", "run_batch", "choose_solutions", "CaseResult", "BatchResult", "Status",
    "AttemptsHistogram",
    "write_csv", "write_manifest", "write_histogram_csv", "format_histogram",
]
