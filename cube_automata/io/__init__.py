"""Export and persistence of batch results (JSON and Parquet)."""

from cube_automata.io.export import export_results, write_results_json
from cube_automata.io.persistence import write_batch_parquet
from cube_automata.io.schemas import GENERATION_LOG_SCHEMA, RUNS_SCHEMA

__all__ = [
    "GENERATION_LOG_SCHEMA",
    "RUNS_SCHEMA",
    "export_results",
    "write_batch_parquet",
    "write_results_json",
]
