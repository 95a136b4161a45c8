"""Parquet persistence of batch runs and their per-generation snapshots."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from cube_automata.config.types import config_to_dict
from cube_automata.experiments.batch import BatchResult
from cube_automata.io.paths import batch_runs_path, generation_log_path, logs_dir
from cube_automata.io.schemas import (
    GENERATION_LOG_SCHEMA,
    RUN_METRIC_NAMES,
    RUNS_SCHEMA,
    RUNS_SCHEMA_VERSION,
)


def runs_table(batch: BatchResult) -> pa.Table:
    """One row per run, in batch order."""
    columns: dict[str, list] = {name: [] for name in RUNS_SCHEMA.names}
    for job_index, result in enumerate(batch.results):
        ruleset = result.ruleset
        metrics = result.metrics
        columns["job_index"].append(job_index)
        columns["ruleset_name"].append(ruleset.name)
        columns["algorithm"].append(ruleset.algorithm.value)
        columns["cube_size"].append(ruleset.cube_size)
        columns["max_generations"].append(ruleset.max_generations)
        columns["run_index"].append(result.run_index)
        columns["seed"].append(result.seed)
        columns["config_json"].append(json.dumps(config_to_dict(ruleset.config), sort_keys=True))
        columns["classification"].append(metrics.classification.value)
        columns["interest_score"].append(metrics.interest_score)
        for name in RUN_METRIC_NAMES:
            columns[name].append(getattr(metrics, name))
        columns["schema_version"].append(RUNS_SCHEMA_VERSION)
    return pa.Table.from_pydict(columns, schema=RUNS_SCHEMA)


def generation_log_table(batch: BatchResult) -> pa.Table:
    columns: dict[str, list] = {name: [] for name in GENERATION_LOG_SCHEMA.names}
    for job_index, result in enumerate(batch.results):
        for snapshot in result.generation_data:
            cx, cy, cz = snapshot.center_of_mass
            columns["job_index"].append(job_index)
            columns["ruleset_name"].append(result.ruleset.name)
            columns["generation"].append(snapshot.generation)
            columns["population"].append(snapshot.population)
            columns["changes"].append(snapshot.changes)
            columns["color_count"].append(len(snapshot.color_counts))
            columns["center_x"].append(cx)
            columns["center_y"].append(cy)
            columns["center_z"].append(cz)
    return pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)


def write_batch_parquet(batch: BatchResult, out_dir: Path) -> tuple[Path, Path]:
    """Write the runs table and the generation log under ``out_dir/logs``."""
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    runs_path = batch_runs_path(out_dir)
    log_path = generation_log_path(out_dir)
    pq.write_table(runs_table(batch), runs_path)
    pq.write_table(generation_log_table(batch), log_path)
    return runs_path, log_path
