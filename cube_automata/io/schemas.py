"""Parquet schema definitions for batch-search artifacts.

Both tables key rows by ``(ruleset_name, run_index)``; ``job_index`` is the
run's position in the batch and is unique per row of ``RUNS_SCHEMA``.
"""

from __future__ import annotations

import pyarrow as pa

RUNS_SCHEMA_VERSION = 1

RUNS_SCHEMA = pa.schema(
    [
        ("job_index", pa.int64()),
        ("ruleset_name", pa.string()),
        ("algorithm", pa.string()),
        ("cube_size", pa.int64()),
        ("max_generations", pa.int64()),
        ("run_index", pa.int64()),
        ("seed", pa.int64()),
        ("config_json", pa.string()),
        ("classification", pa.string()),
        ("interest_score", pa.int64()),
        ("total_generations", pa.int64()),
        ("final_population", pa.int64()),
        ("max_population", pa.int64()),
        ("avg_population", pa.float64()),
        ("stability_generation", pa.int64()),
        ("oscillation_period", pa.int64()),
        ("color_diversity", pa.int64()),
        ("spatial_distribution", pa.float64()),
        ("avg_change_per_generation", pa.float64()),
        ("total_changes", pa.int64()),
        ("cluster_count", pa.int64()),
        ("edge_population", pa.int64()),
        ("center_population", pa.int64()),
        ("schema_version", pa.int64()),
    ]
)

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("job_index", pa.int64()),
        ("ruleset_name", pa.string()),
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("changes", pa.int64()),
        ("color_count", pa.int64()),
        ("center_x", pa.float64()),
        ("center_y", pa.float64()),
        ("center_z", pa.float64()),
    ]
)

RUN_METRIC_NAMES = [
    "total_generations",
    "final_population",
    "max_population",
    "avg_population",
    "stability_generation",
    "oscillation_period",
    "color_diversity",
    "spatial_distribution",
    "avg_change_per_generation",
    "total_changes",
    "cluster_count",
    "edge_population",
    "center_population",
]
"""Scalar ``SimulationMetrics`` fields copied verbatim into ``RUNS_SCHEMA``."""
