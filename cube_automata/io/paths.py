"""Path construction helpers for batch output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def results_json_path(out_dir: Path) -> Path:
    """Return path to the exported batch results JSON file."""
    return out_dir / "batch_results.json"


def batch_runs_path(out_dir: Path) -> Path:
    """Return path to the per-run metrics Parquet file."""
    return logs_dir(out_dir) / "batch_runs.parquet"


def generation_log_path(out_dir: Path) -> Path:
    """Return path to the per-generation snapshot Parquet file."""
    return logs_dir(out_dir) / "generation_log.parquet"
