"""JSON export of batch results.

The exported mapping is the stable external shape of a batch: camelCase keys
``summary``, ``timestamp``, ``config``, ``topRulesets``, ``classifications``
and ``detailedResults``. Everything in it is plain JSON data.
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any

from cube_automata.analysis.analyzer import SimulationMetrics, SimulationResult
from cube_automata.config.types import BatchSimulationConfig, config_to_dict
from cube_automata.experiments.batch import BatchResult


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def metrics_to_dict(metrics: SimulationMetrics) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for metric in dataclasses.fields(metrics):
        value = getattr(metrics, metric.name)
        payload[_camel_case(metric.name)] = value.value if metric.name == "classification" else value
    return payload


def batch_config_to_dict(config: BatchSimulationConfig) -> dict[str, Any]:
    return {_camel_case(f.name): getattr(config, f.name) for f in dataclasses.fields(config)}


def ruleset_entry(result: SimulationResult) -> dict[str, Any]:
    """Full record for one ranked run."""
    return {
        "name": result.ruleset.name,
        "algorithm": result.ruleset.algorithm.value,
        "cubeSize": result.ruleset.cube_size,
        "maxGenerations": result.ruleset.max_generations,
        "config": config_to_dict(result.ruleset.config),
        "seed": result.seed,
        "runIndex": result.run_index,
        "metrics": metrics_to_dict(result.metrics),
        "summary": result.summary,
    }


def detailed_entry(result: SimulationResult) -> dict[str, Any]:
    """Condensed per-run record."""
    m = result.metrics
    return {
        "name": result.ruleset.name,
        "interestScore": m.interest_score,
        "classification": m.classification.value,
        "totalGenerations": m.total_generations,
        "finalPopulation": m.final_population,
        "oscillationPeriod": m.oscillation_period,
    }


def export_results(batch: BatchResult) -> dict[str, Any]:
    """Serialize *batch* into a JSON-compatible nested mapping."""
    summary = batch.summary
    best = summary.best_result
    return {
        "summary": {
            "totalRulesets": summary.total_rulesets,
            "totalRuns": summary.total_runs,
            "averageInterestScore": summary.average_interest_score,
            "bestRuleset": ruleset_entry(best) if best is not None else None,
        },
        "timestamp": batch.timestamp,
        "config": batch_config_to_dict(batch.config),
        "topRulesets": [ruleset_entry(r) for r in summary.top_rulesets],
        "classifications": dict(summary.classifications),
        "detailedResults": [detailed_entry(r) for r in batch.results],
    }


def write_results_json(batch: BatchResult, path: Path) -> Path:
    """Write :func:`export_results` output to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(export_results(batch), indent=2, ensure_ascii=False))
    return path
