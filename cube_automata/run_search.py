"""CLI entrypoint for the batch ruleset search.

Supports ``--config path/to/config.json`` for reproducible batches. CLI
arguments override config-file values; config-file values override built-in
defaults.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from pathlib import Path

from cube_automata.config.types import BatchSimulationConfig
from cube_automata.experiments.batch import run_batch_simulation
from cube_automata.io.export import write_results_json
from cube_automata.io.paths import results_json_path
from cube_automata.io.persistence import write_batch_parquet

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Accept real booleans and the usual on/off spellings."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Accept ints, integral floats and numeric strings; never booleans."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer value") from exc


def _coerce_str(raw: object, key: str) -> str:
    if isinstance(raw, bool) or not isinstance(raw, (str, Path, int, float)):
        raise ValueError(f"{key} must be a string-coercible value")
    return str(raw)


_COERCERS = {int: _coerce_int, bool: _coerce_bool, str: _coerce_str}

# Keys match both the argparse dests and the config-file keys.
_BATCH_DEFAULTS = BatchSimulationConfig()
SETTINGS: dict[str, tuple[type, object]] = {
    **{
        f.name: (type(getattr(_BATCH_DEFAULTS, f.name)), getattr(_BATCH_DEFAULTS, f.name))
        for f in dataclasses.fields(BatchSimulationConfig)
    },
    "out_dir": (str, "data"),
    "parquet": (bool, True),
    "log_level": (str, "WARNING"),
}


def _resolve_settings(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    """Resolve every setting as CLI > config file > default, coerced to its type."""
    settings: dict[str, object] = {}
    for key, (kind, default) in SETTINGS.items():
        raw = getattr(args, key, None)
        if raw is None:
            raw = file_cfg.get(key, default)
        settings[key] = _COERCERS[kind](raw, key)
    log_level = str(settings["log_level"]).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
    settings["log_level"] = log_level
    return settings

def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Search 3D cellular-automaton rulesets")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--cube-size", type=int, default=None)
    parser.add_argument("--max-generations", type=int, default=None)
    parser.add_argument("--runs-per-ruleset", type=int, default=None)
    parser.add_argument(
        "--include-random-start", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument(
        "--include-pattern-start", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument(
        "--include-extended-algorithms",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also run the energy, magnet and info presets",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--parquet",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write per-run and per-generation Parquet logs",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run a batch search and print a compact JSON summary."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        settings = _resolve_settings(args, file_cfg)
        batch_config = BatchSimulationConfig(
            **{f.name: settings[f.name] for f in dataclasses.fields(BatchSimulationConfig)}
        )
    except ValueError as exc:
        parser.error(str(exc))
    out_dir = Path(settings["out_dir"])
    write_parquet = settings["parquet"]
    log_level = settings["log_level"]

    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    batch = run_batch_simulation(batch_config)
    json_path = write_results_json(batch, results_json_path(out_dir))
    outputs = {"results_json": str(json_path)}
    if write_parquet:
        runs_path, log_path = write_batch_parquet(batch, out_dir)
        outputs["batch_runs"] = str(runs_path)
        outputs["generation_log"] = str(log_path)

    summary = batch.summary
    payload = {
        "total_rulesets": summary.total_rulesets,
        "total_runs": summary.total_runs,
        "average_interest_score": round(summary.average_interest_score, 3),
        "best_ruleset": summary.best_result.summary if summary.best_result else None,
        "classifications": summary.classifications,
        "outputs": outputs,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
