from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .benchmark import run_benchmark
from .config import BenchConfig, load_config, validate_config
from .dictionary import DictionaryError, normalize_dictionary
from .engines import build_engine_factory_from_config
from .models import TrialMetrics
from .reporting import format_summary_line, format_trial_lines, report_to_dict
from .sampling import SamplingError

app = typer.Typer(help="Dictionary word segmentation benchmark CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Configure logging before any sub-command runs."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def normalize(
    source: Path | None = typer.Option(None, "--source", help="Raw dictionary file."),
    target: Path | None = typer.Option(None, "--target", help="Cleaned output file."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Split, deduplicate and write a cleaned dictionary file."""
    cfg = _load_cli_config(config)
    _apply_overrides(cfg, source_dict_path=source, clean_dict_path=target)
    try:
        words = normalize_dictionary(cfg.source_dict_path, cfg.clean_dict_path)
    except DictionaryError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {len(words)} unique words to {cfg.clean_dict_path}")


@app.command()
def run(
    config: Path | None = typer.Option(None, "--config", "-c"),
    source: Path | None = typer.Option(None, "--source", help="Raw dictionary file."),
    target: Path | None = typer.Option(None, "--target", help="Cleaned output file."),
    sampling_size: int | None = typer.Option(
        None, "--sampling-size", "-n", help="Words sampled per trial."
    ),
    montecarlo_times: int | None = typer.Option(
        None, "--trials", "-t", help="Number of Monte Carlo trials."
    ),
    holdout_ratio: float | None = typer.Option(
        None, "--holdout-ratio", help="Share of each sample hidden from the engine."
    ),
    permutation_width: int | None = typer.Option(
        None, "--width", "-k", help="Words joined into each test case."
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible sampling."),
    engine_name: str | None = typer.Option(
        None,
        "--engine",
        "-e",
        help="Engine to evaluate ('longest_match' or 'package.module:factory').",
    ),
    cumulative_counters: bool | None = typer.Option(
        None,
        "--cumulative-counters/--per-trial-counters",
        help="Carry boundary counters across trials instead of resetting them.",
    ),
    json_output: Path | None = typer.Option(
        None, "--json-output", help="Write the full run report as JSON."
    ),
) -> None:
    """Normalize the dictionary and run the Monte Carlo benchmark."""
    cfg = _load_cli_config(config)
    _apply_overrides(
        cfg,
        source_dict_path=source,
        clean_dict_path=target,
        sampling_size=sampling_size,
        montecarlo_times=montecarlo_times,
        holdout_ratio=holdout_ratio,
        permutation_width=permutation_width,
        seed=seed,
        engine_name=engine_name,
        cumulative_counters=cumulative_counters,
    )
    try:
        validate_config(cfg)
        engine_factory = build_engine_factory_from_config(cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        dictionary = normalize_dictionary(cfg.source_dict_path, cfg.clean_dict_path)
        report = run_benchmark(dictionary, cfg, engine_factory, on_trial=_echo_trial)
    except (DictionaryError, SamplingError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(format_summary_line(report))
    if json_output is not None:
        json_output.parent.mkdir(parents=True, exist_ok=True)
        json_output.write_text(
            json.dumps(report_to_dict(report), indent=2), encoding="utf-8"
        )
        LOGGER.info("Wrote run report to %s", json_output)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = BenchConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(config: Path | None) -> BenchConfig:
    """Load the --config file, reporting unreadable or malformed files as bad parameters."""
    try:
        return load_config(config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _echo_trial(metrics: TrialMetrics) -> None:
    for line in format_trial_lines(metrics):
        typer.echo(line)


def _apply_overrides(config: BenchConfig, **overrides: object) -> None:
    """Copy CLI values onto the config, skipping options that were not given."""
    for name, value in overrides.items():
        if value is None:
            continue
        # Config stores string paths so cast Path objects accordingly.
        setattr(config, name, str(value) if isinstance(value, Path) else value)


if __name__ == "__main__":
    main()
