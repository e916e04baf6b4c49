"""
automation-score — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the metrics snapshot.
  4. Execute action (score, recommend, assess).
  5. Report result to stdout.

Install and run::

    pip install -e .
    automation-score --help
    automation-score validate-config
    automation-score score snapshots/acme.json
    automation-score recommend snapshots/acme.json --sort-priority
    automation-score assess snapshots/acme.json --output-dir data/outputs
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="automation-score",
    help="Business automation score and improvement recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from automation_score.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config; ``debug`` turns on package DEBUG output."""
    from automation_score.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


def _load_snapshot_or_exit(snapshot: str, config):
    """Load a metrics snapshot, printing a friendly error and exiting on failure."""
    from automation_score.ingestion.snapshot import SnapshotError, load_snapshot

    try:
        return load_snapshot(
            Path(snapshot),
            estimated_integration_ratio=config.ingestion.estimated_integration_ratio,
        )
    except SnapshotError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    scoring = config.scoring

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(
        "  Weights:          "
        f"coverage={scoring.coverage_weight} integration={scoring.integration_weight} "
        f"sophistication={scoring.sophistication_weight} "
        f"documentation={scoring.documentation_weight}"
    )
    typer.echo(
        "  Tier weights:     "
        + ", ".join(f"{k}={v}" for k, v in scoring.tier_weights.items())
        + f" (default {scoring.default_tier_weight})"
    )
    typer.echo(f"  Report dir:       {config.output.report_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("score")
def score(
    snapshot: str = typer.Argument(..., help="Path to a JSON metrics snapshot."),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the ScoreResult as JSON instead of a table.",
    ),
) -> None:
    """Compute the automation score for a snapshot and print its breakdown."""
    from automation_score.reporting.formatters import format_score_breakdown
    from automation_score.scoring.engine import compute_score_from_metrics
    from automation_score.scoring.insights import describe_score

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    metrics = _load_snapshot_or_exit(snapshot, config)

    result = compute_score_from_metrics(metrics, config.scoring)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    typer.echo(format_score_breakdown(result, describe_score(result.score), config.scoring))


@app.command("recommend")
def recommend(
    snapshot: str = typer.Argument(..., help="Path to a JSON metrics snapshot."),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    sort_priority: bool = typer.Option(
        False,
        "--sort-priority",
        help="Order high → low priority instead of rule order.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print recommendations as a JSON array.",
    ),
) -> None:
    """Generate improvement recommendations for a snapshot."""
    from automation_score.recommendations.generator import (
        generate_recommendations_from_metrics,
        sort_by_priority,
    )
    from automation_score.reporting.formatters import format_recommendations

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    metrics = _load_snapshot_or_exit(snapshot, config)

    recs = generate_recommendations_from_metrics(metrics, config.recommendations, config.scoring)
    if sort_priority:
        recs = sort_by_priority(recs)

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json") for r in recs], indent=2))
        return

    typer.echo(format_recommendations(recs))


@app.command("assess")
def assess(
    snapshot: str = typer.Argument(..., help="Path to a JSON metrics snapshot."),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Override report directory from config.",
    ),
    label: Optional[str] = typer.Option(
        None,
        "--label",
        help="Label used in report filenames (default: snapshot label or file name).",
    ),
    sort_priority: bool = typer.Option(
        False,
        "--sort-priority",
        help="Order recommendations high → low priority.",
    ),
) -> None:
    """Score a snapshot, generate recommendations and write JSON + CSV reports.

    \b
    Output files:
      <report_dir>/automation_<label>_<date>.json
      <report_dir>/recommendations_<label>_<date>.csv
    """
    from automation_score.assessment import assess as run_assessment
    from automation_score.ingestion.snapshot import snapshot_label
    from automation_score.recommendations.reporter import (
        write_assessment_json,
        write_recommendation_csv,
    )
    from automation_score.reporting.formatters import (
        format_recommendations,
        format_score_breakdown,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    metrics = _load_snapshot_or_exit(snapshot, config)

    result = run_assessment(metrics, config, sort_priority=sort_priority)

    typer.echo(format_score_breakdown(result.score_result, result.description, config.scoring))
    typer.echo("")
    typer.echo(format_recommendations(result.recommendations))

    target_dir = Path(output_dir or config.output.report_dir)
    report_label = label or snapshot_label(Path(snapshot))
    json_path = write_assessment_json(result, target_dir, report_label)
    csv_path = write_recommendation_csv(result.recommendations, target_dir, report_label)

    typer.echo("")
    typer.echo(f"  JSON report: {json_path}")
    typer.echo(f"  CSV report:  {csv_path}")
    typer.echo("[OK] Assessment written.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
