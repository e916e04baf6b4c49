"""
ASCII terminal formatters for CLI reporting commands.

All formatters accept score / recommendation models and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Score breakdown layout::

  Automation score: 32/100
  Basic - Initial steps toward automation have been taken

  Component                   Weight   Score
  --------------------------  ------  ------
  Tools coverage                 40%     30%  [######              ]
  ...
"""

from __future__ import annotations

from typing import Optional, Sequence

from automation_score.config import ScoringConfig
from automation_score.models.recommendation import Recommendation
from automation_score.models.score import ScoreResult

_BAR_WIDTH = 20

_COMPONENT_LABELS: dict[str, str] = {
    "tools_coverage":            "Tools coverage",
    "tools_integration":         "Tools integration",
    "automation_sophistication": "Automation sophistication",
    "process_documentation":     "Process documentation",
}


def format_bar(percentage: int, width: int = _BAR_WIDTH) -> str:
    """Render a 0–100 percentage as a fixed-width ``[###   ]`` bar."""
    filled = max(0, min(width, round(percentage / 100 * width)))
    return "[" + "#" * filled + " " * (width - filled) + "]"


def format_score_breakdown(
    result:      ScoreResult,
    description: str,
    config:      Optional[ScoringConfig] = None,
    explain:     bool = True,
) -> str:
    """Format the final score and the four weighted components.

    Args:
        result:      Score engine output.
        description: ``describe_score(result.score)``.
        config:      Supplies the displayed weights; defaults to ``ScoringConfig()``.
        explain:     Append each component's explanation sentence.

    Returns:
        Multi-line string.
    """
    cfg = config or ScoringConfig()
    weights = {
        "tools_coverage":            cfg.coverage_weight,
        "tools_integration":         cfg.integration_weight,
        "automation_sophistication": cfg.sophistication_weight,
        "process_documentation":     cfg.documentation_weight,
    }

    lines = [
        f"  Automation score: {result.score}/100",
        f"  {description}",
        "",
        f"  {'Component':<26}  {'Weight':>6}  {'Score':>6}",
        f"  {'-' * 26}  {'-' * 6}  {'-' * 6}",
    ]
    for name, component in result.components().items():
        lines.append(
            f"  {_COMPONENT_LABELS[name]:<26}  {weights[name]:>6.0%}  "
            f"{component.percentage:>5d}%  {format_bar(component.percentage)}"
        )

    if explain:
        lines.append("")
        for name, component in result.components().items():
            lines.append(f"  {_COMPONENT_LABELS[name]}: {component.explanation}")

    return "\n".join(lines)


def format_recommendations(recommendations: Sequence[Recommendation]) -> str:
    """Format recommendations as numbered blocks with their checklists.

    Returns a single line when the list is empty.
    """
    if not recommendations:
        return "  No recommendations -- every rule threshold is met."

    blocks: list[str] = []
    for rank, rec in enumerate(recommendations, start=1):
        header = (
            f"  {rank}. [{str(rec.priority).upper()}] {rec.title}  "
            f"(type={rec.type}, impact={rec.potential_impact}, effort={rec.time_to_implement})"
        )
        body = [header, f"     {rec.description}"]
        body.extend(f"     - {item}" for item in rec.action_items)
        blocks.append("\n".join(body))

    return "\n\n".join(blocks)
