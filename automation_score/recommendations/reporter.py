"""
Assessment report writer: JSON and CSV output for automation assessments.

All functions are pure I/O — no scoring logic.  They consume an in-memory
``AutomationAssessment`` or recommendation list and write human-readable +
machine-readable files.

Output files (written by ``automation-score assess``)
-----------------------------------------------------
  data/outputs/assessments/
    automation_{label}_{date}.json        -- score, breakdown, recommendations
    recommendations_{label}_{date}.csv    -- one row per recommendation
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Sequence

from automation_score.models.recommendation import AutomationAssessment, Recommendation

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def write_assessment_json(
    assessment: AutomationAssessment,
    output_dir: Path,
    label: str,
    run_date: date | None = None,
) -> Path:
    """Write a full assessment to a structured JSON file.

    Args:
        assessment: Output of ``assess()``.
        output_dir: Target directory (created if missing).
        label:      Business / snapshot label used in the filename.
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"automation_{label}_{run_date}.json"

    result = assessment.score_result
    payload: dict = {
        "schema_version": SCHEMA_VERSION,
        "label":          label,
        "generated_at":   assessment.generated_at.isoformat(),
        "score":          result.score,
        "description":    assessment.description,
        "components": {
            name: component.model_dump(mode="json")
            for name, component in result.components().items()
        },
        "recommendations": [
            {"rank": rank, **rec.model_dump(mode="json")}
            for rank, rec in enumerate(assessment.recommendations, start=1)
        ],
    }

    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Assessment JSON written: %s", json_path)
    return json_path


def write_recommendation_csv(
    recommendations: Sequence[Recommendation],
    output_dir: Path,
    label: str,
    run_date: date | None = None,
) -> Path:
    """Write recommendations to a CSV file, one row per recommendation.

    Columns: rank, type, priority, potential_impact, time_to_implement,
             title, description, action_items (``" | "``-joined).

    Args:
        recommendations: Generator output, in the order to report.
        output_dir:      Target directory.
        label:           Used in filename.
        run_date:        Date label. Defaults to today.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"recommendations_{label}_{run_date}.csv"

    fieldnames = [
        "rank", "type", "priority", "potential_impact", "time_to_implement",
        "title", "description", "action_items",
    ]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rank, rec in enumerate(recommendations, start=1):
            writer.writerow(
                {
                    "rank":              rank,
                    "type":              str(rec.type),
                    "priority":          str(rec.priority),
                    "potential_impact":  str(rec.potential_impact),
                    "time_to_implement": str(rec.time_to_implement),
                    "title":             rec.title,
                    "description":       rec.description,
                    "action_items":      " | ".join(rec.action_items),
                }
            )

    logger.info("Recommendation CSV written: %s (%d rows)", csv_path, len(recommendations))
    return csv_path
