"""
Score output models.

``ComponentScore`` is one of the four weighted sub-scores; ``ScoreResult``
bundles the final percentage with all four components so the derivation of
the headline number can be shown to the user.

Both models are frozen and JSON-serialisable via ``model_dump(mode="json")``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ComponentScore(BaseModel):
    """One normalised component of the automation score.

    Attributes:
        score:       Normalised score in [0, 1].
        percentage:  ``score`` as a rounded integer percentage in [0, 100].
        explanation: Human-readable explanation of the value.
    """

    model_config = ConfigDict(frozen=True)

    score: float
    percentage: int
    explanation: str


class ScoreResult(BaseModel):
    """Final automation score with its component breakdown.

    Attributes:
        score:                     Final integer percentage in [0, 100].
        tools_coverage:            Share of business categories with tools,
                                   blended with per-category tool density.
        tools_integration:         Share of possible tool pairs integrated.
        automation_sophistication: Tier-weighted sophistication of the stack.
        process_documentation:     SOP coverage blended with SOP depth.
    """

    model_config = ConfigDict(frozen=True)

    score: int
    tools_coverage: ComponentScore
    tools_integration: ComponentScore
    automation_sophistication: ComponentScore
    process_documentation: ComponentScore

    def components(self) -> dict[str, ComponentScore]:
        """Return the four components keyed by name, in weighting order."""
        return {
            "tools_coverage":            self.tools_coverage,
            "tools_integration":         self.tools_integration,
            "automation_sophistication": self.automation_sophistication,
            "process_documentation":     self.process_documentation,
        }
