"""
Qualitative bands and insight sentences for automation scores.

Two classifiers live here:

``classify_band(score)``
    Five-band ordinal classifier for a normalised component score in [0, 1]:

        > 0.8  excellent
        > 0.6  good
        > 0.4  moderate
        > 0.2  limited
        else   very limited

    Each component maps the band to its own sentence (``coverage_insight``,
    ``integration_insight``, ``sophistication_description``,
    ``documentation_insight``).

``describe_score(score)``
    Six-band description of the final 0–100 percentage for display
    (>= 90 excellent … < 20 limited).
"""

from __future__ import annotations

from enum import StrEnum


class Band(StrEnum):
    """Ordinal quality band for a normalised component score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    LIMITED = "limited"
    VERY_LIMITED = "very_limited"


# (exclusive lower bound, band), checked top-down
BAND_THRESHOLDS: tuple[tuple[float, Band], ...] = (
    (0.8, Band.EXCELLENT),
    (0.6, Band.GOOD),
    (0.4, Band.MODERATE),
    (0.2, Band.LIMITED),
)

_COVERAGE_INSIGHTS: dict[Band, str] = {
    Band.EXCELLENT:    "Excellent coverage across business functions.",
    Band.GOOD:         "Good coverage, but some areas could benefit from more automation tools.",
    Band.MODERATE:     "Moderate coverage, consider expanding tools to underserved areas.",
    Band.LIMITED:      "Limited coverage, many business areas lack automation.",
    Band.VERY_LIMITED: "Very limited coverage, most business functions are manual.",
}

_INTEGRATION_INSIGHTS: dict[Band, str] = {
    Band.EXCELLENT:    "Excellent integration between systems.",
    Band.GOOD:         "Good integration, but some tools remain siloed.",
    Band.MODERATE:     "Moderate integration, consider connecting more systems.",
    Band.LIMITED:      "Limited integration, most tools operate in isolation.",
    Band.VERY_LIMITED: "Very limited integration, creating data silos and duplicated work.",
}

_SOPHISTICATION_DESCRIPTIONS: dict[Band, str] = {
    Band.EXCELLENT:    "advanced with powerful enterprise-grade solutions",
    Band.GOOD:         "fairly sophisticated with mid-tier solutions",
    Band.MODERATE:     "moderately sophisticated",
    Band.LIMITED:      "basic with mostly entry-level tools",
    Band.VERY_LIMITED: "very basic with primarily free tools",
}

_DOCUMENTATION_INSIGHTS: dict[Band, str] = {
    Band.EXCELLENT:    "Excellent documentation of processes.",
    Band.GOOD:         "Good documentation, but some processes could be better defined.",
    Band.MODERATE:     "Moderate documentation, consider expanding SOP coverage.",
    Band.LIMITED:      "Limited documentation, many processes lack SOPs.",
    Band.VERY_LIMITED: "Very limited documentation, creating dependency on tribal knowledge.",
}

# (inclusive lower bound, description), checked top-down
SCORE_DESCRIPTIONS: tuple[tuple[int, str], ...] = (
    (90, "Excellent - Your business has achieved high levels of automation across all areas"),
    (75, "Very Good - Most business processes are automated with good integration between systems"),
    (60, "Good - Many key processes are automated, but there's room for better integration"),
    (40, "Fair - Basic automation is in place, but many processes remain manual"),
    (20, "Basic - Initial steps toward automation have been taken"),
)
_LOWEST_SCORE_DESCRIPTION = (
    "Limited - Few automation tools are in use, significant opportunity for improvement"
)


def classify_band(score: float) -> Band:
    """Return the five-band classification of a normalised score."""
    for threshold, band in BAND_THRESHOLDS:
        if score > threshold:
            return band
    return Band.VERY_LIMITED


def coverage_insight(score: float) -> str:
    return _COVERAGE_INSIGHTS[classify_band(score)]


def integration_insight(score: float) -> str:
    return _INTEGRATION_INSIGHTS[classify_band(score)]


def sophistication_description(score: float) -> str:
    """Adjective phrase for the tool mix, e.g. ``"moderately sophisticated"``."""
    return _SOPHISTICATION_DESCRIPTIONS[classify_band(score)]


def documentation_insight(score: float) -> str:
    return _DOCUMENTATION_INSIGHTS[classify_band(score)]


def describe_score(score: float) -> str:
    """Map a final 0–100 automation score to a qualitative description.

    Args:
        score: Final automation percentage.

    Returns:
        One of six sentences, from "Excellent - ..." (>= 90) down to
        "Limited - ..." (< 20).
    """
    for threshold, description in SCORE_DESCRIPTIONS:
        if score >= threshold:
            return description
    return _LOWEST_SCORE_DESCRIPTION
