"""Upgrade confidence: turns a rate plus sample size into a qualitative tier."""

from typing import Optional

from config.scoring_weights import (
    CONFIDENCE_CAVEAT,
    CONFIDENCE_FALLBACK_TIER,
    CONFIDENCE_RULES,
    CONFIDENCE_TIER_DISPLAY,
    CONFIDENCE_UNKNOWN_EXPLANATION,
)
from models.enums import ConfidenceTier
from models.results import ConfidenceResult


def confidence_tier(
    percentage: Optional[float],
    sample_size: Optional[int],
) -> ConfidenceTier:
    """Tier for an upgrade rate (0-100) observed over sample_size reports.

    Missing data or an empty sample is UNKNOWN. Otherwise the first rule in
    CONFIDENCE_RULES with a satisfied (threshold, min sample) pair wins,
    falling back to POSSIBLE.
    """
    if percentage is None or sample_size is None or sample_size == 0:
        return ConfidenceTier.UNKNOWN

    for tier, comparison, conditions in CONFIDENCE_RULES:
        for threshold, min_sample in conditions:
            if sample_size < min_sample:
                continue
            if comparison == "at_least" and percentage >= threshold:
                return tier
            if comparison == "below" and percentage < threshold:
                return tier

    return CONFIDENCE_FALLBACK_TIER


def get_upgrade_confidence(
    percentage: Optional[float],
    sample_size: Optional[int],
    upgrade_kind: str = "suite upgrades",
) -> ConfidenceResult:
    """Tier plus its label, color and a tooltip explanation.

    upgrade_kind names what the percentage counts, e.g. "room upgrades".
    """
    tier = confidence_tier(percentage, sample_size)
    display = CONFIDENCE_TIER_DISPLAY[tier]

    if tier == ConfidenceTier.UNKNOWN:
        explanation = CONFIDENCE_UNKNOWN_EXPLANATION
    else:
        report_word = "report" if sample_size == 1 else "reports"
        explanation = (
            f"{_format_percentage(percentage)}% of {sample_size} elite {report_word} "
            f"received {upgrade_kind}.\n\n{CONFIDENCE_CAVEAT}"
        )

    return ConfidenceResult(
        tier=tier,
        label=display["label"],
        color=display["color"],
        explanation=explanation,
    )


def _format_percentage(percentage: float) -> str:
    # 75.0 → "75", 62.5 → "62.5"
    if float(percentage).is_integer():
        return str(int(percentage))
    return str(percentage)
