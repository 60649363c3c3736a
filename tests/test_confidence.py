"""Tests for upgrade confidence tiers."""

import pytest

from config.scoring_weights import (
    CONFIDENCE_CAVEAT,
    CONFIDENCE_TIER_DISPLAY,
    CONFIDENCE_TIER_RANK,
)
from models.enums import ConfidenceTier
from scoring.confidence import confidence_tier, get_upgrade_confidence


class TestConfidenceTier:
    @pytest.mark.parametrize(
        "percentage,sample_size,expected",
        [
            (75, 12, ConfidenceTier.VERY_HIGH),
            (70, 10, ConfidenceTier.VERY_HIGH),
            (70, 5, ConfidenceTier.HIGH),
            (80, 4, ConfidenceTier.HIGH),
            (75, 4, ConfidenceTier.LIKELY),
            (75, 3, ConfidenceTier.LIKELY),
            (100, 2, ConfidenceTier.LIKELY),
            (60, 10, ConfidenceTier.LIKELY),
            (100, 1, ConfidenceTier.POSSIBLE),
            (40, 10, ConfidenceTier.POSSIBLE),
            (25, 4, ConfidenceTier.POSSIBLE),
            (25, 5, ConfidenceTier.UNLIKELY),
            (15, 3, ConfidenceTier.UNLIKELY),
            (0, 20, ConfidenceTier.UNLIKELY),
        ],
    )
    def test_thresholds(self, percentage, sample_size, expected):
        assert confidence_tier(percentage, sample_size) == expected

    def test_missing_percentage(self):
        assert confidence_tier(None, 5) == ConfidenceTier.UNKNOWN

    def test_missing_sample_size(self):
        assert confidence_tier(80, None) == ConfidenceTier.UNKNOWN

    def test_zero_sample(self):
        assert confidence_tier(50, 0) == ConfidenceTier.UNKNOWN

    @pytest.mark.parametrize("sample_size", [10, 12, 50])
    def test_rank_never_drops_as_rate_rises(self, sample_size):
        ranks = [
            CONFIDENCE_TIER_RANK[confidence_tier(pct, sample_size)]
            for pct in range(60, 76)
        ]
        assert ranks == sorted(ranks)


class TestGetUpgradeConfidence:
    def test_very_high(self):
        result = get_upgrade_confidence(75, 12)
        assert result.tier == ConfidenceTier.VERY_HIGH
        assert result.label == "Very High"
        assert result.color == "#047857"
        assert result.explanation.startswith(
            "75% of 12 elite reports received suite upgrades."
        )
        assert result.explanation.endswith(CONFIDENCE_CAVEAT)

    def test_single_report_wording(self):
        result = get_upgrade_confidence(100, 1)
        assert "100% of 1 elite report received" in result.explanation

    def test_unknown(self):
        result = get_upgrade_confidence(None, 0)
        assert result.tier == ConfidenceTier.UNKNOWN
        assert result.label == "?"
        assert result.explanation == "Not enough data to estimate upgrade likelihood."

    def test_upgrade_kind_in_wording(self):
        result = get_upgrade_confidence(80, 10, "room upgrades")
        assert result.explanation.startswith("80% of 10 elite reports received room upgrades.")

    def test_fractional_percentage_kept(self):
        result = get_upgrade_confidence(62.5, 8)
        assert result.explanation.startswith("62.5% of 8 elite reports")

    def test_every_tier_has_display(self):
        assert set(CONFIDENCE_TIER_DISPLAY) == set(ConfidenceTier)
        assert set(CONFIDENCE_TIER_RANK) == set(ConfidenceTier)
