"""Tests for upgrade detection."""

from datetime import date

import pytest

from models.enums import RecognitionStyle, RoomTier
from models.stay_report import RoomCategory, StayReport
from scoring.upgrades import (
    compute_upgrade_stats,
    is_any_upgrade,
    is_suite_upgrade,
    resolve_tier,
)

ROOMS = {
    "std": RoomCategory(id="std", display_name="Standard King"),
    "dlx": RoomCategory(id="dlx", display_name="Deluxe King"),
    "jr": RoomCategory(id="jr", display_name="Room 5", tier=RoomTier.JUNIOR_SUITE),
    "ste": RoomCategory(id="ste", display_name="Executive Suite"),
    "pres": RoomCategory(id="pres", display_name="Presidential Suite"),
    "studio": RoomCategory(id="studio", display_name="Studio"),
}


def _report(booked=None, received=None, **overrides) -> StayReport:
    fields = {
        "property_id": "p1",
        "stay_date": date(2026, 5, 1),
        "recognition_style": RecognitionStyle.NONE,
        "booked_room_id": booked,
        "received_room_id": received,
    }
    fields.update(overrides)
    return StayReport(**fields)


class TestIsSuiteUpgrade:
    def test_standard_to_suite(self):
        assert is_suite_upgrade(RoomTier.STANDARD, RoomTier.SUITE) is True

    def test_premium_to_junior_suite(self):
        assert is_suite_upgrade(RoomTier.PREMIUM, RoomTier.JUNIOR_SUITE) is True

    def test_within_suite_class_does_not_count(self):
        assert is_suite_upgrade(RoomTier.SUITE, RoomTier.SPECIALTY) is False

    def test_standard_to_premium(self):
        assert is_suite_upgrade(RoomTier.STANDARD, RoomTier.PREMIUM) is False


class TestIsAnyUpgrade:
    def test_premium_to_junior_suite(self):
        assert is_any_upgrade(RoomTier.PREMIUM, RoomTier.JUNIOR_SUITE) is True

    def test_same_tier(self):
        assert is_any_upgrade(RoomTier.SUITE, RoomTier.SUITE) is False

    def test_downgrade(self):
        assert is_any_upgrade(RoomTier.SUITE, RoomTier.STANDARD) is False


class TestResolveTier:
    def test_stored_tier_wins(self):
        category = RoomCategory(id="x", display_name="Presidential Suite", tier=RoomTier.STANDARD)
        assert resolve_tier(category) == RoomTier.STANDARD

    def test_classifies_when_unset(self):
        assert resolve_tier(ROOMS["pres"]) == RoomTier.SPECIALTY


class TestComputeUpgradeStats:
    def test_mixed_history(self):
        reports = [
            _report("std", "ste"),   # suite + any
            _report("std", "std"),   # none
            _report("dlx", "jr"),    # suite + any (stored tier)
            _report("ste", "pres"),  # any only
        ]
        stats = compute_upgrade_stats(reports, ROOMS)
        assert stats.suite_upgrade_pct == 50
        assert stats.room_upgrade_pct == 75
        assert stats.sample_size == 4

    def test_unresolvable_reports_excluded(self):
        reports = [
            _report("std", "ste"),
            _report("std", "missing"),
            _report(None, "ste"),
            _report(),
        ]
        stats = compute_upgrade_stats(reports, ROOMS)
        assert stats.sample_size == 1
        assert stats.suite_upgrade_pct == 100

    def test_no_room_data(self):
        stats = compute_upgrade_stats([_report(), _report("std", "missing")], ROOMS)
        assert stats.suite_upgrade_pct is None
        assert stats.room_upgrade_pct is None
        assert stats.sample_size == 0

    def test_empty_reports(self):
        stats = compute_upgrade_stats([], ROOMS)
        assert stats.sample_size == 0
        assert stats.suite_upgrade_pct is None

    def test_rounds_half_up(self):
        reports = [_report("std", "ste")] + [_report("std", "std")] * 7
        stats = compute_upgrade_stats(reports, ROOMS)
        assert stats.suite_upgrade_pct == 13  # 12.5%

    def test_rounds_thirds(self):
        reports = [_report("std", "ste"), _report("std", "dlx"), _report("std", "std")]
        stats = compute_upgrade_stats(reports, ROOMS)
        assert stats.suite_upgrade_pct == 33
        assert stats.room_upgrade_pct == 67

    @pytest.mark.parametrize("brand,expected", [("marriott", 100), (None, 0)])
    def test_brand_scoped_classification(self, brand, expected):
        stats = compute_upgrade_stats([_report("std", "studio")], ROOMS, brand)
        assert stats.suite_upgrade_pct == expected

    def test_does_not_mutate_reports(self):
        report = _report("std", "ste")
        before = report.model_dump()
        compute_upgrade_stats([report], ROOMS)
        assert report.model_dump() == before
