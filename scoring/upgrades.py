"""Upgrade detection: suite and any-upgrade rates across stay reports."""

import logging
from collections.abc import Mapping
from typing import Optional

from models.enums import RoomTier
from models.results import UpgradeStats
from models.stay_report import RoomCategory, StayReport
from parsers.room_type_parser import classify_room_type, is_suite_tier, tier_index
from scoring.aggregates import round_half_up

logger = logging.getLogger(__name__)


def is_suite_upgrade(booked: RoomTier, received: RoomTier) -> bool:
    """True when a non-suite booking ended in a suite-class room.

    Moves between suite-class tiers (suite → specialty) do not count.
    """
    return not is_suite_tier(booked) and is_suite_tier(received)


def is_any_upgrade(booked: RoomTier, received: RoomTier) -> bool:
    return tier_index(received) > tier_index(booked)


def resolve_tier(category: RoomCategory, brand_code: Optional[str] = None) -> RoomTier:
    """Stored tier if the category has one, otherwise classify its name."""
    if category.tier is not None:
        return category.tier
    return classify_room_type(category.display_name, brand_code)


def compute_upgrade_stats(
    reports: list[StayReport],
    room_lookup: Mapping[str, RoomCategory],
    brand_code: Optional[str] = None,
) -> UpgradeStats:
    """Percent of stays with a suite upgrade and with any upgrade.

    Only reports whose booked and received rooms both resolve in
    room_lookup are counted.
    """
    pairs: list[tuple[RoomTier, RoomTier]] = []
    for report in reports:
        booked = room_lookup.get(report.booked_room_id) if report.booked_room_id else None
        received = room_lookup.get(report.received_room_id) if report.received_room_id else None
        if booked is None or received is None:
            continue
        pairs.append((resolve_tier(booked, brand_code), resolve_tier(received, brand_code)))

    skipped = len(reports) - len(pairs)
    if skipped:
        logger.debug(f"Upgrade stats: {skipped} of {len(reports)} reports lack resolvable rooms")

    if not pairs:
        return UpgradeStats(suite_upgrade_pct=None, room_upgrade_pct=None, sample_size=0)

    suite_upgrades = sum(1 for booked, received in pairs if is_suite_upgrade(booked, received))
    any_upgrades = sum(1 for booked, received in pairs if is_any_upgrade(booked, received))
    total = len(pairs)

    return UpgradeStats(
        suite_upgrade_pct=int(round_half_up(100 * suite_upgrades / total)),
        room_upgrade_pct=int(round_half_up(100 * any_upgrades / total)),
        sample_size=total,
    )
