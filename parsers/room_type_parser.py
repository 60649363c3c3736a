"""Rule-based room category classifier."""

from typing import Optional

from config.room_type_mappings import (
    BRAND_SPECIFIC_MAPPINGS,
    ROOM_TYPE_PATTERNS,
    SUITE_CLASS_TIERS,
)
from models.enums import RoomTier

TIER_ORDER: list[RoomTier] = list(RoomTier)


def classify_room_type(category_name: str, brand_code: Optional[str] = None) -> RoomTier:
    """Map a free-text room category name to a room tier.

    Brand-specific exact names win, then the ordered pattern list.
    Unrecognized names are STANDARD.
    """
    if not category_name:
        return RoomTier.STANDARD

    if brand_code:
        brand_mapping = BRAND_SPECIFIC_MAPPINGS.get(brand_code.lower(), {})
        if category_name in brand_mapping:
            return brand_mapping[category_name]

    for pattern, tier in ROOM_TYPE_PATTERNS:
        if pattern.search(category_name):
            return tier

    return RoomTier.STANDARD


def tier_index(tier: RoomTier) -> int:
    return TIER_ORDER.index(RoomTier(tier))


def is_suite_tier(tier: RoomTier) -> bool:
    return tier in SUITE_CLASS_TIERS
