"""Room category name → room tier mappings.

ROOM_TYPE_PATTERNS is evaluated top to bottom and the first match wins, so
specific names must come before the generic ones they contain:
specialty and multi-bedroom suites before "suite", junior/studio/mini suites
before "suite", and all suite patterns before the premium and standard words.
"""

import re

from models.enums import RoomTier

ROOM_TYPE_PATTERNS: list[tuple[re.Pattern, RoomTier]] = [
    # Specialty
    (re.compile(r"presidential", re.IGNORECASE), RoomTier.SPECIALTY),
    (re.compile(r"penthouse", re.IGNORECASE), RoomTier.SPECIALTY),
    (re.compile(r"ambassador", re.IGNORECASE), RoomTier.SPECIALTY),
    (re.compile(r"royal", re.IGNORECASE), RoomTier.SPECIALTY),
    (re.compile(r"chairman", re.IGNORECASE), RoomTier.SPECIALTY),
    # Multi-bedroom and named suites
    (re.compile(r"one bedroom", re.IGNORECASE), RoomTier.SUITE),
    (re.compile(r"two bedroom", re.IGNORECASE), RoomTier.SUITE),
    (re.compile(r"1 bedroom", re.IGNORECASE), RoomTier.SUITE),
    (re.compile(r"2 bedroom", re.IGNORECASE), RoomTier.SUITE),
    (re.compile(r"executive suite", re.IGNORECASE), RoomTier.SUITE),
    (re.compile(r"parlor suite", re.IGNORECASE), RoomTier.SUITE),
    # Junior suites
    (re.compile(r"junior suite", re.IGNORECASE), RoomTier.JUNIOR_SUITE),
    (re.compile(r"studio suite", re.IGNORECASE), RoomTier.JUNIOR_SUITE),
    (re.compile(r"mini suite", re.IGNORECASE), RoomTier.JUNIOR_SUITE),
    # Any other suite
    (re.compile(r"\bsuite\b", re.IGNORECASE), RoomTier.SUITE),
    # Premium rooms
    (re.compile(r"deluxe", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"club level", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"club floor", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"executive floor", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"concierge level", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"high floor", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"corner", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"premium", re.IGNORECASE), RoomTier.PREMIUM),
    (re.compile(r"superior", re.IGNORECASE), RoomTier.PREMIUM),
    # Standard rooms
    (re.compile(r"standard", re.IGNORECASE), RoomTier.STANDARD),
    (re.compile(r"classic", re.IGNORECASE), RoomTier.STANDARD),
    (re.compile(r"traditional", re.IGNORECASE), RoomTier.STANDARD),
]

# Brand code → exact category name → tier. Checked before the patterns.
BRAND_SPECIFIC_MAPPINGS: dict[str, dict[str, RoomTier]] = {
    "marriott": {
        "M Club Room": RoomTier.PREMIUM,
        "Club Level Room": RoomTier.PREMIUM,
        "Grand Room": RoomTier.PREMIUM,
        "Premier Room": RoomTier.PREMIUM,
        "Junior King Suite": RoomTier.JUNIOR_SUITE,
        "Studio": RoomTier.JUNIOR_SUITE,
        "Marquis Suite": RoomTier.SUITE,
        "Vice Presidential": RoomTier.SUITE,
        "Presidential Suite": RoomTier.SPECIALTY,
        "Royal Suite": RoomTier.SPECIALTY,
    },
    "hyatt": {
        "Regency Club": RoomTier.PREMIUM,
        "Club Access": RoomTier.PREMIUM,
        "Grand Club": RoomTier.PREMIUM,
        "Park King": RoomTier.PREMIUM,
        "Regency Suite": RoomTier.JUNIOR_SUITE,
        "Park Suite": RoomTier.JUNIOR_SUITE,
        "Diplomat Suite": RoomTier.SUITE,
        "Grand Suite": RoomTier.SUITE,
        "Presidential Suite": RoomTier.SPECIALTY,
        "Ambassador Suite": RoomTier.SPECIALTY,
    },
    "hilton": {
        "Executive Room": RoomTier.PREMIUM,
        "Plus Room": RoomTier.PREMIUM,
        "Premium Room": RoomTier.PREMIUM,
        "Junior Suite": RoomTier.JUNIOR_SUITE,
        "Alcove Suite": RoomTier.JUNIOR_SUITE,
        "Executive Suite": RoomTier.SUITE,
        "Corner Suite": RoomTier.SUITE,
        "Presidential Suite": RoomTier.SPECIALTY,
        "Royal Suite": RoomTier.SPECIALTY,
    },
    "ihg": {
        "Club Room": RoomTier.PREMIUM,
        "Club InterContinental": RoomTier.PREMIUM,
        "Executive Room": RoomTier.PREMIUM,
        "Junior Suite": RoomTier.JUNIOR_SUITE,
        "Studio Suite": RoomTier.JUNIOR_SUITE,
        "Executive Suite": RoomTier.SUITE,
        "Club Suite": RoomTier.SUITE,
        "Presidential Suite": RoomTier.SPECIALTY,
        "Royal Suite": RoomTier.SPECIALTY,
    },
}

SUITE_CLASS_TIERS = {RoomTier.JUNIOR_SUITE, RoomTier.SUITE, RoomTier.SPECIALTY}
