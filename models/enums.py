from enum import Enum


class RoomTier(str, Enum):
    """Room tiers, declared lowest to highest. Declaration order is the tier order."""

    STANDARD = "standard"
    PREMIUM = "premium"
    JUNIOR_SUITE = "junior_suite"
    SUITE = "suite"
    SPECIALTY = "specialty"


class RecognitionStyle(str, Enum):
    PROACTIVE = "proactive"
    ASKED_RECEIVED = "asked_received"
    NONE = "none"
    DENIED = "denied"


class BreakfastLocation(str, Enum):
    RESTAURANT = "restaurant"
    LOUNGE = "lounge"
    BOTH = "both"
    ROOM_SERVICE = "room_service"
    NONE = "none"


class HappyHourType(str, Enum):
    FULL_MEAL = "full_meal"
    SUBSTANTIAL_APPETIZERS = "substantial_appetizers"
    LIGHT_SNACKS = "light_snacks"
    DRINKS_ONLY = "drinks_only"
    NONE = "none"


class LoungeQuality(str, Enum):
    EXCEPTIONAL = "exceptional"
    GOOD = "good"
    BASIC = "basic"
    POOR = "poor"
    NONE = "none"


class ConfidenceTier(str, Enum):
    VERY_HIGH = "very_high"
    HIGH = "high"
    LIKELY = "likely"
    POSSIBLE = "possible"
    UNLIKELY = "unlikely"
    UNKNOWN = "unknown"


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
