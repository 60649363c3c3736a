"""Scoring weights, lookup tables and thresholds.

Every number the EVS, ERI and confidence code reads lives here, not inline.
Enum-keyed tables must cover every member of their enum; the test suite
checks this.
"""

from models.enums import (
    BreakfastLocation,
    ConfidenceTier,
    HappyHourType,
    LoungeQuality,
    RecognitionStyle,
)

# --- Elite Value Score (EVS), 0-10 ---

# Category weights (must sum to 1.0)
EVS_WEIGHTS = {
    "upgrade": 0.25,
    "breakfast": 0.20,
    "lounge": 0.20,
    "service": 0.15,
    "hard_product": 0.10,
    "elite_consistency": 0.10,
}

# Neutral score when a category has no data
NEUTRAL_CATEGORY_SCORE = 5.0

# Upgrade category bonus for the most common recognition style
RECOGNITION_UPGRADE_BONUS: dict[RecognitionStyle, float] = {
    RecognitionStyle.PROACTIVE: 1.0,
    RecognitionStyle.ASKED_RECEIVED: 0.5,
    RecognitionStyle.NONE: 0.0,
    RecognitionStyle.DENIED: 0.0,
}
ROOM_UPGRADE_BONUS_CAP = 2.0

BREAKFAST_LOCATION_MULTIPLIERS: dict[BreakfastLocation, float] = {
    BreakfastLocation.BOTH: 1.1,
    BreakfastLocation.RESTAURANT: 1.0,
    BreakfastLocation.LOUNGE: 0.95,
    BreakfastLocation.ROOM_SERVICE: 0.9,
    BreakfastLocation.NONE: 0.0,
}
DEFAULT_BREAKFAST_MULTIPLIER = 1.0

LOUNGE_QUALITY_SCORES: dict[LoungeQuality, float] = {
    LoungeQuality.EXCEPTIONAL: 10.0,
    LoungeQuality.GOOD: 7.0,
    LoungeQuality.BASIC: 5.0,
    LoungeQuality.POOR: 3.0,
    LoungeQuality.NONE: 0.0,
}

LOUNGE_FOOD_SCORES: dict[HappyHourType, float] = {
    HappyHourType.FULL_MEAL: 10.0,
    HappyHourType.SUBSTANTIAL_APPETIZERS: 8.0,
    HappyHourType.LIGHT_SNACKS: 5.0,
    HappyHourType.DRINKS_ONLY: 3.0,
    HappyHourType.NONE: 0.0,
}
# Legacy happy hour values still present in older property records
LOUNGE_FOOD_ALIASES = {
    "substantial": HappyHourType.SUBSTANTIAL_APPETIZERS,
}
# Evening offerings too thin to carry the lounge score
THIN_EVENING_OFFERINGS = {HappyHourType.NONE, HappyHourType.DRINKS_ONLY}
LOUNGE_QUALITY_WEIGHT = 0.4
LOUNGE_FOOD_WEIGHT = 0.6
THIN_EVENING_LOUNGE_CAP = 4.0

RECOGNITION_STYLE_SCORES: dict[RecognitionStyle, float] = {
    RecognitionStyle.PROACTIVE: 10.0,
    RecognitionStyle.ASKED_RECEIVED: 7.0,
    RecognitionStyle.NONE: 4.0,
    RecognitionStyle.DENIED: 1.0,
}
DEFAULT_RECOGNITION_SCORE = RECOGNITION_STYLE_SCORES[RecognitionStyle.NONE]

SERVICE_WEIGHTS = {
    "recognition": 0.4,
    "late_checkout": 0.4,
    "welcome_amenity": 0.2,
}
LATE_CHECKOUT_SCORES = {True: 10.0, False: 4.0}
WELCOME_AMENITY_SCORES = {True: 10.0, False: 5.0}

# --- Elite Reputation Index (ERI), 0-100 ---

ERI_WEIGHTS = {
    "recognition": 0.4,
    "pulse": 0.4,
    "upgrade": 0.2,
}

ERI_RECOGNITION_SCORES: dict[RecognitionStyle, float] = {
    RecognitionStyle.PROACTIVE: 100.0,
    RecognitionStyle.ASKED_RECEIVED: 70.0,
    RecognitionStyle.NONE: 30.0,
    RecognitionStyle.DENIED: 0.0,
}

# Star rating assumed for a missing lounge/breakfast/culture rating
ERI_DEFAULT_PULSE_RATING = 3
ERI_PULSE_MAX_RATING = 5

ERI_UPGRADE_SCORES = {
    "changed": 100.0,
    "unchanged": 50.0,
}

ERI_HALF_LIFE_DAYS = 90

# Trend windows (days since stay) and the mean-score gap that counts as movement
TREND_MIN_REPORTS = 3
TREND_RECENT_DAYS = 30
TREND_OLDER_DAYS = 90
TREND_THRESHOLD = 10

# Lower bound (inclusive) → grade, checked highest first
ERI_GRADES: list[tuple[int, str]] = [
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C"),
    (40, "D"),
]
ERI_FLOOR_GRADE = "F"

# --- Upgrade confidence tiers ---

CONFIDENCE_TIER_DISPLAY: dict[ConfidenceTier, dict[str, str]] = {
    ConfidenceTier.VERY_HIGH: {"label": "Very High", "color": "#047857"},
    ConfidenceTier.HIGH: {"label": "High", "color": "#059669"},
    ConfidenceTier.LIKELY: {"label": "Likely", "color": "#2563EB"},
    ConfidenceTier.POSSIBLE: {"label": "Possible", "color": "#D97706"},
    ConfidenceTier.UNLIKELY: {"label": "Unlikely", "color": "#DC2626"},
    ConfidenceTier.UNKNOWN: {"label": "?", "color": "#9CA3AF"},
}

# Display rank, weakest evidence first
CONFIDENCE_TIER_RANK: dict[ConfidenceTier, int] = {
    ConfidenceTier.UNKNOWN: 0,
    ConfidenceTier.UNLIKELY: 1,
    ConfidenceTier.POSSIBLE: 2,
    ConfidenceTier.LIKELY: 3,
    ConfidenceTier.HIGH: 4,
    ConfidenceTier.VERY_HIGH: 5,
}

CONFIDENCE_UNKNOWN_EXPLANATION = "Not enough data to estimate upgrade likelihood."
CONFIDENCE_CAVEAT = (
    "Your experience may vary based on elite status, day of week, "
    "seasonality, and hotel occupancy."
)

# Ordered (tier, comparison, [(percentage, min sample size), ...]) rules.
# "at_least" matches percentage >= threshold, "below" matches percentage < threshold;
# any pair in the list is enough. First matching rule wins, otherwise POSSIBLE.
CONFIDENCE_RULES: list[tuple[ConfidenceTier, str, list[tuple[float, int]]]] = [
    (ConfidenceTier.VERY_HIGH, "at_least", [(70, 10)]),
    (ConfidenceTier.HIGH, "at_least", [(70, 5), (80, 4)]),
    (ConfidenceTier.LIKELY, "at_least", [(50, 3), (70, 2)]),
    (ConfidenceTier.UNLIKELY, "below", [(30, 5), (20, 3)]),
]
CONFIDENCE_FALLBACK_TIER = ConfidenceTier.POSSIBLE
