"""Elite Value Score (EVS): a 0-10 composite of what elite travelers care about.

Categories & weights (config.scoring_weights.EVS_WEIGHTS):
  upgrade 25%, breakfast 20%, lounge/happy hour 20%, service & recognition 15%,
  hard product 10%, elite consistency 10%.

Each category function is total and returns a value in [0, 10], so the
weighted composite is also in [0, 10].
"""

import logging
from typing import Optional

from config.scoring_weights import (
    BREAKFAST_LOCATION_MULTIPLIERS,
    DEFAULT_BREAKFAST_MULTIPLIER,
    DEFAULT_RECOGNITION_SCORE,
    EVS_WEIGHTS,
    LATE_CHECKOUT_SCORES,
    LOUNGE_FOOD_ALIASES,
    LOUNGE_FOOD_SCORES,
    LOUNGE_FOOD_WEIGHT,
    LOUNGE_QUALITY_SCORES,
    LOUNGE_QUALITY_WEIGHT,
    NEUTRAL_CATEGORY_SCORE,
    RECOGNITION_STYLE_SCORES,
    RECOGNITION_UPGRADE_BONUS,
    ROOM_UPGRADE_BONUS_CAP,
    SERVICE_WEIGHTS,
    THIN_EVENING_LOUNGE_CAP,
    THIN_EVENING_OFFERINGS,
    WELCOME_AMENITY_SCORES,
)
from models.enums import BreakfastLocation
from models.results import EVSCategoryScores, EVSResult, UpgradeStats
from models.stay_report import LoungeInfo, StayReport
from scoring.aggregates import clamp, mean, mode, round_half_up

logger = logging.getLogger(__name__)


def compute_evs(
    reports: list[StayReport],
    lounge_info: LoungeInfo,
    upgrade_stats: UpgradeStats,
) -> EVSResult:
    """Aggregate a property's stay reports into category scores and the EVS."""
    if not reports:
        logger.debug("EVS: no reports, score unavailable")
        return EVSResult(score=None, category_scores=None, sample_size=0)

    most_common_recognition = mode(r.recognition_style for r in reports)
    late_checkout_rate = sum(1 for r in reports if r.late_checkout_granted) / len(reports)
    welcome_amenity_rate = sum(1 for r in reports if r.welcome_amenity) / len(reports)

    categories = EVSCategoryScores(
        upgrade=score_upgrade(
            upgrade_stats.suite_upgrade_pct,
            upgrade_stats.room_upgrade_pct,
            most_common_recognition,
        ),
        breakfast=score_breakfast(
            mean(r.breakfast_score for r in reports),
            mode(r.breakfast_location for r in reports),
        ),
        lounge=score_lounge(
            lounge_info.has_lounge,
            mode(r.lounge_quality for r in reports),
            lounge_info.happy_hour_type,
            mean(r.lounge_score for r in reports),
        ),
        service=score_service(
            most_common_recognition,
            late_checkout_rate > 0.5,
            welcome_amenity_rate > 0.5,
        ),
        hard_product=score_rated_category(mean(r.hard_product_score for r in reports)),
        elite_consistency=score_rated_category(
            mean(r.elite_consistency_score for r in reports)
        ),
    )

    return EVSResult(
        score=calculate_evs(categories),
        category_scores=categories,
        sample_size=len(reports),
    )


def calculate_evs(categories: EVSCategoryScores) -> float:
    """Weighted sum of the category scores, rounded to one decimal."""
    breakdown = categories.model_dump()
    weighted = sum(breakdown[category] * EVS_WEIGHTS[category] for category in EVS_WEIGHTS)
    return round_half_up(clamp(weighted), 1)


def score_upgrade(
    suite_upgrade_pct: Optional[float],
    room_upgrade_pct: Optional[float],
    recognition_style: Optional[str],
) -> float:
    """Suite rate on a 0-10 scale plus bonuses for any upgrade and recognition.

    No upgrade data at all → neutral 5.0.
    """
    if suite_upgrade_pct is None and room_upgrade_pct is None:
        return NEUTRAL_CATEGORY_SCORE

    suite_score = (suite_upgrade_pct or 0) / 10
    room_bonus = min((room_upgrade_pct or 0) / 50, ROOM_UPGRADE_BONUS_CAP)
    recognition_bonus = RECOGNITION_UPGRADE_BONUS.get(recognition_style, 0.0)

    return clamp(round_half_up(suite_score + room_bonus + recognition_bonus, 1))


def score_breakfast(
    avg_breakfast_rating: Optional[float],
    breakfast_location: Optional[str],
) -> float:
    """Average star rating doubled, scaled by where breakfast is served.

    No ratings → 0.0. No stated location → restaurant.
    """
    if avg_breakfast_rating is None:
        return 0.0

    location = breakfast_location or BreakfastLocation.RESTAURANT
    multiplier = BREAKFAST_LOCATION_MULTIPLIERS.get(location, DEFAULT_BREAKFAST_MULTIPLIER)
    return clamp(round_half_up(avg_breakfast_rating * 2 * multiplier, 1))


def score_lounge(
    has_lounge: bool,
    lounge_quality: Optional[str],
    food_quality: Optional[str],
    avg_lounge_rating: Optional[float],
) -> float:
    """Blend of lounge quality (40%) and evening food (60%).

    No lounge → 0.0. An evening offering of drinks only or nothing caps the
    score at min(quality × 0.4, 4).
    """
    if not has_lounge:
        return 0.0

    if lounge_quality in LOUNGE_QUALITY_SCORES:
        quality_score = LOUNGE_QUALITY_SCORES[lounge_quality]
    elif avg_lounge_rating is not None:
        quality_score = avg_lounge_rating * 2
    else:
        quality_score = NEUTRAL_CATEGORY_SCORE

    food = LOUNGE_FOOD_ALIASES.get(food_quality, food_quality)
    food_score = LOUNGE_FOOD_SCORES.get(food, NEUTRAL_CATEGORY_SCORE)

    if food in THIN_EVENING_OFFERINGS:
        return clamp(min(quality_score * LOUNGE_QUALITY_WEIGHT, THIN_EVENING_LOUNGE_CAP))

    blended = food_score * LOUNGE_FOOD_WEIGHT + quality_score * LOUNGE_QUALITY_WEIGHT
    return clamp(round_half_up(blended, 1))


def score_service(
    recognition_style: Optional[str],
    late_checkout_granted: bool,
    has_welcome_amenity: bool,
) -> float:
    recognition_score = RECOGNITION_STYLE_SCORES.get(recognition_style, DEFAULT_RECOGNITION_SCORE)
    late_checkout_score = LATE_CHECKOUT_SCORES[bool(late_checkout_granted)]
    amenity_score = WELCOME_AMENITY_SCORES[bool(has_welcome_amenity)]

    blended = (
        recognition_score * SERVICE_WEIGHTS["recognition"]
        + late_checkout_score * SERVICE_WEIGHTS["late_checkout"]
        + amenity_score * SERVICE_WEIGHTS["welcome_amenity"]
    )
    return clamp(round_half_up(blended, 1))


def score_rated_category(avg_rating: Optional[float]) -> float:
    """Average rating when one exists, otherwise neutral."""
    if avg_rating is None:
        return NEUTRAL_CATEGORY_SCORE
    return clamp(avg_rating)
