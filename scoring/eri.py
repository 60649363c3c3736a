"""Elite Reputation Index (ERI): a 0-100 time-decayed reputation score.

Each report is scored 0-100, then reports are averaged with exponential decay
weights (half-life ERI_HALF_LIFE_DAYS) so recent stays dominate. The clock is
always passed in by the caller.
"""

import math
from datetime import UTC, date, datetime, time
from typing import Union

from config.scoring_weights import (
    ERI_DEFAULT_PULSE_RATING,
    ERI_FLOOR_GRADE,
    ERI_GRADES,
    ERI_HALF_LIFE_DAYS,
    ERI_PULSE_MAX_RATING,
    ERI_RECOGNITION_SCORES,
    ERI_UPGRADE_SCORES,
    ERI_WEIGHTS,
    TREND_MIN_REPORTS,
    TREND_OLDER_DAYS,
    TREND_RECENT_DAYS,
    TREND_THRESHOLD,
)
from models.enums import TrendDirection
from models.results import ReputationIndex
from models.stay_report import StayReport
from scoring.aggregates import round_half_up

DECAY_RATE = math.log(2) / ERI_HALF_LIFE_DAYS

Moment = Union[date, datetime]


def decay_weight(days_since_stay: float) -> float:
    """1.0 for a stay today, 0.5 at one half-life, strictly decreasing."""
    return math.exp(-DECAY_RATE * days_since_stay)


def days_between(start: Moment, end: Moment) -> int:
    """Whole days between two moments, rounded up, order-independent."""
    delta = abs(_as_utc(end) - _as_utc(start))
    return math.ceil(delta.total_seconds() / 86400)


def compute_report_score(report: StayReport) -> int:
    """Score one report 0-100: recognition 40%, pulse ratings 40%, upgrade 20%.

    The upgrade part only checks whether the received room differs from the
    booked one; tier direction is ignored.
    """
    recognition_score = ERI_RECOGNITION_SCORES.get(report.recognition_style, 0.0)

    ratings = [
        report.lounge_score,
        report.breakfast_score,
        report.culture_score,
    ]
    pulse_avg = sum(
        ERI_DEFAULT_PULSE_RATING if rating is None else rating for rating in ratings
    ) / len(ratings)
    pulse_score = pulse_avg / ERI_PULSE_MAX_RATING * 100

    if report.booked_room_id and report.received_room_id and (
        report.booked_room_id != report.received_room_id
    ):
        upgrade_score = ERI_UPGRADE_SCORES["changed"]
    else:
        upgrade_score = ERI_UPGRADE_SCORES["unchanged"]

    total = (
        recognition_score * ERI_WEIGHTS["recognition"]
        + pulse_score * ERI_WEIGHTS["pulse"]
        + upgrade_score * ERI_WEIGHTS["upgrade"]
    )
    return int(round_half_up(total))


def compute_eri(reports: list[StayReport], now: Moment) -> int:
    """Decay-weighted mean of the per-report scores. 0 when there are no reports."""
    weighted_sum = 0.0
    total_weight = 0.0

    for report in reports:
        weight = decay_weight(days_between(report.stay_date, now))
        weighted_sum += compute_report_score(report) * weight
        total_weight += weight

    if total_weight <= 0:
        return 0
    return int(round_half_up(weighted_sum / total_weight))


def compute_trend(reports: list[StayReport], now: Moment) -> TrendDirection:
    """Compare mean report score of the last 30 days against days 31-90."""
    if len(reports) < TREND_MIN_REPORTS:
        return TrendDirection.STABLE

    recent: list[int] = []
    older: list[int] = []
    for report in reports:
        days = days_between(report.stay_date, now)
        if days <= TREND_RECENT_DAYS:
            recent.append(compute_report_score(report))
        elif days <= TREND_OLDER_DAYS:
            older.append(compute_report_score(report))

    if not recent or not older:
        return TrendDirection.STABLE

    diff = sum(recent) / len(recent) - sum(older) / len(older)
    if diff > TREND_THRESHOLD:
        return TrendDirection.IMPROVING
    if diff < -TREND_THRESHOLD:
        return TrendDirection.DECLINING
    return TrendDirection.STABLE


def eri_grade(score: float) -> str:
    for lower_bound, grade in ERI_GRADES:
        if score >= lower_bound:
            return grade
    return ERI_FLOOR_GRADE


def compute_reputation_index(reports: list[StayReport], now: Moment) -> ReputationIndex:
    score = compute_eri(reports, now)
    return ReputationIndex(
        score=score,
        trend=compute_trend(reports, now),
        grade=eri_grade(score),
    )


def _as_utc(moment: Moment) -> datetime:
    # Bare dates are midnight UTC; naive datetimes are taken as UTC
    if not isinstance(moment, datetime):
        return datetime.combine(moment, time.min, tzinfo=UTC)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment
