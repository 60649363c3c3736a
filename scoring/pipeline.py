"""Per-property scoring pipeline: upgrades → EVS, confidence, ERI."""

import logging

from models.results import PropertyIntelligence
from models.stay_report import PropertySnapshot
from scoring.confidence import get_upgrade_confidence
from scoring.eri import Moment, compute_reputation_index
from scoring.evs import compute_evs
from scoring.upgrades import compute_upgrade_stats

logger = logging.getLogger(__name__)


def score_property(snapshot: PropertySnapshot, now: Moment) -> PropertyIntelligence:
    """Compute every derived metric for one property as of `now`."""
    reports = [r for r in snapshot.reports if r.property_id == snapshot.property_id]
    if len(reports) != len(snapshot.reports):
        logger.warning(
            f"{snapshot.property_id}: ignoring {len(snapshot.reports) - len(reports)} "
            f"reports filed against another property"
        )

    upgrade_stats = compute_upgrade_stats(
        reports, snapshot.room_lookup(), snapshot.brand_code
    )
    evs = compute_evs(reports, snapshot.lounge, upgrade_stats)
    reputation = compute_reputation_index(reports, now)

    intelligence = PropertyIntelligence(
        property_id=snapshot.property_id,
        upgrade_stats=upgrade_stats,
        evs=evs,
        suite_upgrade_confidence=get_upgrade_confidence(
            upgrade_stats.suite_upgrade_pct, upgrade_stats.sample_size
        ),
        room_upgrade_confidence=get_upgrade_confidence(
            upgrade_stats.room_upgrade_pct, upgrade_stats.sample_size, "room upgrades"
        ),
        reputation=reputation,
    )
    logger.info(intelligence.summary_line())
    return intelligence
