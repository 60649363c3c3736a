"""Derived, never-persisted projections produced by the scoring engine."""

from typing import Optional

from pydantic import BaseModel

from models.enums import ConfidenceTier, TrendDirection


class UpgradeStats(BaseModel):
    suite_upgrade_pct: Optional[int] = None
    room_upgrade_pct: Optional[int] = None
    sample_size: int = 0


class EVSCategoryScores(BaseModel):
    upgrade: float
    breakfast: float
    lounge: float
    service: float
    hard_product: float
    elite_consistency: float


class EVSResult(BaseModel):
    score: Optional[float] = None
    category_scores: Optional[EVSCategoryScores] = None
    sample_size: int = 0


class ConfidenceResult(BaseModel):
    tier: ConfidenceTier
    label: str
    color: str
    explanation: str


class ReputationIndex(BaseModel):
    score: int = 0
    trend: TrendDirection = TrendDirection.STABLE
    grade: str = "F"


class PropertyIntelligence(BaseModel):
    property_id: str
    upgrade_stats: UpgradeStats
    evs: EVSResult
    suite_upgrade_confidence: ConfidenceResult
    room_upgrade_confidence: ConfidenceResult
    reputation: ReputationIndex

    def summary_line(self) -> str:
        """One-line summary for logs and the CLI."""
        evs = f"{self.evs.score:.1f}" if self.evs.score is not None else "N/A"
        suite = (
            f"{self.upgrade_stats.suite_upgrade_pct}%"
            if self.upgrade_stats.suite_upgrade_pct is not None
            else "N/A"
        )
        return (
            f"{self.property_id} | EVS {evs} ({self.evs.sample_size} reports) | "
            f"ERI {self.reputation.score} {self.reputation.grade} {self.reputation.trend.value} | "
            f"Suite {suite} [{self.suite_upgrade_confidence.label}]"
        )
