from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.enums import (
    BreakfastLocation,
    HappyHourType,
    LoungeQuality,
    RecognitionStyle,
    RoomTier,
)


class RoomCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    # Unset tiers are derived from display_name by the classifier
    tier: Optional[RoomTier] = None


class StayReport(BaseModel):
    """One submitted stay audit. Never mutated by the scoring engine."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    property_id: str
    stay_date: date
    recognition_style: RecognitionStyle

    # Star ratings (1-5)
    lounge_score: Optional[int] = Field(default=None, ge=1, le=5)
    breakfast_score: Optional[int] = Field(default=None, ge=1, le=5)
    culture_score: Optional[int] = Field(default=None, ge=1, le=5)

    # Category ratings on the EVS scale (0-10)
    hard_product_score: Optional[float] = Field(default=None, ge=0, le=10)
    elite_consistency_score: Optional[float] = Field(default=None, ge=0, le=10)

    breakfast_location: Optional[BreakfastLocation] = None
    happy_hour_type: Optional[HappyHourType] = None
    lounge_quality: Optional[LoungeQuality] = None
    late_checkout_granted: Optional[bool] = None
    welcome_amenity: Optional[str] = None

    # Room category references, resolved through a RoomCategory lookup
    booked_room_id: Optional[str] = None
    received_room_id: Optional[str] = None


class LoungeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_lounge: bool = False
    happy_hour_type: Optional[str] = None


class PropertySnapshot(BaseModel):
    """Everything the engine needs to score one property."""

    property_id: str
    brand_code: Optional[str] = None
    lounge: LoungeInfo = Field(default_factory=LoungeInfo)
    reports: list[StayReport] = Field(default_factory=list)
    room_categories: list[RoomCategory] = Field(default_factory=list)

    def room_lookup(self) -> dict[str, RoomCategory]:
        return {category.id: category for category in self.room_categories}
