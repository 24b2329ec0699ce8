"""Pydantic models describing API payloads."""
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ActivityType(str, Enum):
    """Activity tags accepted by the tracking endpoint."""

    RUNNING = "RUNNING"
    WALKING = "WALKING"
    CYCLING = "CYCLING"
    SWIMMING = "SWIMMING"
    WEIGHT_TRAINING = "WEIGHT_TRAINING"
    YOGA = "YOGA"
    HIIT = "HIIT"
    CARDIO = "CARDIO"
    STRETCHING = "STRETCHING"
    OTHER = "OTHER"


class ActivityCreate(BaseModel):
    """Schema for tracking a new activity."""

    user_id: str = Field(min_length=1)
    type: ActivityType
    duration: int = Field(ge=0, description="Duration in minutes")
    calories_burned: int = Field(ge=0)
    start_time: datetime | None = None
    additional_metrics: dict[str, Any] = {}


class ActivityResponse(BaseModel):
    """Schema for activity API responses."""

    id: str
    user_id: str
    type: str
    duration: int
    calories_burned: int
    start_time: datetime | None = None
    additional_metrics: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RecommendationResponse(BaseModel):
    """Schema for recommendation API responses."""

    id: str
    activity_id: str
    user_id: str
    activity_type: str
    recommendation: str
    improvements: list[str]
    suggestions: list[str]
    safety: list[str]
    created_at: datetime

    class Config:
        from_attributes = True
