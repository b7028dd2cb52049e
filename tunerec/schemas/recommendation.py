"""Recommendation schemas"""
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from tunerec.schemas.track import TrackSummary

RecommendationReason = Literal["genre", "artist", "trending"]


class RecommendationCreate(BaseModel):
    user_id: int
    track_id: int
    reason: RecommendationReason
    score: float = Field(ge=0.0, le=1.0)
    created_at: datetime | None = None


class RecommendationUpdate(BaseModel):
    """Only the interaction flags may change after creation."""

    viewed: bool | None = None
    liked: bool | None = None
    dismissed: bool | None = None

    model_config = ConfigDict(extra="forbid")


class FormattedRecommendation(BaseModel):
    id: int | None = None
    track: TrackSummary
    reason: str
    score: float
    created_at: datetime
