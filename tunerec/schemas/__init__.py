from tunerec.schemas.user import UserCreate, UserUpdate
from tunerec.schemas.track import TrackCreate, TrackSummary, TrackUpdate
from tunerec.schemas.recommendation import (
    FormattedRecommendation,
    RecommendationCreate,
    RecommendationReason,
    RecommendationUpdate,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "TrackCreate",
    "TrackSummary",
    "TrackUpdate",
    "FormattedRecommendation",
    "RecommendationCreate",
    "RecommendationReason",
    "RecommendationUpdate",
]
