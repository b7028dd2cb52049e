"""Factory for recommendation services."""

from sqlalchemy.orm import Session

from tunerec.config.settings import settings
from tunerec.services.recommendations.engine import RecommendationService
from tunerec.services.recommendations.sql import SQLCatalogProvider, SQLRecommendationStore


def get_recommendation_service(db: Session) -> RecommendationService:
    return RecommendationService(
        SQLCatalogProvider(db),
        SQLRecommendationStore(db),
        cooldown_days=settings.RECOMMENDATION_COOLDOWN_DAYS,
        genre_limit=settings.GENRE_SUB_LIMIT,
        artist_limit=settings.ARTIST_SUB_LIMIT,
        trending_limit=settings.TRENDING_SUB_LIMIT,
        trending_window_days=settings.TRENDING_WINDOW_DAYS,
    )
