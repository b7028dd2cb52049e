from tunerec.services.recommendations.base import CatalogProvider, RecommendationStore
from tunerec.services.recommendations.engine import RecommendationService, remove_duplicates
from tunerec.services.recommendations.factory import get_recommendation_service
from tunerec.services.recommendations.formatter import format_recommendation, reason_text

__all__ = [
    "CatalogProvider",
    "RecommendationStore",
    "RecommendationService",
    "remove_duplicates",
    "get_recommendation_service",
    "format_recommendation",
    "reason_text",
]
