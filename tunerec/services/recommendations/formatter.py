"""Display formatting for recommendations."""

from tunerec.models.recommendation import Recommendation
from tunerec.schemas import FormattedRecommendation, TrackSummary

REASON_TEXT = {
    "genre": "Based on your favorite genres",
    "artist": "From artists you like",
    "trending": "Trending now",
}
DEFAULT_REASON_TEXT = "Recommended for you"


def reason_text(reason: str | None) -> str:
    return REASON_TEXT.get(reason or "", DEFAULT_REASON_TEXT)


def format_recommendation(recommendation: Recommendation) -> FormattedRecommendation:
    """Flatten a recommendation and its track into a display record."""
    return FormattedRecommendation(
        id=recommendation.id,
        track=TrackSummary.model_validate(recommendation.recommended_track),
        reason=reason_text(recommendation.reason),
        score=float(recommendation.score),
        created_at=recommendation.created_at,
    )


def group_by_reason(formatted: list[FormattedRecommendation]) -> dict[str, list[FormattedRecommendation]]:
    """Bucket formatted recommendations by reason text, keeping first-seen order."""
    grouped: dict[str, list[FormattedRecommendation]] = {}
    for item in formatted:
        grouped.setdefault(item.reason, []).append(item)
    return grouped
