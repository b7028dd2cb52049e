"""Multi-strategy recommendation engine.

Candidates come from three strategies run in a fixed order (genre, artist,
trending). Each strategy skips tracks the store already recommended to the
user inside the cooldown window, then the combined list is de-duplicated by
track (first occurrence wins) and cut to the requested size. Scores are stored
alongside each recommendation but do not reorder the generated list.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from tunerec.models.recommendation import Recommendation
from tunerec.models.track import Track
from tunerec.schemas import FormattedRecommendation
from tunerec.services.recommendations import scoring
from tunerec.services.recommendations.base import CatalogProvider, RecommendationStore
from tunerec.services.recommendations.formatter import format_recommendation, group_by_reason
from tunerec.utils.datetimes import utcnow

logger = logging.getLogger(__name__)


def _distinct_in_order(values: Iterable[str | None]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def remove_duplicates(recommendations: Sequence[Recommendation]) -> list[Recommendation]:
    """Drop later recommendations of a track already present in the list."""
    seen: set[int] = set()
    unique: list[Recommendation] = []
    for recommendation in recommendations:
        if recommendation.track_id in seen:
            continue
        seen.add(recommendation.track_id)
        unique.append(recommendation)
    return unique


class RecommendationService:
    """Generate, persist and manage per-user track recommendations."""

    def __init__(
        self,
        catalog: CatalogProvider,
        store: RecommendationStore,
        *,
        cooldown_days: int = 7,
        genre_limit: int = 4,
        artist_limit: int = 3,
        trending_limit: int = 3,
        trending_window_days: int = 30,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.catalog = catalog
        self.store = store
        self.cooldown_days = cooldown_days
        self.genre_limit = genre_limit
        self.artist_limit = artist_limit
        self.trending_limit = trending_limit
        self.trending_window_days = trending_window_days
        self.clock = clock

    def generate(self, user_id: int, max_count: int = 10) -> list[Recommendation]:
        """Build unsaved recommendations for a user, at most ``max_count``."""
        if max_count < 1:
            return []
        candidates: list[Recommendation] = []
        candidates.extend(self._genre_recommendations(user_id, self.genre_limit))
        candidates.extend(self._artist_recommendations(user_id, self.artist_limit))
        candidates.extend(self._trending_recommendations(user_id, self.trending_limit))

        unique = remove_duplicates(candidates)
        result = unique[:max_count]
        logger.debug(
            "Generated %d recommendations for user %s (%d candidates, %d unique)",
            len(result),
            user_id,
            len(candidates),
            len(unique),
        )
        return result

    def save(self, recommendations: Sequence[Recommendation]) -> None:
        """Persist a generated batch; failures propagate to the caller."""
        self.store.save(recommendations)

    def _genre_recommendations(self, user_id: int, limit: int) -> list[Recommendation]:
        own_tracks = self.catalog.tracks_uploaded_by(user_id)
        favorite_genres = _distinct_in_order(track.genre for track in own_tracks)
        if not favorite_genres:
            return []

        now = self.clock()
        recommendations: list[Recommendation] = []
        for genre in favorite_genres:
            for track in self.catalog.tracks_by_genre_excluding_user(genre, user_id, limit):
                if self._is_already_recommended(user_id, track):
                    continue
                score = scoring.score_genre_candidate(track, favorite_genres, now)
                recommendations.append(self._create(user_id, track, "genre", score))
        return recommendations[:limit]

    def _artist_recommendations(self, user_id: int, limit: int) -> list[Recommendation]:
        own_tracks = self.catalog.tracks_uploaded_by(user_id)
        favorite_artists = _distinct_in_order(track.artist for track in own_tracks)
        if not favorite_artists:
            return []

        recommendations: list[Recommendation] = []
        for artist in favorite_artists:
            for track in self.catalog.tracks_by_artist_excluding_user(artist, user_id, limit):
                if self._is_already_recommended(user_id, track):
                    continue
                recommendations.append(self._create(user_id, track, "artist", scoring.ARTIST_SCORE))
        return recommendations[:limit]

    def _trending_recommendations(self, user_id: int, limit: int) -> list[Recommendation]:
        now = self.clock()
        recent = self.catalog.recent_tracks_excluding_user(user_id, self.trending_window_days, limit * 2)
        recommendations: list[Recommendation] = []
        for track in recent:
            if self._is_already_recommended(user_id, track):
                continue
            score = scoring.score_trending_candidate(track, now)
            recommendations.append(self._create(user_id, track, "trending", score))
        return recommendations[:limit]

    def _is_already_recommended(self, user_id: int, track: Track) -> bool:
        return self.store.has_recent_recommendation(user_id, track.id, self.cooldown_days)

    def _create(self, user_id: int, track: Track, reason: str, score: float) -> Recommendation:
        return Recommendation(
            user_id=user_id,
            track_id=track.id,
            recommended_track=track,
            reason=reason,
            score=scoring.round_score(score),
            created_at=self.clock(),
        )

    def mark_liked(self, recommendation_id: int, user_id: int) -> bool:
        """Like a recommendation owned by the user; False when it is not found."""
        return self.store.set_flags(recommendation_id, user_id, liked=True, viewed=True)

    def mark_dismissed(self, recommendation_id: int, user_id: int) -> bool:
        """Dismiss a recommendation owned by the user; False when it is not found."""
        return self.store.set_flags(recommendation_id, user_id, dismissed=True, viewed=True)

    def get_formatted(
        self,
        user_id: int,
        limit: int = 10,
        reason: str | None = None,
    ) -> list[FormattedRecommendation]:
        """Return active recommendations ready for display."""
        recommendations = self.store.active_recommendations_for(user_id, limit, reason=reason)
        return [format_recommendation(recommendation) for recommendation in recommendations]

    def count_unviewed(self, user_id: int) -> int:
        return self.store.count_unviewed_for(user_id)

    def view_page(self, user_id: int, limit: int = 20) -> dict[str, list[FormattedRecommendation]]:
        """Return recommendations grouped by reason text and mark them all viewed."""
        grouped = group_by_reason(self.get_formatted(user_id, limit))
        self.store.mark_all_viewed_for(user_id)
        return grouped
