"""Collaborator contracts required by the recommendation engine."""

from typing import Sequence

from tunerec.models.recommendation import Recommendation
from tunerec.models.track import Track


class CatalogProvider:
    """Read-only track catalog queries."""

    def tracks_uploaded_by(self, user_id: int) -> Sequence[Track]:
        raise NotImplementedError

    def tracks_by_genre_excluding_user(self, genre: str, user_id: int, limit: int) -> Sequence[Track]:
        """Tracks of ``genre`` not uploaded by the user, most played first."""
        raise NotImplementedError

    def tracks_by_artist_excluding_user(self, artist: str, user_id: int, limit: int) -> Sequence[Track]:
        """Tracks by ``artist`` not uploaded by the user, most played first."""
        raise NotImplementedError

    def recent_tracks_excluding_user(self, user_id: int, days: int, limit: int) -> Sequence[Track]:
        """Tracks created in the last ``days`` not uploaded by the user, newest first."""
        raise NotImplementedError


class RecommendationStore:
    """Persistence and queries for recommendation records."""

    def save(self, recommendations: Sequence[Recommendation]) -> None:
        raise NotImplementedError

    def has_recent_recommendation(self, user_id: int, track_id: int, days: int = 7) -> bool:
        """Whether (user, track) was recommended within ``days``, whatever its flags."""
        raise NotImplementedError

    def active_recommendations_for(
        self,
        user_id: int,
        limit: int = 10,
        reason: str | None = None,
    ) -> Sequence[Recommendation]:
        """Non-dismissed recommendations ordered by score then recency."""
        raise NotImplementedError

    def count_unviewed_for(self, user_id: int) -> int:
        raise NotImplementedError

    def mark_all_viewed_for(self, user_id: int) -> int:
        raise NotImplementedError

    def set_flags(self, recommendation_id: int, user_id: int, **flags: bool) -> bool:
        """Set interaction flags on a recommendation owned by the user."""
        raise NotImplementedError

    def delete_older_than(self, days: int = 30) -> int:
        raise NotImplementedError
