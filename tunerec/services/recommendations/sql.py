"""SQLAlchemy-backed catalog and recommendation store."""

from typing import Sequence

from sqlalchemy.orm import Session

from tunerec.crud.recommendation import recommendation_crud
from tunerec.crud.track import track_crud
from tunerec.models.recommendation import Recommendation
from tunerec.models.track import Track
from tunerec.services.recommendations.base import CatalogProvider, RecommendationStore


class SQLCatalogProvider(CatalogProvider):
    def __init__(self, db: Session):
        self.db = db

    def tracks_uploaded_by(self, user_id: int) -> Sequence[Track]:
        return track_crud.list_uploaded_by(self.db, user_id)

    def tracks_by_genre_excluding_user(self, genre: str, user_id: int, limit: int) -> Sequence[Track]:
        return track_crud.list_by_genre_excluding_user(self.db, genre, user_id, limit)

    def tracks_by_artist_excluding_user(self, artist: str, user_id: int, limit: int) -> Sequence[Track]:
        return track_crud.list_by_artist_excluding_user(self.db, artist, user_id, limit)

    def recent_tracks_excluding_user(self, user_id: int, days: int, limit: int) -> Sequence[Track]:
        return track_crud.list_recent_excluding_user(self.db, user_id, days, limit)


class SQLRecommendationStore(RecommendationStore):
    def __init__(self, db: Session):
        self.db = db

    def save(self, recommendations: Sequence[Recommendation]) -> None:
        recommendation_crud.add_many(self.db, recommendations)

    def has_recent_recommendation(self, user_id: int, track_id: int, days: int = 7) -> bool:
        return recommendation_crud.has_recent(self.db, user_id, track_id, days)

    def active_recommendations_for(
        self,
        user_id: int,
        limit: int = 10,
        reason: str | None = None,
    ) -> Sequence[Recommendation]:
        return recommendation_crud.list_active_for_user(self.db, user_id, limit, reason=reason)

    def count_unviewed_for(self, user_id: int) -> int:
        return recommendation_crud.count_unviewed_for_user(self.db, user_id)

    def mark_all_viewed_for(self, user_id: int) -> int:
        return recommendation_crud.mark_all_viewed_for_user(self.db, user_id)

    def set_flags(self, recommendation_id: int, user_id: int, **flags: bool) -> bool:
        recommendation = recommendation_crud.get_for_user(self.db, recommendation_id, user_id)
        if not recommendation:
            return False
        recommendation_crud.update(self.db, recommendation, flags)
        return True

    def delete_older_than(self, days: int = 30) -> int:
        return recommendation_crud.delete_older_than(self.db, days)
