"""CRUD helpers for recommendation records."""

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tunerec.crud.base import BaseCRUD
from tunerec.models.recommendation import Recommendation
from tunerec.schemas import RecommendationCreate, RecommendationUpdate
from tunerec.utils.datetimes import days_ago

logger = logging.getLogger(__name__)


class RecommendationCRUD(BaseCRUD[Recommendation, RecommendationCreate, RecommendationUpdate]):
    def create(self, db: Session, obj_in: RecommendationCreate | dict[str, Any]) -> Recommendation:
        """Validate the payload before inserting a single recommendation."""
        if isinstance(obj_in, dict):
            obj_in = RecommendationCreate.model_validate(obj_in)
        data = obj_in.model_dump(exclude_unset=True)
        data["score"] = round(data["score"], 2)
        if data.get("created_at") is None:
            data.pop("created_at", None)
        return super().create(db, data)

    def update(
        self,
        db: Session,
        db_obj: Recommendation,
        obj_in: RecommendationUpdate | dict[str, Any],
    ) -> Recommendation:
        """Update interaction flags; any other field is rejected."""
        if isinstance(obj_in, dict):
            obj_in = RecommendationUpdate.model_validate(obj_in)
        return super().update(db, db_obj, obj_in.model_dump(exclude_none=True))

    def get_for_user(self, db: Session, recommendation_id: int, user_id: int) -> Recommendation | None:
        """Return a recommendation only if it belongs to the user."""
        try:
            return (
                db.query(Recommendation)
                .filter(
                    Recommendation.id == recommendation_id,
                    Recommendation.user_id == user_id,
                )
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error getting recommendation {recommendation_id} for user {user_id}: {e}")
            raise

    def has_recent(self, db: Session, user_id: int, track_id: int, days: int = 7) -> bool:
        """Return whether the track was recommended to the user in the last ``days``."""
        try:
            count = (
                db.query(func.count(Recommendation.id))
                .filter(
                    Recommendation.user_id == user_id,
                    Recommendation.track_id == track_id,
                    Recommendation.created_at > days_ago(days),
                )
                .scalar()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error checking recent recommendation for user {user_id} track {track_id}: {e}")
            raise
        return bool(count)

    def list_active_for_user(
        self,
        db: Session,
        user_id: int,
        limit: int = 10,
        reason: str | None = None,
    ) -> list[Recommendation]:
        """Return non-dismissed recommendations, best score then newest first."""
        try:
            query = db.query(Recommendation).filter(
                Recommendation.user_id == user_id,
                Recommendation.dismissed.is_(False),
            )
            if reason:
                query = query.filter(Recommendation.reason == reason)
            return (
                query.order_by(Recommendation.score.desc(), Recommendation.created_at.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing recommendations for user {user_id}: {e}")
            raise

    def count_unviewed_for_user(self, db: Session, user_id: int) -> int:
        """Return how many active recommendations the user has not seen."""
        try:
            count = (
                db.query(func.count(Recommendation.id))
                .filter(
                    Recommendation.user_id == user_id,
                    Recommendation.viewed.is_(False),
                    Recommendation.dismissed.is_(False),
                )
                .scalar()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error counting unviewed recommendations for user {user_id}: {e}")
            raise
        return count or 0

    def mark_all_viewed_for_user(self, db: Session, user_id: int) -> int:
        """Flag every unviewed recommendation of the user as viewed."""
        try:
            updated = (
                db.query(Recommendation)
                .filter(
                    Recommendation.user_id == user_id,
                    Recommendation.viewed.is_(False),
                )
                .update({Recommendation.viewed: True}, synchronize_session="fetch")
            )
            db.commit()
            return updated
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error marking recommendations viewed for user {user_id}: {e}")
            raise

    def delete_older_than(self, db: Session, days: int = 30) -> int:
        """Delete recommendations created more than ``days`` ago."""
        try:
            deleted = (
                db.query(Recommendation)
                .filter(Recommendation.created_at < days_ago(days))
                .delete(synchronize_session="fetch")
            )
            db.commit()
            return deleted
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting recommendations older than {days} days: {e}")
            raise


recommendation_crud = RecommendationCRUD(Recommendation)
