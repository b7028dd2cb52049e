"""Catalog queries over uploaded tracks"""

from sqlalchemy.orm import Session

from tunerec.crud.base import BaseCRUD
from tunerec.models.track import Track
from tunerec.schemas import TrackCreate, TrackUpdate
from tunerec.utils.datetimes import days_ago


class TrackCRUD(BaseCRUD[Track, TrackCreate, TrackUpdate]):
    def list_uploaded_by(self, db: Session, user_id: int) -> list[Track]:
        """Return every track the user uploaded, oldest first."""
        return db.query(Track).filter(Track.uploaded_by_user_id == user_id).order_by(Track.id.asc()).all()

    def list_by_genre_excluding_user(self, db: Session, genre: str, user_id: int, limit: int = 10) -> list[Track]:
        """Return the most played tracks in a genre that the user did not upload."""
        return (
            db.query(Track)
            .filter(
                Track.genre == genre,
                Track.uploaded_by_user_id != user_id,
            )
            .order_by(Track.play_count.desc(), Track.created_at.desc())
            .limit(limit)
            .all()
        )

    def list_by_artist_excluding_user(self, db: Session, artist: str, user_id: int, limit: int = 10) -> list[Track]:
        """Return the most played tracks by an artist that the user did not upload."""
        return (
            db.query(Track)
            .filter(
                Track.artist == artist,
                Track.uploaded_by_user_id != user_id,
            )
            .order_by(Track.play_count.desc(), Track.created_at.desc())
            .limit(limit)
            .all()
        )

    def list_recent_excluding_user(self, db: Session, user_id: int, days: int = 30, limit: int = 10) -> list[Track]:
        """Return tracks uploaded by others within the last ``days``, newest first."""
        return (
            db.query(Track)
            .filter(
                Track.created_at > days_ago(days),
                Track.uploaded_by_user_id != user_id,
            )
            .order_by(Track.created_at.desc())
            .limit(limit)
            .all()
        )


track_crud = TrackCRUD(Track)
