"""Catalog track model"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tunerec.models.base import BaseModel

if TYPE_CHECKING:
    from tunerec.models.user import User


class Track(BaseModel):
    """Uploaded track in the streaming catalog."""

    __tablename__ = "tracks"

    title: Mapped[str] = mapped_column(nullable=False)
    artist: Mapped[str] = mapped_column(nullable=False, index=True)
    album: Mapped[str | None]
    genre: Mapped[str | None] = mapped_column(index=True)
    description: Mapped[str | None] = mapped_column(Text)
    duration: Mapped[int | None]
    audio_file: Mapped[str | None]
    cover_image: Mapped[str | None]
    play_count: Mapped[int] = mapped_column(default=0, server_default="0", nullable=False)
    uploaded_by_user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    uploaded_by: Mapped["User"] = relationship(back_populates="tracks")
