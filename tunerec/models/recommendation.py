"""Per-user track recommendation records."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import DateTime, ForeignKey, Numeric, String, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tunerec.models.base import BaseModel
from tunerec.utils.datetimes import utcnow

if TYPE_CHECKING:
    from tunerec.models.track import Track
    from tunerec.models.user import User


class Recommendation(BaseModel):
    """A scored suggestion of one track for one user.

    ``user_id``, ``track_id``, ``reason``, ``score`` and ``created_at`` are fixed
    once the row exists; only the ``viewed``/``liked``/``dismissed`` flags change.
    No unique constraint exists on (user_id, track_id); repeats are gated by
    the cooldown query only.
    """

    __tablename__ = "recommendations"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    track_id: Mapped[int] = mapped_column(ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True)
    reason: Mapped[str] = mapped_column(String(50), nullable=False)
    score: Mapped[float] = mapped_column(Numeric(3, 2, asdecimal=False), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True
    )
    viewed: Mapped[bool] = mapped_column(default=False, server_default=false(), nullable=False)
    liked: Mapped[bool] = mapped_column(default=False, server_default=false(), nullable=False)
    dismissed: Mapped[bool] = mapped_column(default=False, server_default=false(), nullable=False)

    user: Mapped["User"] = relationship()
    recommended_track: Mapped["Track"] = relationship(lazy="joined")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("created_at", utcnow())
        kwargs.setdefault("viewed", False)
        kwargs.setdefault("liked", False)
        kwargs.setdefault("dismissed", False)
        super().__init__(**kwargs)
