"""User model"""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship

from tunerec.models.base import BaseModel

if TYPE_CHECKING:
    from tunerec.models.track import Track


class User(BaseModel):
    """Registered listener who uploads tracks and receives recommendations"""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(unique=True, index=True, nullable=False)
    first_name: Mapped[str | None]
    last_name: Mapped[str | None]
    display_name: Mapped[str | None]

    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)

    tracks: Mapped[list["Track"]] = relationship(
        back_populates="uploaded_by",
        cascade="all, delete-orphan",
    )

    @property
    def label(self) -> str:
        """Human-friendly name used in logs and CLI reports."""
        return self.display_name or self.first_name or self.email or f"User {self.id}"
