"""Track schemas"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class TrackCreate(BaseModel):
    title: str
    artist: str
    album: str | None = None
    genre: str | None = None
    description: str | None = None
    duration: int | None = Field(default=None, ge=0)
    audio_file: str | None = None
    cover_image: str | None = None
    play_count: int = Field(0, ge=0)
    uploaded_by_user_id: int
    created_at: datetime | None = None


class TrackUpdate(BaseModel):
    title: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    description: str | None = None
    play_count: int | None = Field(default=None, ge=0)


class TrackSummary(BaseModel):
    """Flat track fields shown next to a recommendation."""

    id: int
    title: str
    artist: str
    album: str | None = None
    genre: str | None = None
    audio_file: str | None = None
    cover_image: str | None = None
    duration: int | None = None

    model_config = ConfigDict(from_attributes=True)
