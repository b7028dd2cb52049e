"""Pure scoring functions for recommendation strategies."""

from collections.abc import Collection
from datetime import datetime

from tunerec.models.track import Track
from tunerec.utils.datetimes import age_in_days

GENRE_BASE_SCORE = 0.6
GENRE_MATCH_BONUS = 0.3
FRESH_TRACK_BONUS = 0.1
FRESH_TRACK_DAYS = 7

ARTIST_SCORE = 0.8

TRENDING_BASE_SCORE = 0.5
TRENDING_MAX_BOOST = 0.4
TRENDING_WINDOW_DAYS = 30


def genre_score(genre: str | None, favorite_genres: Collection[str], age_days: int) -> float:
    """Base score, plus a bonus for a favorite genre and one for tracks under a week old."""
    score = GENRE_BASE_SCORE
    if genre in favorite_genres:
        score += GENRE_MATCH_BONUS
    if age_days < FRESH_TRACK_DAYS:
        score += FRESH_TRACK_BONUS
    return min(score, 1.0)


def trending_score(age_days: int) -> float:
    """Linear recency boost that reaches zero at the end of the trending window."""
    boost = max(0.0, (TRENDING_WINDOW_DAYS - age_days) / TRENDING_WINDOW_DAYS * TRENDING_MAX_BOOST)
    return min(TRENDING_BASE_SCORE + boost, 1.0)


def score_genre_candidate(track: Track, favorite_genres: Collection[str], now: datetime | None = None) -> float:
    return genre_score(track.genre, favorite_genres, age_in_days(track.created_at, now))


def score_trending_candidate(track: Track, now: datetime | None = None) -> float:
    return trending_score(age_in_days(track.created_at, now))


def round_score(score: float) -> float:
    """Two-decimal rounding applied before a score is stored."""
    return round(score, 2)
