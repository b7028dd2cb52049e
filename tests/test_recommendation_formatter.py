from tunerec.models.recommendation import Recommendation
from tunerec.services.recommendations.formatter import (
    format_recommendation,
    group_by_reason,
    reason_text,
)


def test_reason_text_mapping():
    assert reason_text("genre") == "Based on your favorite genres"
    assert reason_text("artist") == "From artists you like"
    assert reason_text("trending") == "Trending now"
    assert reason_text("collaborative") == "Recommended for you"
    assert reason_text(None) == "Recommended for you"


def test_format_recommendation_flattens_track(db_session, user, other_user, make_track, make_recommendation):
    track = make_track(
        other_user,
        title="Blue Train",
        artist="Coltrane",
        album="Blue Train",
        genre="Jazz",
        duration=643,
        audio_file="blue-train.mp3",
        cover_image="blue-train.jpg",
    )
    stored = make_recommendation(user, track, reason="artist", score=0.8)

    formatted = format_recommendation(stored)

    assert formatted.id == stored.id
    assert formatted.reason == "From artists you like"
    assert formatted.score == 0.8
    assert formatted.created_at == stored.created_at
    assert formatted.track.model_dump() == {
        "id": track.id,
        "title": "Blue Train",
        "artist": "Coltrane",
        "album": "Blue Train",
        "genre": "Jazz",
        "audio_file": "blue-train.mp3",
        "cover_image": "blue-train.jpg",
        "duration": 643,
    }
    payload = formatted.model_dump(mode="json")
    assert isinstance(payload["created_at"], str)


def test_format_unsaved_recommendation_with_unknown_reason(user, other_user, make_track):
    track = make_track(other_user, genre="Rock")
    recommendation = Recommendation(
        user_id=user.id,
        track_id=track.id,
        recommended_track=track,
        reason="legacy",
        score=0.42,
    )

    formatted = format_recommendation(recommendation)

    assert formatted.id is None
    assert formatted.reason == "Recommended for you"
    assert formatted.track.id == track.id
    assert formatted.created_at is not None


def test_group_by_reason_keeps_first_seen_order(user, other_user, make_track, make_recommendation):
    first = make_recommendation(user, make_track(other_user), reason="trending", score=0.7)
    second = make_recommendation(user, make_track(other_user), reason="genre", score=0.9)
    third = make_recommendation(user, make_track(other_user), reason="trending", score=0.6)

    grouped = group_by_reason([format_recommendation(item) for item in (first, second, third)])

    assert list(grouped) == ["Trending now", "Based on your favorite genres"]
    assert [item.id for item in grouped["Trending now"]] == [first.id, third.id]
