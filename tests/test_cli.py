import itertools

import pytest

import tunerec.cli as cli
from tunerec.crud.recommendation import recommendation_crud
from tunerec.services.recommendations import RecommendationService


@pytest.fixture()
def cli_session(db_session, monkeypatch):
    """Route the CLI's session factory to the test session and keep it open."""
    monkeypatch.setattr(cli, "SessionLocal", lambda: db_session)
    monkeypatch.setattr(db_session, "close", lambda: None)
    return db_session


def _seed_listeners(make_user, make_track):
    """Two fans with one upload each and a curator holding the wider catalog.

    Expected yield per user: rock fan 3, jazz fan 3, curator 2.
    """
    rock_fan = make_user(display_name="Rock Fan")
    jazz_fan = make_user(display_name="Jazz Fan")
    curator = make_user(display_name="Curator")
    make_track(rock_fan, genre="Rock")
    make_track(jazz_fan, genre="Jazz")
    for play_count in (30, 20, 10):
        make_track(curator, genre="Rock", play_count=play_count)
        make_track(curator, genre="Jazz", play_count=play_count)
    return rock_fan, jazz_fan, curator


def test_parser_defaults():
    args = cli.create_parser().parse_args(["generate"])
    assert args.user_id is None
    assert args.limit == 10
    assert args.dry_run is False

    args = cli.create_parser().parse_args(["generate", "-u", "7", "-l", "3", "--dry-run"])
    assert (args.user_id, args.limit, args.dry_run) == (7, 3, True)

    assert cli.create_parser().parse_args(["cleanup"]).days == 30


def test_generate_all_users_saves(cli_session, make_user, make_track, capsys):
    _seed_listeners(make_user, make_track)

    exit_code = cli.main(["generate"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Generated 8 recommendations for 3 users" in out
    assert "All recommendations saved to database" in out
    assert recommendation_crud.count(cli_session) == 8


def test_generate_dry_run_saves_nothing(cli_session, make_user, make_track, capsys):
    _seed_listeners(make_user, make_track)

    exit_code = cli.main(["generate", "--dry-run", "--limit", "2"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "DRY RUN MODE" in out
    assert "Generated 6 recommendations for 3 users" in out
    assert "(DRY RUN - nothing saved)" in out
    assert recommendation_crud.count(cli_session) == 0


def test_generate_single_user(cli_session, make_user, make_track, capsys):
    rock_fan, _jazz_fan, _curator = _seed_listeners(make_user, make_track)

    exit_code = cli.main(["generate", "--user-id", str(rock_fan.id), "--verbose"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Generated 3 recommendations for 1 users" in out
    assert "Average per User: 3.0" in out
    assert "Max per User: 10" in out
    stored = recommendation_crud.get_all(cli_session)
    assert {item.user_id for item in stored} == {rock_fan.id}


def test_generate_unknown_user_fails(cli_session, capsys):
    exit_code = cli.main(["generate", "--user-id", "4242"])

    assert exit_code == 1
    assert "User with ID 4242 not found" in capsys.readouterr().err


def test_generate_collects_per_user_errors(cli_session, make_user, make_track, monkeypatch, capsys):
    rock_fan, jazz_fan, curator = _seed_listeners(make_user, make_track)
    original_generate = RecommendationService.generate

    def _flaky_generate(self, user_id, max_count=10):
        if user_id == rock_fan.id:
            raise RuntimeError("catalog unavailable")
        return original_generate(self, user_id, max_count)

    monkeypatch.setattr(RecommendationService, "generate", _flaky_generate)

    exit_code = cli.main(["generate"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Generated 5 recommendations for 3 users" in out
    assert "- Error for user Rock Fan: catalog unavailable" in out
    stored = recommendation_crud.get_all(cli_session)
    assert {item.user_id for item in stored} == {jazz_fan.id, curator.id}


def test_generate_for_users_stops_at_deadline(db_session, make_user, make_track):
    rock_fan, jazz_fan, _curator = _seed_listeners(make_user, make_track)
    clock = itertools.chain([0.0, 0.0], itertools.repeat(100.0))

    report = cli.generate_for_users(
        db_session,
        [rock_fan, jazz_fan],
        limit=10,
        timeout_seconds=10,
        clock=lambda: next(clock),
    )

    assert report.users == 2
    assert report.total_generated == 3
    assert report.errors == ["Batch timeout of 10s reached, skipped 1 remaining users"]
    assert {item.user_id for item in recommendation_crud.get_all(db_session)} == {rock_fan.id}


def test_generation_report_average():
    report = cli.GenerationReport(max_per_user=10, users=3, total_generated=10)
    assert report.average_per_user == 3.33
    assert cli.GenerationReport(max_per_user=10).average_per_user == 0.0


def test_cleanup_deletes_expired(cli_session, user, other_user, make_track, make_recommendation, capsys):
    keep = make_recommendation(user, make_track(other_user), days_old=5)
    make_recommendation(user, make_track(other_user), days_old=31)

    exit_code = cli.main(["cleanup"])

    assert exit_code == 0
    assert "Deleted 1 recommendations older than 30 days" in capsys.readouterr().out
    assert [item.id for item in recommendation_crud.get_all(cli_session)] == [keep.id]
