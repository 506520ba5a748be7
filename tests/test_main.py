import json

from main import build_app
from santa_raffle.core.config import Settings
from santa_raffle.services.seating import DEFAULT_ROSTER, build_participants
from santa_raffle.web.utils import ENGINE_KEY


def make_settings(tmp_path, roster_file=None):
    return Settings(
        admin_password="secret",
        database_url=f"sqlite:///{tmp_path / 'santa.db'}",
        participants_file=str(tmp_path / "participants.json"),
        roster_file=roster_file,
        shuffle_seed=2025,
        host="127.0.0.1",
        port=0,
        log_level="INFO",
        log_path=str(tmp_path / "santa.log"),
    )


def test_build_app_seats_default_roster(tmp_path):
    app = build_app(make_settings(tmp_path))
    participants = app[ENGINE_KEY].directory.list()
    assert participants == build_participants(DEFAULT_ROSTER, 2025)


def test_build_app_keeps_existing_participants(tmp_path):
    path = tmp_path / "participants.json"
    path.write_text(json.dumps([{"id": "1", "name": "A"}, {"id": "2", "name": "B"}]), encoding="utf-8")
    app = build_app(make_settings(tmp_path))
    assert [p.name for p in app[ENGINE_KEY].directory.list()] == ["A", "B"]


def test_build_app_uses_roster_file(tmp_path):
    roster = tmp_path / "roster.txt"
    roster.write_text("X\nY\nZ\n", encoding="utf-8")
    app = build_app(make_settings(tmp_path, roster_file=str(roster)))
    assert sorted(p.name for p in app[ENGINE_KEY].directory.list()) == ["X", "Y", "Z"]
