"""API route tests."""

import pytest
from fastapi.testclient import TestClient

from api import game_store
from api.config import ENV_DISCUSSION_SECONDS
from api.main import app
from games import GAME_KINDS

client = TestClient(app)

VALID_COUNTS = {
    "elemental_paths": 2,
    "abyss_salvage": 3,
    "court_intrigue": 4,
    "midnight_party": 5,
    "cursed_gifts": 3,
    "hit_and_blow": 2,
    "value_talk": 4,
    "secret_word": 6,
}


@pytest.fixture(autouse=True)
def _empty_store():
    game_store.clear()
    yield
    game_store.clear()


def _create(kind: str, player_count: int | None = None, **extra) -> dict:
    body = {"kind": kind, "player_count": player_count or VALID_COUNTS[kind], **extra}
    r = client.post("/games", json=body)
    assert r.status_code == 200, r.text
    return r.json()


def _act(game_id: str, player: int, action_type: str, payload: dict | None = None, **extra):
    body = {"player": player, "action_type": action_type, "payload": payload or {}, **extra}
    return client.post(f"/games/{game_id}/actions", json=body)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_kinds():
    r = client.get("/kinds")
    assert r.status_code == 200
    assert r.json() == list(GAME_KINDS)


@pytest.mark.parametrize("kind", GAME_KINDS)
def test_create_every_kind(kind):
    data = _create(kind)
    assert data["kind"] == kind
    assert data["status"] == "playing"
    assert data["version"] == 0
    assert len(data["player_ids"]) == VALID_COUNTS[kind]
    assert data["actions"]
    r = client.get(f"/games/{data['game_id']}")
    assert r.status_code == 200
    assert r.json()["state"] == data["state"]
    assert client.get("/games").json() == [data["game_id"]]


def test_create_validation():
    r = client.post("/games", json={"kind": "chess", "player_count": 2})
    assert r.status_code == 422
    r = client.post("/games", json={"kind": "court_intrigue", "player_count": 5})
    assert r.status_code == 400
    r = client.post("/games", json={"kind": "cursed_gifts", "player_count": 3, "player_ids": ["a", "b"]})
    assert r.status_code == 400
    r = client.post("/games", json={"kind": "value_talk", "player_count": 2, "options": {"difficulty": "EXTREME"}})
    assert r.status_code == 400


def test_large_value_talk_table_is_accepted():
    data = _create("value_talk", 12)
    assert len(data["player_ids"]) == 12
    assert len(data["state"]["players"]) == 12
    r = client.post("/games", json={"kind": "value_talk", "player_count": 0})
    assert r.status_code == 422


def test_custom_player_ids():
    data = _create("cursed_gifts", player_ids=["ann", "bo", "cy"])
    assert data["player_ids"] == ["ann", "bo", "cy"]


def test_get_game_404():
    assert client.get("/games/nonexistent-id").status_code == 404
    assert _act("nonexistent-id", 0, "pay_chip").status_code == 404


def test_elemental_state_serializes_colors_as_keys():
    state = _create("elemental_paths")["state"]
    assert set(state["discard_piles"]) == {"red", "green", "blue", "white", "yellow"}
    assert state["phase"] == "play"
    assert len(state["hands"][0]) == 8


def test_action_applies_and_bumps_version():
    gid = _create("cursed_gifts")["game_id"]
    r = _act(gid, 0, "pay_chip")
    assert r.status_code == 200
    data = r.json()
    assert data["version"] == 1
    assert data["state"]["pot_chips"] == 1
    assert data["state"]["player_chips"] == [10, 11, 11]
    assert data["state"]["current_player_index"] == 1


def test_illegal_action_is_409_and_state_unchanged():
    gid = _create("cursed_gifts")["game_id"]
    before = client.get(f"/games/{gid}").json()
    r = _act(gid, 1, "pay_chip")
    assert r.status_code == 409
    after = client.get(f"/games/{gid}").json()
    assert after == before


def test_stale_expected_version_is_409():
    gid = _create("cursed_gifts")["game_id"]
    assert _act(gid, 0, "pay_chip", expected_version=0).status_code == 200
    r = _act(gid, 1, "pay_chip", expected_version=0)
    assert r.status_code == 409
    assert client.get(f"/games/{gid}").json()["version"] == 1


def test_unknown_action_and_bad_payload_are_400():
    gid = _create("hit_and_blow")["game_id"]
    assert _act(gid, 0, "resign").status_code == 400
    assert _act(gid, 0, "set_secret").status_code == 400
    assert _act(gid, 0, "set_secret", {"secret": 1234}).status_code == 400
    assert _act(gid, 2, "set_secret", {"secret": "1234"}).status_code == 400


def test_hit_and_blow_game_to_finish():
    gid = _create("hit_and_blow")["game_id"]
    assert _act(gid, 0, "set_secret", {"secret": "1234"}).status_code == 200
    r = _act(gid, 1, "set_secret", {"secret": "5678"})
    assert r.json()["state"]["phase"] == "play"
    r = _act(gid, 0, "submit_guess", {"guess": "5687"})
    assert r.json()["state"]["histories"][0] == [{"guess": "5687", "hit": 2, "blow": 2}]
    assert _act(gid, 0, "submit_guess", {"guess": "5678"}).status_code == 409
    _act(gid, 1, "submit_guess", {"guess": "9012"})
    r = _act(gid, 0, "submit_guess", {"guess": "5678"})
    data = r.json()
    assert data["status"] == "finished"
    assert data["state"]["winner"] == 0


def test_abyss_move_with_given_dice():
    gid = _create("abyss_salvage")["game_id"]
    assert _act(gid, 0, "move", {"dice": [1, 2]}).status_code == 409  # oxygen first
    assert _act(gid, 0, "consume_oxygen").status_code == 200
    r = _act(gid, 0, "move", {"dice": [1, 2]})
    assert r.status_code == 200
    state = r.json()["state"]
    assert state["players"][0]["position"] == 2
    assert state["last_dice"] == [1, 2]
    assert _act(gid, 0, "move", {"dice": [1, 9, 3]}).status_code == 400


def test_court_play_card_payload():
    data = _create("court_intrigue", player_count=2)
    gid = data["game_id"]
    hand = data["state"]["players"][0]["hand"]
    assert len(hand) == 2
    assert _act(gid, 0, "play_card", {"rank": "one"}).status_code == 400
    assert _act(gid, 1, "play_card", {"rank": hand[0]}).status_code == 409


def test_secret_word_discussion_length_from_env(monkeypatch):
    monkeypatch.setenv(ENV_DISCUSSION_SECONDS, "60")
    state = _create("secret_word")["state"]
    assert state["discussion_duration_seconds"] == 60
    assert state["assignments"].count(1) == 1


def test_secret_word_explicit_discussion_length_wins(monkeypatch):
    monkeypatch.setenv(ENV_DISCUSSION_SECONDS, "60")
    state = _create("secret_word", options={"discussion_seconds": 30})["state"]
    assert state["discussion_duration_seconds"] == 30


def test_secret_word_malformed_env_is_400(monkeypatch):
    monkeypatch.setenv(ENV_DISCUSSION_SECONDS, "abc")
    r = client.post("/games", json={"kind": "secret_word", "player_count": 4})
    assert r.status_code == 400
    assert ENV_DISCUSSION_SECONDS in r.json()["detail"]
    _create("secret_word", options={"discussion_seconds": 30})


def test_secret_word_vote_flow():
    gid = _create("secret_word", player_count=3)["game_id"]
    assert _act(gid, 0, "add_message", {"text": "mine is warm"}).status_code == 200
    assert _act(gid, 0, "vote", {"target": 1}).status_code == 409
    assert _act(gid, 0, "end_discussion").status_code == 200
    _act(gid, 0, "vote", {"target": 1})
    _act(gid, 1, "vote", {"target": 2})
    r = _act(gid, 2, "vote", {"target": 1})
    data = r.json()
    assert data["status"] == "finished"
    assert data["state"]["result"]["exiled_index"] == 1
    assert data["state"]["messages"][0]["author"] == "Player 1"
