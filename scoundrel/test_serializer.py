import json
import random

import pytest

from scoundrel import serializer
from scoundrel.deck import make_card
from scoundrel.engine import ScoundrelEngine
from scoundrel.models import Weapon
from scoundrel.serializer import SnapshotError


def play_a_little(engine):
    """Resolve the first two room cards with whatever action suits them."""
    engine.new_game()
    for card in engine.room[:2]:
        if card.kind == "potion":
            engine.drink(card.id)
        elif card.kind == "weapon":
            engine.equip(card.id)
        elif engine.state.weapon and engine.state.weapon.can_fight(card):
            engine.fight_with_weapon(card.id)
        else:
            engine.fight_bare_hands(card.id)
    engine.forfeit()
    return engine


def test_round_trip_preserves_every_field():
    engine = play_a_little(ScoundrelEngine(rng=random.Random(11)))

    restored = serializer.loads(serializer.dumps(engine))

    assert restored.state == engine.state
    assert restored.history.entries == engine.history.entries
    assert restored.history_depth == engine.history_depth


def test_round_trip_of_blank_engine():
    restored = serializer.loads(serializer.dumps(ScoundrelEngine()))
    assert not restored.started
    assert restored.state == ScoundrelEngine().state
    assert restored.history_depth == 0


def test_round_trip_with_weapon_kill():
    engine = ScoundrelEngine(rng=random.Random(5))
    engine.new_game()
    engine.state.weapon = Weapon(make_card(40, "♦", "7"), make_card(3, "♠", "5"))

    restored = serializer.loads(serializer.dumps(engine))

    assert restored.state.weapon == engine.state.weapon


def test_resumed_game_behaves_like_uninterrupted_one():
    live = play_a_little(ScoundrelEngine(rng=random.Random(21)))
    resumed = serializer.loads(serializer.dumps(live))

    live.rng = random.Random(99)
    resumed.rng = random.Random(99)

    for engine in (live, resumed):
        engine.undo()
        engine.forfeit()
        for card in engine.room[:3]:
            engine.fight_bare_hands(card.id)
        engine.next_room()

    assert resumed.state == live.state
    assert resumed.history.entries == live.history.entries


def test_history_entries_are_flat():
    engine = play_a_little(ScoundrelEngine(rng=random.Random(8)))
    data = json.loads(serializer.dumps(engine))

    assert data["version"] == serializer.SNAPSHOT_VERSION
    assert len(data["history"]) == engine.history_depth
    for entry in data["history"]:
        assert "history" not in entry


@pytest.mark.parametrize("text", [
    "not json at all",
    "[]",
    "{}",
    "[" * 100000,
    None,
])
def test_garbage_is_rejected(text):
    with pytest.raises(SnapshotError):
        serializer.loads(text)


def _valid_snapshot():
    engine = ScoundrelEngine(rng=random.Random(2))
    engine.new_game()
    return json.loads(serializer.dumps(engine))


def test_missing_field_is_rejected():
    data = _valid_snapshot()
    del data["health"]
    with pytest.raises(SnapshotError):
        serializer.loads(json.dumps(data))


def test_unknown_version_is_rejected():
    data = _valid_snapshot()
    data["version"] = 99
    with pytest.raises(SnapshotError):
        serializer.loads(json.dumps(data))


def test_tampered_card_is_rejected():
    data = _valid_snapshot()
    data["room"][0]["numeric_value"] = 50
    with pytest.raises(SnapshotError):
        serializer.loads(json.dumps(data))


def test_wrong_field_type_is_rejected():
    data = _valid_snapshot()
    data["game_over"] = "no"
    with pytest.raises(SnapshotError):
        serializer.loads(json.dumps(data))


def test_monster_equipped_as_weapon_is_rejected():
    data = _valid_snapshot()
    data["weapon"] = {
        "card": {"id": 3, "suit": "♠", "rank": "5", "numeric_value": 5, "kind": "monster"},
        "last_defeated_monster": None,
    }
    with pytest.raises(SnapshotError):
        serializer.loads(json.dumps(data))


def test_weapon_kill_must_be_a_monster():
    data = _valid_snapshot()
    data["weapon"] = {
        "card": {"id": 40, "suit": "♦", "rank": "7", "numeric_value": 7, "kind": "weapon"},
        "last_defeated_monster": {"id": 30, "suit": "♥", "rank": "4", "numeric_value": 4, "kind": "potion"},
    }
    with pytest.raises(SnapshotError):
        serializer.loads(json.dumps(data))
