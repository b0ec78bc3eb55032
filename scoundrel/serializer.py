"""
Save snapshot encoding.

A snapshot is a JSON document holding the live GameState plus its undo
history. History entries use the same per-field shape, without nesting.
"""
import json

from scoundrel.deck import MONSTER, WEAPON, make_card
from scoundrel.engine import ScoundrelEngine
from scoundrel.history import History
from scoundrel.models import GameState, Weapon

SNAPSHOT_VERSION = 1


class SnapshotError(ValueError):
    """Raised when a saved snapshot is corrupt or unreadable."""
    pass


# -----------------------------
# ENCODE
# -----------------------------

def card_to_dict(card):
    return {
        "id": card.id,
        "suit": card.suit,
        "rank": card.rank,
        "numeric_value": card.numeric_value,
        "kind": card.kind,
    }


def weapon_to_dict(weapon):
    if weapon is None:
        return None
    return {
        "card": card_to_dict(weapon.card),
        "last_defeated_monster": (
            card_to_dict(weapon.last_defeated_monster)
            if weapon.last_defeated_monster else None
        ),
    }


def state_to_dict(state):
    return {
        "deck": [card_to_dict(c) for c in state.deck],
        "room": [card_to_dict(c) for c in state.room],
        "health": state.health,
        "weapon": weapon_to_dict(state.weapon),
        "current_room_number": state.current_room_number,
        "last_forfeit_room_number": state.last_forfeit_room_number,
        "game_over": state.game_over,
        "won": state.won,
        "started": state.started,
    }


def dumps(engine):
    data = state_to_dict(engine.state)
    data["history"] = [state_to_dict(s) for s in engine.history.entries]
    data["version"] = SNAPSHOT_VERSION
    return json.dumps(data, ensure_ascii=False)


# -----------------------------
# DECODE
# -----------------------------

def _require(condition, msg):
    if not condition:
        raise SnapshotError(msg)


def _int(data, key):
    value = data[key]
    _require(isinstance(value, int) and not isinstance(value, bool), f"{key} must be an integer")
    return value


def _bool(data, key):
    value = data[key]
    _require(isinstance(value, bool), f"{key} must be a boolean")
    return value


def card_from_dict(data):
    _require(isinstance(data, dict), "card must be an object")
    card = make_card(_int(data, "id"), data["suit"], data["rank"])
    _require(card.numeric_value == data["numeric_value"], f"value mismatch for {card}")
    _require(card.kind == data["kind"], f"kind mismatch for {card}")
    return card


def weapon_from_dict(data):
    if data is None:
        return None
    _require(isinstance(data, dict), "weapon must be an object")
    card = card_from_dict(data["card"])
    _require(card.kind == WEAPON, f"{card} cannot be equipped")

    monster = data["last_defeated_monster"]
    if monster is not None:
        monster = card_from_dict(monster)
        _require(monster.kind == MONSTER, f"{monster} is not a monster")

    return Weapon(card, monster)


def state_from_dict(data):
    _require(isinstance(data, dict), "state must be an object")
    _require(isinstance(data["deck"], list), "deck must be a list")
    _require(isinstance(data["room"], list), "room must be a list")
    return GameState(
        deck=[card_from_dict(c) for c in data["deck"]],
        room=[card_from_dict(c) for c in data["room"]],
        health=_int(data, "health"),
        weapon=weapon_from_dict(data["weapon"]),
        current_room_number=_int(data, "current_room_number"),
        last_forfeit_room_number=_int(data, "last_forfeit_room_number"),
        game_over=_bool(data, "game_over"),
        won=_bool(data, "won"),
        started=_bool(data, "started"),
    )


def loads(text, rng=None):
    """
    Rebuilds an engine from a snapshot string.
    Raises SnapshotError if the snapshot cannot be trusted.
    """
    try:
        data = json.loads(text)
        _require(isinstance(data, dict), "snapshot must be an object")
        _require(data.get("version") == SNAPSHOT_VERSION,
                 f"unsupported snapshot version: {data.get('version')!r}")
        _require(isinstance(data["history"], list), "history must be a list")
        state = state_from_dict(data)
        history = History(state_from_dict(s) for s in data["history"])
    except SnapshotError:
        raise
    except (TypeError, ValueError, KeyError, RecursionError) as e:
        raise SnapshotError(f"corrupt snapshot: {e}") from e

    return ScoundrelEngine(rng=rng, state=state, history=history)
