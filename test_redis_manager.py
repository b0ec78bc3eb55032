"""
Tests for the Redis-backed save slot manager.
A small fake client stands in for the Redis server.
"""
import fnmatch
import random

import pytest
import redis

from config import StorageConfig
from scoundrel.manager_redis import GameManager


class FakeRedis:
    def __init__(self):
        self.data = {}
        self.ttls = {}

    def ping(self):
        return True

    def get(self, key):
        return self.data.get(key)

    def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttls[key] = ttl

    def delete(self, key):
        self.data.pop(key, None)

    def scan_iter(self, match=None):
        for key in list(self.data):
            if match is None or fnmatch.fnmatch(key, match):
                yield key


class DownRedis(FakeRedis):
    def ping(self):
        raise redis.ConnectionError("connection refused")


class FlakyRedis(FakeRedis):
    def get(self, key):
        raise redis.TimeoutError("timed out")


def test_games_are_stored_under_slot_keys():
    client = FakeRedis()
    manager = GameManager(rng=random.Random(3), client=client)
    assert manager.use_redis

    slot, engine = manager.create_game("default")

    key = StorageConfig.key_for("default")
    assert key in client.data
    assert client.ttls[key] == StorageConfig.SAVE_TTL_SECONDS
    assert manager.get_game(slot).state == engine.state


def test_state_survives_another_worker():
    client = FakeRedis()
    first = GameManager(client=client)
    slot, engine = first.create_game()
    engine.forfeit()
    first.update_game(slot, engine)

    # simulating a different worker sharing the same Redis
    second = GameManager(client=client)
    loaded = second.get_game(slot)

    assert loaded.state == engine.state
    assert loaded.history_depth == 1


def test_list_and_delete():
    client = FakeRedis()
    client.data["unrelated"] = "x"
    manager = GameManager(client=client)
    a, _ = manager.create_game("a")
    manager.create_game("b")

    assert set(manager.list_games()) == {"a", "b"}

    manager.delete_game(a)
    assert set(manager.list_games()) == {"b"}


def test_corrupt_snapshot_is_treated_as_no_save():
    client = FakeRedis()
    client.data[StorageConfig.key_for("bad")] = "\x00garbage"
    manager = GameManager(client=client)

    engine = manager.get_game("bad")

    assert not engine.started


def test_falls_back_to_memory_when_redis_is_down():
    manager = GameManager(client=DownRedis())
    assert not manager.use_redis

    slot, engine = manager.create_game()

    assert slot in manager.games
    assert manager.get_game(slot).state == engine.state


def test_read_errors_are_not_a_missing_save():
    manager = GameManager(client=FlakyRedis())
    assert manager.use_redis

    with pytest.raises(redis.TimeoutError):
        manager.get_game("anything")
    with pytest.raises(redis.TimeoutError):
        manager.has_game("anything")


def test_write_errors_propagate():
    client = FakeRedis()
    manager = GameManager(client=client)
    slot, engine = manager.create_game()

    def down(*args):
        raise redis.ConnectionError("connection dropped")
    client.setex = down
    client.delete = down

    with pytest.raises(redis.ConnectionError):
        manager.update_game(slot, engine)
    with pytest.raises(redis.ConnectionError):
        manager.delete_game(slot)


def test_has_game():
    manager = GameManager(client=FakeRedis())
    slot, _ = manager.create_game()
    assert manager.has_game(slot)
    assert not manager.has_game("missing")
