import uuid

from scoundrel import serializer
from scoundrel.engine import ScoundrelEngine
from utils import get_logger

logger = get_logger("scoundrel.manager")


class GameManager:
    """
    Responsible for creating, storing, and loading save slots.
    Each slot holds one serialized snapshot string.
    """

    def __init__(self, rng=None):
        # slot -> snapshot string
        self.games = {}
        self.rng = rng

    # -----------------------------
    # STORAGE PRIMITIVES
    # -----------------------------

    def _read(self, slot):
        return self.games.get(slot)

    def _write(self, slot, snapshot):
        self.games[slot] = snapshot

    def _remove(self, slot):
        self.games.pop(slot, None)

    def _slots(self):
        return list(self.games)

    # -----------------------------
    # CREATE GAME
    # -----------------------------

    def create_game(self, slot=None):
        """
        Starts a new game in a slot (a fresh uuid when omitted) and saves it.
        """
        slot = slot or str(uuid.uuid4())

        engine = ScoundrelEngine(rng=self.rng)
        engine.new_game()
        self.update_game(slot, engine)

        logger.info("Created game %s", slot)
        return slot, engine

    # -----------------------------
    # GET GAME
    # -----------------------------

    def has_game(self, slot):
        return self._read(slot) is not None

    def get_game(self, slot):
        """
        Loads the engine saved in a slot. A missing or corrupt snapshot
        gives a blank, unstarted game.
        """
        snapshot = self._read(slot)
        if snapshot is None:
            logger.debug("No saved game in slot %s", slot)
            return ScoundrelEngine(rng=self.rng)

        try:
            return serializer.loads(snapshot, rng=self.rng)
        except serializer.SnapshotError as e:
            logger.warning("Discarding unreadable save in slot %s: %s", slot, e)
            return ScoundrelEngine(rng=self.rng)

    # -----------------------------
    # UPDATE GAME
    # -----------------------------

    def update_game(self, slot, engine):
        """
        Saves the engine to its slot. Call after every action.
        """
        self._write(slot, serializer.dumps(engine))

    # -----------------------------
    # DELETE GAME
    # -----------------------------

    def delete_game(self, slot):
        self._remove(slot)
        logger.info("Deleted game %s", slot)

    # -----------------------------
    # LIST GAMES (DEBUG / ADMIN)
    # -----------------------------

    def list_games(self):
        games = {}
        for slot in self._slots():
            engine = self.get_game(slot)
            games[slot] = {
                "started": engine.started,
                "game_over": engine.game_over,
                "won": engine.won,
                "health": engine.health,
            }
        return games
