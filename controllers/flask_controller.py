from flask import jsonify

from utils import get_logger

logger = get_logger("controllers.flask")


class FlaskGameController:
    def __init__(self, engine):
        self.engine = engine
        self.last_result = None

    def _respond(self, result):
        self.last_result = result
        if result.get("error"):
            logger.debug("Action rejected: %s", result["error"])
        # Return transient UI state (and consume it) so the frontend gets
        # the messages produced by this request.
        return jsonify({"results": result, "state": self.engine.consume_ui_state()})

    def get_state(self):
        return jsonify(self.engine.get_state())

    def new_game(self):
        return self._respond(self.engine.new_game())

    def drink(self, card_id):
        return self._respond(self.engine.drink(card_id))

    def equip(self, card_id):
        return self._respond(self.engine.equip(card_id))

    def fight_bare_hands(self, card_id):
        return self._respond(self.engine.fight_bare_hands(card_id))

    def fight_with_weapon(self, card_id):
        return self._respond(self.engine.fight_with_weapon(card_id))

    def next_room(self):
        return self._respond(self.engine.next_room())

    def forfeit(self):
        return self._respond(self.engine.forfeit())

    def undo(self):
        return self._respond(self.engine.undo())
