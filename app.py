import redis
from flask import Flask, jsonify

from config import AppConfig, StorageConfig
from controllers.flask_controller import FlaskGameController
from Forms import CardActionForm
from scoundrel.manager import GameManager as MemoryGameManager
from scoundrel.manager_redis import GameManager as RedisGameManager
from utils import get_logger, setup_logging

setup_logging()
logger = get_logger("app")

app = Flask(__name__)

app.config['SECRET_KEY'] = AppConfig.SECRET_KEY

# -----------------------------
# GAME MANAGER (GLOBAL)
# -----------------------------

manager = RedisGameManager() if StorageConfig.USE_REDIS else MemoryGameManager()

# -----------------------------
# HELPERS
# -----------------------------

CARD_ACTIONS = {
    "drink": "drink",
    "equip": "equip",
    "fight": "fight_bare_hands",
    "fight_weapon": "fight_with_weapon",
}

ROOM_ACTIONS = {
    "new": "new_game",
    "next_room": "next_room",
    "forfeit": "forfeit",
    "undo": "undo",
}


def run_action(game_id, method, *args):
    if method != "new_game" and not manager.has_game(game_id):
        return jsonify({"error": f"Game {game_id} not found"}), 404

    engine = manager.get_game(game_id)
    controller = FlaskGameController(engine)

    response = getattr(controller, method)(*args)

    # Save updated state back to storage; rejected actions changed nothing
    if "error" not in controller.last_result:
        manager.update_game(game_id, engine)

    return response


@app.errorhandler(redis.RedisError)
def storage_unavailable(e):
    logger.error("Save storage unavailable: %s", e)
    return jsonify({"error": "Save storage unavailable, try again"}), 503


# -----------------------------
# GAME LIFECYCLE
# -----------------------------

@app.route("/api/game/create", methods=["POST"])
def create_game():
    game_id, engine = manager.create_game()
    return jsonify({"game_id": game_id, "state": engine.consume_ui_state()})


@app.route("/api/game/<game_id>/state")
def game_state(game_id):
    engine = manager.get_game(game_id)
    return FlaskGameController(engine).get_state()


@app.route("/api/game/<game_id>", methods=["DELETE"])
def delete_game(game_id):
    manager.delete_game(game_id)
    return jsonify({"ok": True})


# -----------------------------
# GAME ACTIONS
# -----------------------------

@app.route("/api/game/<game_id>/<action>", methods=["POST"])
def game_action(game_id, action):
    if action in ROOM_ACTIONS:
        return run_action(game_id, ROOM_ACTIONS[action])

    if action in CARD_ACTIONS:
        form = CardActionForm()
        if not form.validate():
            return jsonify({"error": "Invalid card", "fields": form.errors}), 400
        return run_action(game_id, CARD_ACTIONS[action], form.card_id.data)

    return jsonify({"error": f"Unknown action: {action}"}), 404


if __name__ == "__main__":
    app.run(debug=True)
