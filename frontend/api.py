# frontend/api.py

import logging
import uuid

from flask import Blueprint, current_app, jsonify, request

from agents import AGENT_REGISTRY
from backend.config import get_preset
from backend.game import ACTION_NAMES, GameSession

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)


def _games():
    # One store per app, so separate apps (and their games) never interfere.
    return current_app.extensions.setdefault("minesweeper_games", {})


def _error(message, status=400):
    logger.warning("Rejected request to %s: %s", request.path, message)
    return jsonify({"error": message}), status


def _session_params(data):
    config = current_app.config["MINESWEEPER"]
    params = dict(config["game"])
    preset_name = data.get("preset", params.pop("preset", None))
    if preset_name is not None:
        params.update(get_preset(config, preset_name))

    for key in ("width", "height", "num_mines", "start_x", "start_y", "seed"):
        if data.get(key) is not None:
            params[key] = data[key]
    return params


def _create_game(data):
    params = _session_params(data)
    game = GameSession(
        width=params["width"],
        height=params["height"],
        num_mines=params["num_mines"],
        start_x=params.get("start_x", 0),
        start_y=params.get("start_y", 0),
        seed=params.get("seed"),
    )
    game_id = uuid.uuid4().hex
    _games()[game_id] = game
    return game_id, game


def _serialize_frame(frame):
    return {
        "action": frame["action"].to_dict(),
        "result": frame["result"].to_json(),
        "board": frame["board"].get_visible_state(),
    }


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = request.get_json(silent=True) or {}
    try:
        game_id, game = _create_game(data)
    except (KeyError, TypeError, ValueError) as exc:
        return _error(str(exc))
    return jsonify({"game_id": game_id, **game.get_state()})


@api_blueprint.route("/step", methods=["POST"])
def step():
    data = request.get_json(silent=True) or {}
    game = _games().get(data.get("game_id"))
    if game is None:
        return _error("Unknown game_id", 404)

    action = data.get("action")
    x = data.get("x")
    y = data.get("y")
    if action not in ACTION_NAMES or not isinstance(x, int) or not isinstance(y, int):
        return _error("Invalid input")

    state = game.step(action, x, y)
    if action == "uncover":
        state["result"] = game.last_result.to_json()
    return jsonify(state)


@api_blueprint.route("/state/<game_id>", methods=["GET"])
def get_state(game_id):
    game = _games().get(game_id)
    if game is None:
        return _error("Unknown game_id", 404)
    return jsonify(game.get_state())


@api_blueprint.route("/play_agent", methods=["POST"])
def play_agent():
    data = request.get_json(silent=True) or {}
    agent_name = str(data.get("agent", current_app.config["MINESWEEPER"]["agent"]["name"])).lower()
    agent_cls = AGENT_REGISTRY.get(agent_name)
    if agent_cls is None:
        return _error(f"Unknown agent {agent_name!r}")

    game_id = data.get("game_id")
    if game_id is not None:
        game = _games().get(game_id)
        if game is None:
            return _error("Unknown game_id", 404)
        game.reset()
    else:
        try:
            game_id, game = _create_game(data)
        except (KeyError, TypeError, ValueError) as exc:
            return _error(str(exc))

    agent = agent_cls(game.width, game.height, game.num_mines, game.start_x, game.start_y)
    frames = game.play_agent(agent, open_first=bool(data.get("open_first", False)))

    return jsonify({
        "game_id": game_id,
        "frames": [_serialize_frame(frame) for frame in frames],
        "final": game.get_state(),
    })
