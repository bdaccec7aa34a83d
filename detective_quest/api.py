"""JSON API for a single Detective Quest game."""
from __future__ import annotations

from flask import Flask, jsonify, request
from flask_cors import CORS

from detective_quest.config import Settings
from detective_quest.exploration import BLOCKED_MESSAGES, COMMANDS, EXIT, ExplorationSession
from detective_quest.log import setup_logger
from detective_quest.rooms import build_mansion, iter_rooms
from detective_quest.ruleset import (
    CLUE_SUSPECTS,
    PHASE_ACCUSATION,
    PHASE_COMPLETE,
    PHASE_EXPLORATION,
)
from detective_quest.suspect_directory import SuspectDirectory
from detective_quest.verdict import InvalidAccusation, judge

app = Flask(__name__)
CORS(app)

DIRECTIONS = dict(COMMANDS, **{name: name for name in COMMANDS.values()})

# The directory never changes during play
directory = SuspectDirectory.from_pairs(CLUE_SUSPECTS)

# In-memory game state (will reset on server restart)
game_state = {}


def reset_game():
    """Reset game state to a fresh walk from the entrance hall."""
    global game_state
    mansion = build_mansion()
    session = ExplorationSession(mansion)
    game_state = {
        "phase": PHASE_EXPLORATION,
        "rooms_total": sum(1 for _ in iter_rooms(mansion)),
        "session": session,
        "clue_found": session.enter(),
        "verdict": None,
    }


def _error(message, status=400):
    return jsonify({"status": "error", "message": message}), status


def _room_payload():
    room = game_state["session"].current
    if room is None:
        return None
    return {
        "name": room.name,
        "clue": room.clue or None,
        "directions": [d for d in ("left", "right") if room.child(d) is not None],
    }


def _verdict_payload():
    verdict = game_state["verdict"]
    if verdict is None:
        return None
    return {
        "accused": verdict.accused,
        "count": verdict.count,
        "guilty": verdict.guilty,
        "message": verdict.sentence(),
    }


def _finish_exploration():
    if game_state["phase"] == PHASE_EXPLORATION:
        game_state["session"].exit()
        game_state["phase"] = PHASE_ACCUSATION


@app.route('/api/game/new', methods=['POST'])
def new_game():
    """Start a new game."""
    reset_game()
    return jsonify({
        "status": "success",
        "message": "New game started",
        "room": _room_payload(),
        "clue_found": game_state["clue_found"],
    })


@app.route('/api/game/state', methods=['GET'])
def get_state():
    """Get current game state."""
    session = game_state["session"]
    return jsonify({
        "phase": game_state["phase"],
        "current_room": session.current.name if session.current else None,
        "visited": session.visited,
        "rooms_total": game_state["rooms_total"],
        "clues_collected_count": len(session.registry),
        "verdict": _verdict_payload(),
    })


@app.route('/api/game/room', methods=['GET'])
def get_room():
    """Describe the room the player is standing in."""
    room = _room_payload()
    if room is None:
        return _error("Exploration is over")
    return jsonify({"room": room})


@app.route('/api/game/move', methods=['POST'])
def move():
    """Walk left or right, or leave the mansion."""
    data = request.get_json(silent=True) or {}
    raw = data.get("direction")

    if not isinstance(raw, str) or not raw.strip():
        return _error("direction required")

    direction = DIRECTIONS.get(raw.strip().lower())
    if direction is None:
        return _error("Opção inválida. Use e, d ou s.")

    if game_state["phase"] != PHASE_EXPLORATION:
        return _error("Exploration is over")

    if direction == EXIT:
        _finish_exploration()
        return jsonify({
            "status": "success",
            "message": "Exploração encerrada pelo jogador.",
            "phase": game_state["phase"],
        })

    session = game_state["session"]
    if not session.move(direction):
        return _error(BLOCKED_MESSAGES[direction])

    clue = session.enter()
    return jsonify({
        "status": "success",
        "room": _room_payload(),
        "clue_found": clue,
    })


@app.route('/api/game/clues', methods=['GET'])
def get_clues():
    """Get collected clues in alphabetical order."""
    clues = game_state["session"].registry.to_list()
    return jsonify({"clues": clues, "count": len(clues)})


@app.route('/api/game/suspects', methods=['GET'])
def get_suspects():
    """Get the names that can be accused (without revealing their clues)."""
    suspects = sorted({suspect for _, suspect in directory.items()})
    return jsonify({"suspects": suspects})


@app.route('/api/game/accuse', methods=['POST'])
def accuse():
    """Make the final accusation."""
    data = request.get_json(silent=True) or {}
    name = data.get("name")

    if not isinstance(name, str):
        return _error("name required")

    if game_state["phase"] == PHASE_COMPLETE:
        return _error("Game already complete")

    try:
        verdict = judge(game_state["session"].registry, directory, name)
    except InvalidAccusation as exc:
        return _error(str(exc))

    _finish_exploration()
    game_state["verdict"] = verdict
    game_state["phase"] = PHASE_COMPLETE

    return jsonify({
        "status": "success",
        "verdict": _verdict_payload(),
    })


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok", "service": "detective-quest"})


reset_game()


def main():
    settings = Settings.from_env()
    setup_logger(settings.log_level, settings.log_file)
    app.run(host=settings.host, port=settings.api_port())


if __name__ == '__main__':
    main()
