"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..models.game import GameStatus, GuessRejected, HintExhausted
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.presentation import render_event

game_bp = Blueprint('game', __name__)


def events_response(game_service, action, events):
    """
    Build the JSON response for an engine operation.

    Rejections become 400 responses carrying the user-facing message;
    accepted operations return the rendered events and the new state.
    """
    rendered = [render_event(event, game_service.hard_mode) for event in events]
    state = asdict(game_service.get_game_state())

    for event, payload in zip(events, rendered):
        if isinstance(event, (GuessRejected, HintExhausted)):
            error_response = {
                'success': False,
                'error': payload['message'],
                'reason': event.reason.value if isinstance(event, GuessRejected) else event.name,
                'state': state
            }
            game_logger.log_server_response(request, action, False, error_response)
            return jsonify(error_response), 400

    response_data = {
        'success': True,
        'events': rendered,
        'state': state
    }
    game_logger.log_server_response(
        request, action, True, response_data,
        event_names=[event.name for event in events]
    )
    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Start a new game, replacing the current one."""
    try:
        game_logger.log_user_action(request, 'new_game')

        state = game_service.start_new_game(source=request.remote_addr or 'unknown')
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/state', methods=['GET'])
@require_game_service
def get_state(game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state')

        response_data = {
            'success': True,
            'state': asdict(game_service.get_game_state())
        }

        game_logger.log_server_response(request, 'get_state', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/guess', methods=['POST'])
@require_game_service
def make_guess(game_service):
    """Submit a guess for normalization and ranking."""
    try:
        data = request.get_json(silent=True) or {}
        guess = data.get('guess')

        if not isinstance(guess, str) or not guess.strip():
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'submit_guess', guess=guess)

        events = game_service.submit_guess(guess, source=request.remote_addr or 'unknown')
        return events_response(game_service, 'submit_guess', events)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/hint', methods=['POST'])
@require_game_service
def use_hint(game_service):
    """Reveal a hint word."""
    try:
        game_logger.log_user_action(request, 'use_hint')

        events = game_service.use_hint(source=request.remote_addr or 'unknown')
        return events_response(game_service, 'use_hint', events)

    except Exception as e:
        game_logger.log_error(request, e, 'use_hint')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'use_hint', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/give_up', methods=['POST'])
@require_game_service
def give_up(game_service):
    """Give up and reveal the answer."""
    try:
        game_logger.log_user_action(request, 'give_up')

        events = game_service.give_up(source=request.remote_addr or 'unknown')
        return events_response(game_service, 'give_up', events)

    except Exception as e:
        game_logger.log_error(request, e, 'give_up')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'give_up', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/share', methods=['GET'])
@require_game_service
def share(game_service):
    """Share text for a won game."""
    game_logger.log_user_action(request, 'share')

    text = game_service.get_share_text()
    if text is None:
        error_response = {
            'success': False,
            'error': 'Only a won game can be shared'
        }
        game_logger.log_server_response(request, 'share', False, error_response)
        return jsonify(error_response), 400

    response_data = {
        'success': True,
        'text': text
    }
    game_logger.log_server_response(request, 'share', True, response_data)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    from ..services.game_service import get_game_service

    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'game_in_progress': bool(game_service) and game_service.session.status is GameStatus.IN_PROGRESS,
            'word_data': game_service.word_data.statistics() if game_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
