"""
Statistics and Settings Controller

Handles the player statistics and preferences HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_bool

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
@require_game_service
def get_stats(game_service):
    """Get lifetime statistics."""
    game_logger.log_user_action(request, 'get_stats')

    stats = game_service.get_stats()
    response_data = {
        'success': True,
        'stats': {
            **asdict(stats),
            'average_guesses': stats.average_guesses
        }
    }

    game_logger.log_server_response(request, 'get_stats', True, response_data)
    return jsonify(response_data)


@stats_bp.route('/settings', methods=['GET'])
@require_game_service
def get_settings(game_service):
    """Get player preferences."""
    game_logger.log_user_action(request, 'get_settings')

    response_data = {
        'success': True,
        'settings': asdict(game_service.get_settings())
    }

    game_logger.log_server_response(request, 'get_settings', True, response_data)
    return jsonify(response_data)


@stats_bp.route('/settings', methods=['PUT'])
@require_game_service
def update_settings(game_service):
    """Toggle light mode and/or hard mode."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        error_response = {
            'success': False,
            'error': 'Request body is required'
        }
        game_logger.log_server_response(request, 'update_settings', False, error_response)
        return jsonify(error_response), 400

    game_logger.log_user_action(request, 'update_settings', settings=data)

    settings = game_service.update_settings(
        light_mode=parse_bool(data.get('light_mode')),
        hard_mode=parse_bool(data.get('hard_mode'))
    )
    response_data = {
        'success': True,
        'settings': asdict(settings)
    }

    game_logger.log_server_response(request, 'update_settings', True, response_data)
    return jsonify(response_data)
