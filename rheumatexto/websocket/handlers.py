"""
WebSocket Event Handlers

Real-time counterpart of the game endpoints: each engine event is emitted to
the client under its own name, followed by the updated state.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..utils.decorators import websocket_game_service
from ..utils.game_logger import game_logger
from ..utils.presentation import render_event


def emit_events(game_service, events):
    """Send rendered events and the resulting state to the caller."""
    for event in events:
        emit(event.name, render_event(event, game_service.hard_mode))
    emit('state_update', asdict(game_service.get_game_state()))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    @websocket_game_service
    def handle_connect(auth=None, game_service=None):
        """Send the current state to a freshly connected client."""
        emit('state_update', asdict(game_service.get_game_state()))

    @socketio.on('new_game')
    @websocket_game_service
    def handle_new_game(data=None, game_service=None):
        game_logger.log_game_event('ws_new_game', request.remote_addr or 'unknown')
        state = game_service.start_new_game(source=request.remote_addr or 'unknown')
        emit('state_update', asdict(state))

    @socketio.on('submit_guess')
    @websocket_game_service
    def handle_submit_guess(data=None, game_service=None):
        guess = (data or {}).get('guess')
        if not isinstance(guess, str) or not guess.strip():
            emit('error', {'error': 'Guess is required'})
            return

        events = game_service.submit_guess(guess, source=request.remote_addr or 'unknown')
        emit_events(game_service, events)

    @socketio.on('use_hint')
    @websocket_game_service
    def handle_use_hint(data=None, game_service=None):
        events = game_service.use_hint(source=request.remote_addr or 'unknown')
        emit_events(game_service, events)

    @socketio.on('give_up')
    @websocket_game_service
    def handle_give_up(data=None, game_service=None):
        events = game_service.give_up(source=request.remote_addr or 'unknown')
        emit_events(game_service, events)
