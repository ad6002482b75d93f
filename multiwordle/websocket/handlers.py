"""
WebSocket Event Handlers

Mirrors the game API over Socket.IO and keeps every open board in sync.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..controllers.game_controller import get_game_service
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Send the live game to a newly connected board."""
        game_service = get_game_service()
        if game_service:
            emit('game_updated', asdict(game_service.get_state()))

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Restart the game with the configured secret sentence."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        try:
            game_logger.log_user_action(request, 'ws_new_game')

            state = game_service.reset()
            payload = asdict(state)

            emit('new_game_result', {'success': True, 'words': state.words, 'state': payload})
            socketio.emit('game_updated', payload)

            game_logger.log_game_event('game_reset', request.remote_addr, source='websocket')
        except Exception as e:
            game_logger.log_error(request, e, 'ws_new_game')
            emit('error', {'error': str(e)})

    @socketio.on('submit_guess')
    def handle_submit_guess(data=None):
        """Evaluate one attempt sent over the socket."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not isinstance(data, dict) or not isinstance(data.get('guesses'), list):
            emit('error', {'error': 'Invalid request'})
            return

        try:
            game_logger.log_user_action(request, 'ws_submit_guess', guess_count=len(data['guesses']))

            result, state = game_service.submit_guess_with_state(data['guesses'])
            payload = asdict(result)

            emit('guess_result', payload)
            game_logger.log_server_response(
                request, 'ws_submit_guess', True, payload,
                validation_error=result.error
            )

            if result.valid:
                socketio.emit('game_updated', asdict(state))
                game_logger.log_guess_outcome(payload, request.remote_addr, 'websocket')
        except Exception as e:
            game_logger.log_error(request, e, 'ws_submit_guess')
            emit('error', {'error': str(e)})
