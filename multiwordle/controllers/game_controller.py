"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify, current_app
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def get_game_service():
    """Get the game service owned by the current application."""
    return getattr(current_app, 'game_service', None)


def broadcast_game_state(state) -> None:
    """Push a game snapshot to every connected WebSocket client."""
    socketio = getattr(current_app, 'socketio', None)
    if socketio is not None:
        socketio.emit('game_updated', asdict(state))


@game_bp.route('/new-game', methods=['POST'])
def new_game():
    """Restart the game with the configured secret sentence."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        state = game_service.reset()

        response_data = {
            'success': True,
            'words': state.words,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data,
            word_count=len(state.words), max_attempts=state.max_attempts
        )
        game_logger.log_game_event('game_reset', request.remote_addr, source='http')
        broadcast_game_state(state)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/state', methods=['GET'])
def get_state():
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'get_state')

        state = game_service.get_state()

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data,
            attempts_used=state.attempts_used, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/guess', methods=['POST'])
def make_guess():
    """Submit one attempt, a guess word per secret word, for evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guesses'), list):
            error_response = {
                'success': False,
                'error': 'Invalid request'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guesses = data['guesses']

        game_logger.log_user_action(request, 'submit_guess', guess_count=len(guesses))

        result, state = game_service.submit_guess_with_state(guesses)
        response_data = asdict(result)

        if not result.valid:
            # Rejected attempts are part of the game contract, not transport errors
            game_logger.log_server_response(
                request, 'submit_guess', True, response_data,
                validation_error=result.error
            )
            return jsonify(response_data)

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            attempts_used=len(result.guesses), game_over=result.game_over
        )
        game_logger.log_guess_outcome(response_data, request.remote_addr, 'http')
        broadcast_game_state(state)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'game_available': game_service is not None,
            'game_status': game_service.get_state().status if game_service else None,
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
