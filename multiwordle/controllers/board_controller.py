"""
Board Controller

Serves the browser board. The page holds no game logic; it calls the
game API and renders whatever the server returns.
"""

from flask import Blueprint, render_template, request
from .game_controller import get_game_service
from ..utils.game_logger import game_logger

board_bp = Blueprint('board', __name__)


@board_bp.route('/', methods=['GET'])
def home():
    """Render the board sized for the secret sentence."""
    game_service = get_game_service()
    if not game_service:
        return 'Game service unavailable', 500

    game_logger.log_user_action(request, 'view_board')

    state = game_service.get_state()
    return render_template(
        'index.html',
        num_words=len(state.words),
        word_length=state.word_length,
        max_attempts=state.max_attempts
    )
