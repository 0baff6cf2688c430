"""
Game Controller

Handles the HTTP endpoints next to the interactive sessions: health, today's
puzzle metadata and player statistics.
"""

from dataclasses import asdict
from datetime import date
from flask import Blueprint, request, jsonify
from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..services.session_service import get_session_service
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger
from ..utils.render import time_until_next_puzzle

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


@game_bp.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    session_service = get_session_service()
    return jsonify({
        'success': True,
        'message': 'Server is up!',
        'active_sessions': session_service.active_count() if session_service else 0
    })


@game_bp.route('/today', methods=['GET'])
def today():
    """Today's puzzle number and rules; never reveals the answer."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    word_book = session_service.word_book
    day = session_service.today() if session_service.today else date.today()
    return jsonify({
        'success': True,
        'puzzle_number': word_book.puzzle_number(day),
        'word_length': WORD_LENGTH,
        'max_guesses': MAX_GUESSES,
        'seconds_until_next': int(time_until_next_puzzle().total_seconds())
    })


@game_bp.route('/stats', methods=['GET'])
@require_auth
def get_stats():
    """Lifetime statistics for the calling player."""
    try:
        session_service = get_session_service()
        if not session_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_stats', request.player)

        stats = session_service.stats_for(request.player)
        response_data = {
            'success': True,
            'stats': asdict(stats)
        }

        game_logger.log_server_response(request, 'get_stats', True, response_data, request.player)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_stats', getattr(request, 'player', None))
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_stats', False, error_response)
        return jsonify(error_response), 500
