"""
WebSocket Event Handlers

Interactive text sessions over Socket.IO. A client connects with
``auth={"token": ...}`` (or ``{"username": ...}`` when no JWT secret is set),
sends ``guess`` events carrying ``{"word": ...}`` and receives ``output``
events carrying ``{"text": ..., "finished": ...}``.
"""

from flask import request
from flask_socketio import emit
from ..services.auth_service import get_auth_service
from ..services.session_service import get_session_service
from ..utils.decorators import websocket_session_required
from ..utils.game_logger import game_logger
from ..utils.helpers import get_player_key

_GAME_EVENTS = {
    'won': 'game_won',
    'lost': 'game_lost',
    'resumed': 'game_resumed',
}


def _emit_reply(reply, player):
    emit('output', {'text': reply.text, 'finished': reply.finished})

    game_event = _GAME_EVENTS.get(reply.event)
    if game_event:
        game_logger.log_game_event(player, game_event, request.remote_addr)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Authenticate the player and open today's game."""
        auth_service = get_auth_service()
        session_service = get_session_service()
        if not auth_service or not session_service:
            game_logger.logger.error("WebSocket connect refused: services not initialized")
            return False

        result = auth_service.authenticate(auth)
        if not result['success']:
            game_logger.log_server_response(request, 'connect', False, result)
            return False

        player = get_player_key(result['user']['username'])
        game_logger.log_user_action(request, 'connect', player)

        try:
            reply = session_service.open(request.sid, player)
        except Exception as e:
            game_logger.log_error(request, e, 'connect', player)
            return False

        _emit_reply(reply, player)

    @socketio.on('guess')
    @websocket_session_required
    def handle_guess(data, play_session=None):
        """Submit one input line as a guess."""
        word = data.get('word', '') if isinstance(data, dict) else str(data or '')
        player = play_session.player
        game_logger.log_user_action(request, 'guess', player, word=word)

        try:
            reply = get_session_service().handle_line(request.sid, word)
        except Exception as e:
            game_logger.log_error(request, e, 'guess', player)
            emit('error', {'error': 'Failed to process guess'})
            return

        _emit_reply(reply, player)

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Drop the play session; the game itself is already persisted."""
        session_service = get_session_service()
        if session_service and session_service.close(request.sid):
            game_logger.log_user_action(request, 'disconnect')


def disconnect_idle_sessions(socketio, idle_timeout):
    """
    Disconnect every session that sent nothing for ``idle_timeout`` seconds.

    Returns:
        List of disconnected session ids
    """
    session_service = get_session_service()
    if not session_service:
        return []

    expired = session_service.idle_sessions(idle_timeout)
    for sid in expired:
        play_session = session_service.get(sid)
        socketio.server.disconnect(sid, namespace='/')
        session_service.close(sid)
        if play_session:
            game_logger.logger.info(f"Player '{play_session.player}' disconnected after {idle_timeout}s idle")
    return expired


def idle_session_worker(socketio, idle_timeout, interval=15):
    """Background task that periodically disconnects idle sessions."""
    while True:
        socketio.sleep(interval)
        try:
            expired = disconnect_idle_sessions(socketio, idle_timeout)
            if expired:
                game_logger.logger.info(f"Idle sweep: disconnected {len(expired)} sessions")
        except Exception as e:
            game_logger.logger.error(f"Error in idle session sweep: {e}")
