"""
Authentication Decorators

Contains decorators for HTTP and WebSocket identity checks.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit

from .helpers import get_player_key


def _request_credentials():
    """Credentials from an HTTP request: bearer token or ``username`` query parameter."""
    auth_header = request.headers.get('Authorization', '')
    if auth_header.startswith('Bearer '):
        return {'token': auth_header.split(' ', 1)[1]}
    return {'username': request.args.get('username')}


def require_auth(f):
    """
    Decorator to require a player identity for HTTP endpoints.

    Sets ``request.player`` to the player key on success.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.auth_service import get_auth_service

        auth_service = get_auth_service()
        if not auth_service:
            return jsonify({
                'success': False,
                'error': 'Authentication service unavailable'
            }), 500

        result = auth_service.authenticate(_request_credentials())
        if not result['success']:
            return jsonify({
                'success': False,
                'error': result['error']
            }), 401

        request.player = get_player_key(result['user']['username'])
        return f(*args, **kwargs)

    return decorated_function


def websocket_session_required(f):
    """Decorator for Socket.IO events that need the caller's play session."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.session_service import get_session_service

        session_service = get_session_service()
        play_session = session_service.get(request.sid) if session_service else None
        if play_session is None:
            emit('error', {'error': 'No active session'})
            return

        kwargs['play_session'] = play_session
        return f(*args, **kwargs)

    return decorated_function
