"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_auth, websocket_session_required
from .helpers import get_player_key
from .game_logger import game_logger

__all__ = ['require_auth', 'websocket_session_required', 'get_player_key', 'game_logger']
