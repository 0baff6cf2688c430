"""
Services Package

Contains the game engine, statistics, persistence, identity and session
services.
"""

from .game_engine import new_game, submit_guess, is_done, game_status, compute_feedback
from .stats_service import (
    played,
    win_percent,
    current_streak,
    max_streak,
    guess_distribution,
    build_stats,
)
from .dictionary_service import WordBook, default_word_book
from .history_service import MongoGameRepository, InMemoryGameRepository
from .auth_service import AuthService, get_auth_service
from .session_service import SessionService, PlaySession, get_session_service

__all__ = [
    'new_game', 'submit_guess', 'is_done', 'game_status', 'compute_feedback',
    'played', 'win_percent', 'current_streak', 'max_streak', 'guess_distribution', 'build_stats',
    'WordBook', 'default_word_book',
    'MongoGameRepository', 'InMemoryGameRepository',
    'AuthService', 'get_auth_service',
    'SessionService', 'PlaySession', 'get_session_service'
]
