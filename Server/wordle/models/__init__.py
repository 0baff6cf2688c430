"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Feedback,
    Game,
    GameOverError,
    GameStatus,
    GuessError,
    InvalidLengthError,
    InvalidWordError,
)
from .user import PlayerStats

__all__ = [
    'Feedback', 'Game', 'GameOverError', 'GameStatus', 'GuessError',
    'InvalidLengthError', 'InvalidWordError', 'PlayerStats'
]
