"""
Player Data Models

Contains player-related data structures.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class PlayerStats:
    """Lifetime statistics shown after each completed game."""
    played: int = 0
    win_percent: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: List[int] = field(default_factory=list)
