"""
Statistics Service

Pure aggregations over a player's history. A history is a sequence of Game
snapshots ordered most-recent-first, as the history service returns it.
"""

from typing import List, Sequence

from ..config.game_settings import MAX_GUESSES
from ..models.game import Game
from ..models.user import PlayerStats


def played(history: Sequence[Game]) -> int:
    return len(history)


def win_percent(history: Sequence[Game]) -> int:
    """Percentage of games won, truncated to an int; 0 for an empty history."""
    total = len(history)
    if total == 0:
        return 0
    wins = sum(1 for game in history if game.won)
    return 100 * wins // total


def current_streak(history: Sequence[Game]) -> int:
    """Consecutive wins counted from the most recent game back to the first non-win."""
    streak = 0
    for game in history:
        if not game.won:
            break
        streak += 1
    return streak


def max_streak(history: Sequence[Game]) -> int:
    """Longest run of consecutive wins in chronological order."""
    best = 0
    streak = 0
    for game in reversed(history):
        if game.won:
            streak += 1
            best = max(best, streak)
        else:
            streak = 0
    return best


def guess_distribution(history: Sequence[Game]) -> List[int]:
    """
    Histogram of won games by attempts used.

    Bucket ``i`` counts games won in exactly ``i + 1`` guesses. Games that were
    not won are left out.
    """
    dist = [0] * MAX_GUESSES
    for game in history:
        if not game.won:
            continue
        attempts = len(game.guesses)
        if 1 <= attempts <= MAX_GUESSES:
            dist[attempts - 1] += 1
    return dist


def build_stats(history: Sequence[Game]) -> PlayerStats:
    return PlayerStats(
        played=played(history),
        win_percent=win_percent(history),
        current_streak=current_streak(history),
        max_streak=max_streak(history),
        guess_distribution=guess_distribution(history),
    )
