"""
Terminal Rendering

Builds the ANSI text sent to interactive sessions: the board, warnings and
the statistics panel.
"""

from datetime import datetime, time, timedelta
from typing import Optional

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..models.game import Feedback, Game
from ..models.user import PlayerStats
from ..services.game_engine import compute_feedback

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"
CLEAR = "\033[H\033[2J"

EMPTY_ROW = "[ ]" * WORD_LENGTH

_COLORS = {
    Feedback.CORRECT: GREEN,
    Feedback.PRESENT: YELLOW,
}


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def render_row(guess: str, answer: str, strict_counts: bool = False) -> str:
    cells = []
    for letter, status in zip(guess, compute_feedback(guess, answer, strict_counts)):
        boxed = f"[{letter}]"
        color = _COLORS.get(status)
        cells.append(colorize(boxed, color) if color else boxed)
    return "".join(cells)


def render_board(game: Game, strict_counts: bool = False) -> str:
    """Title plus one row per guess, padded with empty rows up to MAX_GUESSES."""
    lines = [CLEAR + "    Wordle"]
    for guess in game.guesses:
        lines.append(render_row(guess, game.answer, strict_counts))
    for _ in range(len(game.guesses), MAX_GUESSES):
        lines.append(EMPTY_ROW)
    return "\n".join(lines) + "\n"


def render_warning(text: str) -> str:
    return colorize(text, RED) + "\n"


def render_success(text: str) -> str:
    return colorize(text, GREEN) + "\n"


def time_until_next_puzzle(now: Optional[datetime] = None) -> timedelta:
    now = now or datetime.now()
    next_midnight = datetime.combine(now.date() + timedelta(days=1), time(0), tzinfo=now.tzinfo)
    return next_midnight - now


def render_stats(stats: PlayerStats, now: Optional[datetime] = None) -> str:
    lines = [
        "",
        "    Statistics",
        f"played..................{stats.played}",
        f"win %...................{stats.win_percent}",
        f"current streak..........{stats.current_streak}",
        f"max streak..............{stats.max_streak}",
        "guess distribution.......",
    ]
    for attempts, count in enumerate(stats.guess_distribution, start=1):
        lines.append(f"    {attempts}...................{count}")

    remaining = int(time_until_next_puzzle(now).total_seconds())
    hours, mins = remaining // 3600, (remaining % 3600) // 60
    lines.append("")
    lines.append(f"Next Wordle in {hours} hours {mins} mins")
    return "\n".join(lines) + "\n"


def render_summary(game: Game, stats: PlayerStats, strict_counts: bool = False,
                   banner: str = "", now: Optional[datetime] = None) -> str:
    """Final board, an optional banner line, then the statistics panel."""
    return render_board(game, strict_counts) + banner + render_stats(stats, now)

