from datetime import datetime, timedelta

from wordle.models.user import PlayerStats
from wordle.services.game_engine import new_game, submit_guess
from wordle.utils.render import (
    EMPTY_ROW,
    GREEN,
    RESET,
    YELLOW,
    render_board,
    render_row,
    render_stats,
    render_summary,
    time_until_next_puzzle,
)


def test_row_colors():
    row = render_row("salad", "water")

    assert row == f"[s]{GREEN}[a]{RESET}[l]{YELLOW}[a]{RESET}[d]"


def test_strict_counts_change_the_row():
    assert render_row("otter", "water") == f"[o]{YELLOW}[t]{RESET}" + "".join(
        f"{GREEN}[{c}]{RESET}" for c in "ter")
    assert render_row("otter", "water", strict_counts=True) == "[o][t]" + "".join(
        f"{GREEN}[{c}]{RESET}" for c in "ter")


def test_board_pads_remaining_rows():
    game = new_game("water")
    submit_guess(game, "teeth")

    board = render_board(game)

    assert board.count(EMPTY_ROW) == 5
    assert "    Wordle" in board


def test_stats_panel():
    stats = PlayerStats(played=3, win_percent=66, current_streak=1, max_streak=2,
                        guess_distribution=[0, 1, 1, 0, 0, 0])

    text = render_stats(stats, now=datetime(2024, 1, 1, 22, 30))

    assert "played..................3" in text
    assert "win %...................66" in text
    assert "current streak..........1" in text
    assert "max streak..............2" in text
    assert "    3...................1" in text
    assert "Next Wordle in 1 hours 30 mins" in text


def test_time_until_next_puzzle():
    assert time_until_next_puzzle(datetime(2024, 1, 1, 0, 0)) == timedelta(days=1)
    assert time_until_next_puzzle(datetime(2024, 1, 1, 23, 59, 30)) == timedelta(seconds=30)


def test_summary_puts_the_banner_between_board_and_statistics():
    game = new_game("water")
    submit_guess(game, "water")
    stats = PlayerStats(played=1, win_percent=100, current_streak=1, max_streak=1,
                        guess_distribution=[1, 0, 0, 0, 0, 0])

    text = render_summary(game, stats, banner="Winner!\n", now=datetime(2024, 1, 1, 12, 0))

    board, rest = text.split("Winner!\n")
    assert board == render_board(game)
    assert rest == render_stats(stats, now=datetime(2024, 1, 1, 12, 0))
