"""
Game Engine

Rules of a single puzzle: guess validation, win/loss transitions and
per-letter feedback. Everything here is synchronous and in-memory; callers
serialize access to a given Game.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..models.game import (
    Feedback,
    Game,
    GameOverError,
    GameStatus,
    GuessError,
    GuessGate,
    InvalidLengthError,
    InvalidWordError,
    accept_alphabetic,
    normalize_word,
)


def new_game(answer: str, is_allowed_guess: Optional[GuessGate] = None) -> Game:
    """
    Creates a game for the given answer.

    Args:
        answer: The secret word, normalized to lowercase
        is_allowed_guess: Dictionary gate; defaults to accepting any alphabetic word

    Raises:
        ValueError: If the answer is not WORD_LENGTH letters
    """
    normalized = normalize_word(answer)
    if len(normalized) != WORD_LENGTH or not normalized.isalpha():
        raise ValueError(f"answer must be {WORD_LENGTH} letters, got {answer!r}")
    return Game(answer=normalized, is_allowed_guess=is_allowed_guess or accept_alphabetic)


def is_done(game: Game) -> bool:
    return game.won or len(game.guesses) >= MAX_GUESSES


def game_status(game: Game) -> GameStatus:
    if game.won:
        return GameStatus.WON
    if is_done(game):
        return GameStatus.LOST
    return GameStatus.IN_PROGRESS


def submit_guess(game: Game, word: str) -> Tuple[bool, Optional[GuessError]]:
    """
    Submits a guess and advances the game.

    Rejected guesses (wrong length, unknown word, game already over) leave the
    game untouched and do not consume an attempt. The guess that ends the game
    is recorded and reported together with a GameOverError whose ``recorded``
    flag is set; check ``won`` to tell a win from a loss. A guess arriving
    after the end always reports ``won`` as False, the error keeps the
    game's actual result.

    Returns:
        Tuple of (won, error)
    """
    if is_done(game):
        return False, GameOverError(won=game.won, recorded=False)

    guess = normalize_word(word)

    if len(guess) != WORD_LENGTH:
        return False, InvalidLengthError(len(guess), WORD_LENGTH)

    if not game.is_allowed_guess(guess):
        return False, InvalidWordError(guess)

    game.guesses.append(guess)
    game.won = guess == game.answer

    if is_done(game):
        if game.finished_at is None:
            game.finished_at = datetime.now(timezone.utc)
        return game.won, GameOverError(won=game.won, recorded=True)
    return game.won, None


def compute_feedback(guess: str, answer: str, strict_counts: bool = False) -> List[Feedback]:
    """
    Classifies every letter of a guess against the answer.

    By default a letter that is not in place is PRESENT whenever it occurs
    anywhere in the answer, so a repeated guess letter can be PRESENT more
    times than the answer contains it. With ``strict_counts`` each answer
    letter accounts for at most one CORRECT or PRESENT mark, exact matches
    claiming theirs first.

    Raises:
        ValueError: If guess and answer lengths differ
    """
    guess_n = normalize_word(guess)
    answer_n = normalize_word(answer)
    if len(guess_n) != len(answer_n):
        raise ValueError("guess and answer length must match")

    result: List[Feedback] = []
    for i, letter in enumerate(guess_n):
        if letter == answer_n[i]:
            result.append(Feedback.CORRECT)
        elif letter in answer_n:
            result.append(Feedback.PRESENT)
        else:
            result.append(Feedback.ABSENT)

    if not strict_counts:
        return result

    # Letters of the answer not already claimed by an exact match
    remaining: Dict[str, int] = {}
    for i, letter in enumerate(answer_n):
        if result[i] != Feedback.CORRECT:
            remaining[letter] = remaining.get(letter, 0) + 1

    for i, letter in enumerate(guess_n):
        if result[i] != Feedback.PRESENT:
            continue
        if remaining.get(letter, 0) > 0:
            remaining[letter] -= 1
        else:
            result[i] = Feedback.ABSENT

    return result


def game_feedback(game: Game, strict_counts: bool = False) -> List[List[Feedback]]:
    """Feedback rows for every guess recorded so far."""
    return [compute_feedback(guess, game.answer, strict_counts) for guess in game.guesses]
