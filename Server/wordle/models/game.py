"""
Game Data Models

Contains the game record, the per-letter feedback enum and the errors a
guess submission can report.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class Feedback(Enum):
    """Letter evaluation status of one guessed letter against the answer."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GameStatus(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class GuessError(Exception):
    """Base class for every rejected or terminal guess outcome."""


class InvalidLengthError(GuessError):
    """The guess does not have the required number of letters."""

    def __init__(self, length: int, expected: int):
        super().__init__(f"word must be {expected} letters")
        self.length = length
        self.expected = expected


class InvalidWordError(GuessError):
    """The guess is not an accepted word."""

    def __init__(self, word: str):
        super().__init__(f"invalid word {word!r}")
        self.word = word


class GameOverError(GuessError):
    """
    No further guesses will be accepted.

    Returned both when a guess arrives after the game ended (``recorded`` is
    False) and together with the guess that ended it (``recorded`` is True).
    ``won`` tells a win from a loss.
    """

    def __init__(self, won: bool, recorded: bool):
        super().__init__("game over")
        self.won = won
        self.recorded = recorded


GuessGate = Callable[[str], bool]


def normalize_word(word: str) -> str:
    """Lowercase a word and strip surrounding whitespace."""
    return (word or "").strip().lower()


def accept_alphabetic(word: str) -> bool:
    """Default dictionary gate: any purely alphabetic word is accepted."""
    return word.isalpha()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Game:
    """One instance of the daily puzzle for one player."""
    answer: str
    guesses: List[str] = field(default_factory=list)
    won: bool = False
    started_at: datetime = field(default_factory=_utcnow)
    finished_at: Optional[datetime] = None
    is_allowed_guess: GuessGate = field(default=accept_alphabetic, repr=False, compare=False)

    def __post_init__(self):
        self.answer = normalize_word(self.answer)
        self.guesses = [normalize_word(guess) for guess in self.guesses]

    def to_dict(self) -> Dict[str, Any]:
        """Serializable snapshot used by the persistence layer."""
        return {
            "answer": self.answer,
            "guesses": list(self.guesses),
            "won": self.won,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], is_allowed_guess: Optional[GuessGate] = None) -> "Game":
        game = cls(
            answer=data["answer"],
            guesses=list(data.get("guesses") or []),
            won=bool(data.get("won", False)),
            started_at=data.get("started_at") or _utcnow(),
            finished_at=data.get("finished_at"),
        )
        if is_allowed_guess is not None:
            game.is_allowed_guess = is_allowed_guess
        return game
