"""
Dictionary Service

Answers "is this a legal guess?" and picks the word of the day from the
bundled word database.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from ..config.game_settings import WORD_LENGTH, WORD_LIST
from ..models.game import normalize_word


class WordBook:
    """
    Word database backing the dictionary gate and the daily answer rotation.

    Answers rotate once per calendar day in list order, starting from the
    first answer on ``epoch``.
    """

    def __init__(self,
                 answers: Iterable[str],
                 allowed_guesses: Optional[Iterable[str]] = None,
                 epoch: Union[date, str] = date(2021, 6, 19)):
        self.answers: List[str] = [normalize_word(word) for word in answers]
        if not self.answers:
            raise ValueError("Answer list cannot be empty")

        guesses = self.answers if allowed_guesses is None else allowed_guesses
        self.allowed = {normalize_word(word) for word in guesses}
        # Every answer must be guessable
        self.allowed.update(self.answers)

        if isinstance(epoch, str):
            epoch = date.fromisoformat(epoch)
        self.epoch = epoch

    def is_allowed_guess(self, word: str) -> bool:
        word = normalize_word(word)
        return len(word) == WORD_LENGTH and word in self.allowed

    def word_of_the_day(self, day: Optional[Union[date, datetime]] = None) -> str:
        """Returns the answer for the given day (today when omitted)."""
        if day is None:
            day = date.today()
        elif isinstance(day, datetime):
            day = day.date()
        return self.answers[(day - self.epoch).days % len(self.answers)]

    def puzzle_number(self, day: Optional[date] = None) -> int:
        """Days elapsed since the epoch; puzzle #0 is the epoch day itself."""
        return ((day or date.today()) - self.epoch).days


def default_word_book(epoch: Union[date, str] = date(2021, 6, 19)) -> WordBook:
    """WordBook over the bundled word list."""
    return WordBook(WORD_LIST, epoch=epoch)
