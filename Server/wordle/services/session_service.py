"""
Session Service

Drives one daily game per connected session: resumes or starts today's
puzzle, feeds input lines to the game engine, persists the game after every
accepted guess and renders the text sent back to the player.
"""

import threading
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional

from ..models.game import Game, GameOverError
from ..models.user import PlayerStats
from ..utils import render
from .dictionary_service import WordBook
from .game_engine import is_done, new_game, submit_guess
from .stats_service import build_stats


@dataclass
class SessionReply:
    """Text for the player plus what happened, for the transport layer."""
    text: str
    finished: bool
    event: Optional[str] = None  # started, resumed, already_played, guess, rejected, won, lost


class PlaySession:
    """
    One player's game for the current connection.

    Not thread-safe; SessionService serializes calls per player.
    """

    def __init__(self,
                 player: str,
                 repository,
                 word_book: WordBook,
                 strict_counts: bool = False,
                 today: Optional[Callable[[], date]] = None):
        self.player = player
        self.repository = repository
        self.word_book = word_book
        self.strict_counts = strict_counts
        self.today = today or date.today
        self.game: Optional[Game] = None
        self.finished = False
        self.last_active = 0.0

    def _history(self) -> List[Game]:
        return self.repository.list_games(self.player, self.word_book.is_allowed_guess)

    def _summary(self, history: List[Game], banner: str = "") -> str:
        return render.render_summary(self.game, build_stats(history), self.strict_counts, banner)

    def _already_played(self, history: List[Game]) -> SessionReply:
        self.finished = True
        return SessionReply(self._summary(history), True, 'already_played')

    def start(self) -> SessionReply:
        """
        Resume today's game or start it.

        A new game is saved right away so that other connections of the same
        player resume it instead of starting their own.
        """
        answer = self.word_book.word_of_the_day(self.today())
        history = self._history()

        if history and history[0].answer == answer:
            self.game = history[0]
            if is_done(self.game):
                return self._already_played(history)
            return SessionReply(render.render_board(self.game, self.strict_counts), False, 'resumed')

        self.game = new_game(answer, self.word_book.is_allowed_guess)
        self.repository.save_game(self.player, self.game)
        return SessionReply(render.render_board(self.game, self.strict_counts), False, 'started')

    def handle_line(self, line: str) -> SessionReply:
        if self.game is None:
            raise RuntimeError("session has not been started")

        if self.finished:
            return SessionReply(self._summary(self._history()), True, 'already_played')

        # Another connection of this player may have moved the game on
        history = self._history()
        if history and history[0].answer == self.game.answer:
            self.game = history[0]
            if is_done(self.game):
                return self._already_played(history)

        won, error = submit_guess(self.game, line)

        if isinstance(error, GameOverError):
            self.finished = True
            self.repository.save_game(self.player, self.game)
            if won:
                banner = render.render_success("Winner!")
            else:
                banner = render.render_warning(self.game.answer)
            return SessionReply(self._summary(self._history(), banner), True, 'won' if won else 'lost')

        if error is not None:
            text = render.render_warning(str(error)) + render.render_board(self.game, self.strict_counts)
            return SessionReply(text, False, 'rejected')

        self.repository.save_game(self.player, self.game)
        return SessionReply(render.render_board(self.game, self.strict_counts), False, 'guess')


class SessionService:
    """
    Registry of live play sessions keyed by connection id.

    Each connection owns its own PlaySession; operations touching the same
    player's history are serialized with a per-player lock, which lives as
    long as the player has an open session.
    """

    def __init__(self, repository, word_book: WordBook, strict_counts: bool = False,
                 today: Optional[Callable[[], date]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.repository = repository
        self.word_book = word_book
        self.strict_counts = strict_counts
        self.today = today
        self.clock = clock
        self._sessions: Dict[str, PlaySession] = {}
        self._player_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def _player_lock(self, player: str) -> threading.Lock:
        with self._lock:
            return self._player_locks.setdefault(player, threading.Lock())

    def open(self, sid: str, player: str) -> SessionReply:
        play_session = PlaySession(player, self.repository, self.word_book,
                                   self.strict_counts, self.today)
        play_session.last_active = self.clock()
        with self._lock:
            self._sessions[sid] = play_session
            player_lock = self._player_locks.setdefault(player, threading.Lock())

        try:
            with player_lock:
                return play_session.start()
        except Exception:
            self.close(sid)
            raise

    def get(self, sid: str) -> Optional[PlaySession]:
        with self._lock:
            return self._sessions.get(sid)

    def handle_line(self, sid: str, line: str) -> SessionReply:
        """
        Raises:
            KeyError: If no session is open for ``sid``
        """
        play_session = self.get(sid)
        if play_session is None:
            raise KeyError(sid)
        play_session.last_active = self.clock()
        with self._player_lock(play_session.player):
            return play_session.handle_line(line)

    def close(self, sid: str) -> bool:
        with self._lock:
            play_session = self._sessions.pop(sid, None)
            if play_session is None:
                return False
            player = play_session.player
            if not any(other.player == player for other in self._sessions.values()):
                self._player_locks.pop(player, None)
            return True

    def idle_sessions(self, idle_timeout: float) -> List[str]:
        """Connection ids with no input for at least ``idle_timeout`` seconds."""
        cutoff = self.clock() - idle_timeout
        with self._lock:
            return [sid for sid, play_session in self._sessions.items()
                    if play_session.last_active <= cutoff]

    def active_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def stats_for(self, player: str) -> PlayerStats:
        return build_stats(self.repository.list_games(player))


# Global service instance
_session_service = None


def get_session_service() -> Optional[SessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service(repository, word_book: WordBook, strict_counts: bool = False,
                               today: Optional[Callable[[], date]] = None) -> SessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = SessionService(repository, word_book, strict_counts, today)
    return _session_service
