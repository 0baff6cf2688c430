"""
History Service

Persists game snapshots per player and returns a player's history,
most-recent-first. A game is identified by (player, answer, started_at), so
saving the same game after every turn updates one record instead of adding
new ones.
"""

import copy
import threading
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.game import Game, GuessGate


def _game_key(player: str, game: Game) -> Dict[str, Any]:
    return {"player": player, "answer": game.answer, "started_at": game.started_at}


class MongoGameRepository:
    """Game history stored in a MongoDB collection, one document per game."""

    def __init__(self, collection, client: Optional[MongoClient] = None):
        self.client = client
        self.games_collection = collection

        self.games_collection.create_index(
            [("player", ASCENDING), ("answer", ASCENDING), ("started_at", ASCENDING)],
            unique=True
        )
        self.games_collection.create_index([("player", ASCENDING), ("started_at", DESCENDING)])

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str = "wordle_game") -> "MongoGameRepository":
        """
        Connect to MongoDB and verify the connection with a ping.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'), tz_aware=True)
        client.admin.command('ping')
        return cls(client[db_name].games, client=client)

    def save_game(self, player: str, game: Game) -> None:
        document = {"player": player, **game.to_dict()}
        self.games_collection.replace_one(_game_key(player, game), document, upsert=True)

    def list_games(self, player: Optional[str] = None,
                   is_allowed_guess: Optional[GuessGate] = None) -> List[Game]:
        """Games for one player (or everyone when ``player`` is None), newest first."""
        query = {"player": player} if player else {}
        cursor = self.games_collection.find(query).sort(
            [("started_at", DESCENDING), ("_id", DESCENDING)]
        )
        return [Game.from_dict(document, is_allowed_guess) for document in cursor]

    def close_connection(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


class InMemoryGameRepository:
    """
    Process-local history store with the same interface as MongoGameRepository.

    Used when no MongoDB URI is configured. Contents are lost on restart.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: List[Tuple[str, Dict[str, Any]]] = []

    def save_game(self, player: str, game: Game) -> None:
        document = game.to_dict()
        with self._lock:
            for index, (owner, stored) in enumerate(self._records):
                if owner == player and stored["answer"] == game.answer \
                        and stored["started_at"] == game.started_at:
                    self._records[index] = (player, document)
                    return
            self._records.append((player, document))

    def list_games(self, player: Optional[str] = None,
                   is_allowed_guess: Optional[GuessGate] = None) -> List[Game]:
        with self._lock:
            documents = [copy.deepcopy(document) for owner, document in reversed(self._records)
                         if player is None or owner == player]
        return [Game.from_dict(document, is_allowed_guess) for document in documents]

    def close_connection(self):
        pass
