import os
import tempfile
from datetime import date

import pytest

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "wordle-test-logs"))

from wordle import create_app  # noqa: E402
from wordle.config import TestingConfig  # noqa: E402
from wordle.services.dictionary_service import WordBook  # noqa: E402
from wordle.services.history_service import InMemoryGameRepository  # noqa: E402

EPOCH = date(2024, 1, 1)
ANSWERS = ["water", "crane", "apple"]
EXTRA_GUESSES = ["teeth", "salad", "grape", "chili", "onion", "treat", "waste", "otter", "eerie"]


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    def sort(self, keys):
        # Stable sorts applied from the least significant key
        for key, direction in reversed(keys):
            self.documents.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(self.documents)


class FakeCollection:
    """Just enough of a pymongo collection for the history service."""

    def __init__(self):
        self.documents = []
        self.indexes = []
        self._next_id = 1

    @staticmethod
    def _matches(document, query):
        return all(document.get(key) == value for key, value in (query or {}).items())

    def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))

    def replace_one(self, query, replacement, upsert=False):
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                self.documents[index] = {"_id": document["_id"], **replacement}
                return
        if upsert:
            self.documents.append({"_id": self._next_id, **replacement})
            self._next_id += 1

    def find(self, query=None):
        return FakeCursor([dict(d) for d in self.documents if self._matches(d, query)])


@pytest.fixture
def word_book():
    return WordBook(ANSWERS, allowed_guesses=EXTRA_GUESSES, epoch=EPOCH)


@pytest.fixture
def repository():
    return InMemoryGameRepository()


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def app_and_socketio(repository, word_book):
    return create_app(TestingConfig, repository=repository, word_book=word_book, today=lambda: EPOCH)


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def socketio(app_and_socketio):
    return app_and_socketio[1]
