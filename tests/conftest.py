import os
import random
import sys
import pytest

# Ensure the project root (containing the `wordscramble` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wordscramble.dictionary import DictionaryService
from wordscramble.game_logic import GameSession
from wordscramble.words import WordSource

SILKWORM_WORDS = ['silkworm', 'silk', 'worm', 'milk', 'milks', 'works', 'word', 'slow', 'owls', 'wool', 'rows']


@pytest.fixture()
def dictionary():
    return DictionaryService(SILKWORM_WORDS)


@pytest.fixture()
def session(dictionary):
    game = GameSession(WordSource(words=['silkworm']), dictionary)
    game.reset()
    return game


@pytest.fixture()
def word_files(tmp_path):
    start = tmp_path / 'start.txt'
    start.write_text('silkworm\n', encoding='utf-8')
    words = tmp_path / 'dictionary.txt'
    words.write_text('\n'.join(SILKWORM_WORDS) + '\n', encoding='utf-8')
    return str(start), str(words)


@pytest.fixture()
def client(word_files, monkeypatch):
    from fastapi.testclient import TestClient
    from wordscramble import main

    start, words = word_files
    monkeypatch.setattr(main.Config, 'START_WORDS_PATH', start)
    monkeypatch.setattr(main.Config, 'DICTIONARY_PATH', words)
    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture()
def rng():
    return random.Random(1234)


class RecordingServer:
    """Stands in for socketio.AsyncServer: records emits and keeps sessions and rooms in memory."""

    def __init__(self):
        self.emitted = []
        self.sessions = {}
        self.rooms = {}

    async def emit(self, event, data=None, to=None, room=None, **kwargs):
        self.emitted.append((event, data, to, room))

    async def get_session(self, sid, namespace=None):
        return self.sessions.get(sid)

    async def save_session(self, sid, session, namespace=None):
        self.sessions[sid] = session

    async def enter_room(self, sid, room, namespace=None):
        self.rooms.setdefault(sid, set()).add(room)

    async def leave_room(self, sid, room, namespace=None):
        self.rooms.get(sid, set()).discard(room)

    def events(self, name):
        return [e for e in self.emitted if e[0] == name]


@pytest.fixture()
def sio():
    return RecordingServer()
