import asyncio
import logging

import pytest

from wordscramble import main
from wordscramble.managers.game import GameManager
from wordscramble.words import WordSource


@pytest.fixture()
def server(sio, dictionary, monkeypatch):
    monkeypatch.setattr(main, 'sio', sio)
    monkeypatch.setattr(main, 'games', GameManager(sio, WordSource(words=['silkworm']), dictionary))
    asyncio.run(main.connect('abc', {}))
    return sio


def test_connect_starts_empty_session(server):
    assert server.sessions['abc'] == {}


def test_join_game(server):
    asyncio.run(main.join_game('abc', ' g1 '))
    assert server.rooms['abc'] == {'g1'}
    assert server.sessions['abc'] == {'game_id': 'g1'}
    (event, data, to, room), = server.events('game:state')
    assert to == 'abc'
    assert data['rootWord'] == 'silkworm'


@pytest.mark.parametrize('game_id', ['', '   ', None, 42])
def test_join_game_requires_an_id(server, game_id):
    asyncio.run(main.join_game('abc', game_id))
    assert server.rooms == {}
    assert server.emitted == []
    assert asyncio.run(main._current_game_id('abc')) is None


def test_events_before_join_are_ignored(server):
    asyncio.run(main.game_reset('abc'))
    asyncio.run(main.word_submit('abc', {'word': 'silk'}))
    assert server.emitted == []
    assert main.games.games == {}


def test_unknown_client_has_no_game(server):
    assert asyncio.run(main._current_game_id('nobody')) is None


def test_submit_accepted_word(server):
    asyncio.run(main.join_game('abc', 'g1'))
    asyncio.run(main.word_submit('abc', {'word': 'Silk'}))
    event, data, to, room = server.events('game:state')[-1]
    assert room == 'g1'
    assert data['score'] == 1
    assert data['usedWords'] == [{'word': 'silk', 'length': 4}]


def test_submit_rejected_word_alerts_submitter(server):
    asyncio.run(main.join_game('abc', 'g1'))
    asyncio.run(main.word_submit('abc', {'word': 'silkworm'}))
    (event, data, to, room), = server.events('word:rejected')
    assert to == 'abc'
    assert data['title'] == 'Word not accepted'
    assert len(server.events('game:state')) == 1


def test_malformed_submit_is_logged_and_ignored(server, caplog):
    asyncio.run(main.join_game('abc', 'g1'))
    with caplog.at_level(logging.WARNING, logger='wordscramble.main'):
        asyncio.run(main.word_submit('abc', 'silk'))
        asyncio.run(main.word_submit('abc', {'text': 'silk'}))
    assert len(server.events('game:state')) == 1
    assert server.events('word:rejected') == []
    assert 'malformed word:submit' in caplog.text
    assert main.games.get_state('g1').score == 0


def test_reset_after_join(server):
    asyncio.run(main.join_game('abc', 'g1'))
    asyncio.run(main.word_submit('abc', {'word': 'worm'}))
    asyncio.run(main.game_reset('abc'))
    event, data, to, room = server.events('game:state')[-1]
    assert room == 'g1'
    assert data['score'] == 0
    assert data['usedWords'] == []


def test_disconnect_leaves_room(server):
    asyncio.run(main.join_game('abc', 'g1'))
    asyncio.run(main.disconnect('abc'))
    assert server.rooms['abc'] == set()


def test_disconnect_without_game(server):
    asyncio.run(main.disconnect('abc'))
    assert server.rooms == {}
