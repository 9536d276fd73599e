from __future__ import annotations
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from ..dictionary import DEFAULT_LANGUAGE, DictionaryService
from ..game_logic import GameSession
from ..schemas import SessionState, SubmitResult, WordRejection
from ..words import WordSource

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], Awaitable[None]]

class Game:
    def __init__(self, game_id: str, sio, session: GameSession):
        self.id = game_id
        self.sio = sio
        self.session = session
        # non Socket.IO subscribers, e.g. raw websockets
        self.listeners: List[StateListener] = []

    def to_state(self) -> SessionState:
        return self.session.snapshot(self.id)

    def subscribe(self, listener: StateListener):
        self.listeners.append(listener)

    def unsubscribe(self, listener: StateListener):
        if listener in self.listeners:
            self.listeners.remove(listener)

    async def broadcast_state(self):
        state = self.to_state()
        if self.sio is not None:
            await self.sio.emit('game:state', state.model_dump(by_alias=True), room=self.id)
        for listener in list(self.listeners):
            try:
                await listener(state)
            except Exception as e:
                logger.error(f"Failed to push state of game {self.id}, dropping listener: {e}")
                self.unsubscribe(listener)

    async def reset(self) -> SessionState:
        self.session.reset()
        await self.broadcast_state()
        return self.to_state()

    async def submit(self, word: str, sid: Optional[str] = None) -> SubmitResult:
        # submit() is synchronous, so the state is settled before anything is emitted
        result = self.session.submit(word)
        if result.status == 'rejected':
            await self.notify_rejected(result, sid)
        elif result.status == 'accepted':
            await self.broadcast_state()
        return result

    def rejection(self, result: SubmitResult) -> WordRejection:
        return WordRejection(gameId=self.id, word=result.word, title=result.title or '', message=result.message or '')

    async def notify_rejected(self, result: SubmitResult, sid: Optional[str]):
        # Alert only the Socket.IO client who typed the word; REST and
        # websocket callers get the rejection in their own reply
        if self.sio is None or sid is None:
            return
        await self.sio.emit('word:rejected', self.rejection(result).model_dump(by_alias=True), to=sid)

class GameManager:
    def __init__(self, sio=None, source: Optional[WordSource] = None,
                 dictionary: Optional[DictionaryService] = None, language: str = DEFAULT_LANGUAGE):
        self.sio = sio
        self.source = source
        self.dictionary = dictionary
        self.language = language
        self.games: Dict[str, Game] = {}

    @property
    def ready(self) -> bool:
        return self.source is not None and self.dictionary is not None

    def configure(self, source: WordSource, dictionary: DictionaryService, language: Optional[str] = None):
        self.source = source
        self.dictionary = dictionary
        if language is not None:
            self.language = language
        self.games.clear()

    def get_or_create(self, game_id: str) -> Game:
        if game_id not in self.games:
            if not self.ready:
                raise RuntimeError("GameManager used before word lists were loaded")
            session = GameSession(self.source, self.dictionary, language=self.language)
            session.reset()
            self.games[game_id] = Game(game_id, self.sio, session)
            logger.info("Created game %s", game_id)
        return self.games[game_id]

    def get_state(self, game_id: str) -> SessionState:
        return self.get_or_create(game_id).to_state()

    async def reset(self, game_id: str) -> SessionState:
        game = self.get_or_create(game_id)
        return await game.reset()

    async def submit(self, game_id: str, word: str, sid: Optional[str] = None) -> SubmitResult:
        game = self.get_or_create(game_id)
        return await game.submit(word, sid)

    def remove(self, game_id: str):
        self.games.pop(game_id, None)
