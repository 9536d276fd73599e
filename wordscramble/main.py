from __future__ import annotations
import logging
from contextlib import asynccontextmanager

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .config import Config, configure_logging
from .dictionary import DictionaryService
from .errors import ResourceMissing
from .managers.game import GameManager
from .routers.ws import create_router
from .schemas import SessionState, SubmitRequest, SubmitResponse, WordValidation
from .words import WordSource

logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(
    async_mode='asgi',
    cors_allowed_origins='*' if '*' in Config.CORS_ORIGINS else Config.CORS_ORIGINS,
)

games = GameManager(sio)

@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(Config.LOG_LEVEL)
    # Both word lists are required; a failure here aborts startup
    try:
        source = WordSource(Config.START_WORDS_PATH, fallback=Config.FALLBACK_ROOT)
        source.load()
        if Config.DICTIONARY_PATH:
            dictionary = DictionaryService.from_file(Config.DICTIONARY_PATH, language=Config.LANGUAGE)
        else:
            dictionary = DictionaryService.from_wordfreq(Config.LANGUAGE, Config.DICTIONARY_SIZE)
    except ResourceMissing as exc:
        logger.error("Startup failed: %s", exc)
        raise
    games.configure(source, dictionary, language=Config.LANGUAGE)
    yield

app = FastAPI(title="Word Scramble Server", version="0.1.0", lifespan=lifespan)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(create_router(games))

# REST Endpoints
@app.get('/games/{game_id}', response_model=SessionState)
async def get_game(game_id: str):
    return games.get_state(game_id)

@app.post('/games/{game_id}/reset', response_model=SessionState)
async def reset_game(game_id: str):
    return await games.reset(game_id)

@app.post('/games/{game_id}/words', response_model=SubmitResponse)
async def submit_word(game_id: str, body: SubmitRequest):
    result = await games.submit(game_id, body.word)
    return SubmitResponse(result=result, state=games.get_state(game_id))

# Dictionary validation REST endpoint
@app.get('/dict/validate', response_model=WordValidation)
async def validate_word(word: str):
    valid = games.dictionary.is_valid(word, games.language)
    return WordValidation(word=word.strip().lower(), valid=valid)

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.save_session(sid, {})

@sio.event
async def disconnect(sid):
    sess = await sio.get_session(sid) or {}
    game_id = sess.get('game_id')
    if game_id:
        await sio.leave_room(sid, game_id)

async def _current_game_id(sid):
    sess = await sio.get_session(sid)
    return sess.get('game_id') if sess else None

@sio.on('join-game')
async def join_game(sid, game_id: str):
    if not isinstance(game_id, str) or not game_id.strip():
        return
    game_id = game_id.strip()
    await sio.enter_room(sid, game_id)
    sess = await sio.get_session(sid) or {}
    await sio.save_session(sid, { **sess, 'game_id': game_id })
    # Send immediate state to the joining client
    await sio.emit('game:state', games.get_state(game_id).model_dump(by_alias=True), to=sid)

@sio.on('game:reset')
async def game_reset(sid):
    game_id = await _current_game_id(sid)
    if not game_id:
        return
    await games.reset(game_id)

@sio.on('word:submit')
async def word_submit(sid, payload):
    game_id = await _current_game_id(sid)
    if not game_id:
        return
    try:
        request = SubmitRequest.model_validate(payload)
    except ValidationError:
        logger.warning("Ignoring malformed word:submit from %s: %r", sid, payload)
        return
    await games.submit(game_id, request.word, sid=sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordscramble.main:application --reload --host 0.0.0.0 --port 8000
