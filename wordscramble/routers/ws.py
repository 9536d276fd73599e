import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from wordscramble.managers.game import GameManager

logger = logging.getLogger(__name__)


def create_router(games: GameManager) -> APIRouter:
    router = APIRouter()

    @router.websocket("/ws/{game_id}")
    async def websocket_endpoint(websocket: WebSocket, game_id: str):
        await websocket.accept()
        game = games.get_or_create(game_id)

        async def push_state(state):
            await websocket.send_json({"type": "state", **state.model_dump(by_alias=True)})

        # Receives every state change of the game, whichever channel caused it
        game.subscribe(push_state)
        try:
            # Send initial state to player
            await push_state(game.to_state())
            while True:
                try:
                    data = await websocket.receive_json()
                except ValueError:
                    logger.warning("Ignoring non-JSON frame on %s", game_id)
                    continue
                kind = data.get("type") if isinstance(data, dict) else None
                if kind == "reset":
                    await game.reset()
                elif kind == "submit" and isinstance(data.get("word"), str):
                    result = await game.submit(data["word"])
                    if result.status == "rejected":
                        await websocket.send_json({"type": "rejected", **game.rejection(result).model_dump(by_alias=True)})
                else:
                    logger.warning("Ignoring malformed message on %s: %r", game_id, data)
        except WebSocketDisconnect:
            pass
        finally:
            game.unsubscribe(push_state)

    return router
