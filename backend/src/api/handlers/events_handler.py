"""
Events Handler

WebSocket stream of note analysis results.

Protocol:
=========
    connect  ws://host/ws/notes?token=<jwt>
             invalid/missing token → closed with 1008 (policy violation)
    server → {"event": "note.ready", "note_id": "...", "status": "READY", ...}
    client → binary frames are ignored
    client → "ping"
    server → {"event": "pong"}

Browsers cannot set an Authorization header on a WebSocket handshake, so
the access token travels in the query string.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from src.shared.adapters.event_broker import event_broker
from src.shared.core.exceptions import PrimerException
from src.shared.core.logging import get_logger
from src.shared.db import AsyncSessionLocal
from src.shared.models.user import User
from src.shared.services.auth_service import AuthService


logger = get_logger("ws")

router = APIRouter()


async def _authenticate(token: Optional[str]) -> Optional[User]:
    async with AsyncSessionLocal() as session:
        try:
            return await AuthService(session).resolve_token(token)
        except PrimerException as e:
            logger.info("WebSocket rejected", reason=e.message)
            return None


async def _forward_events(websocket: WebSocket, queue: asyncio.Queue) -> None:
    while True:
        event = await queue.get()
        await websocket.send_json(event)


@router.websocket("/ws/notes")
async def note_events(
    websocket: WebSocket,
    token: Optional[str] = Query(None),
):
    """Push the caller's note events until the client disconnects."""
    user = await _authenticate(token)
    if user is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    logger.info("WebSocket connected", user_id=str(user.id))

    async with event_broker.subscribe(user.id) as queue:
        forwarder = asyncio.create_task(_forward_events(websocket, queue))
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE))
                # binary frames are ignored
                text = message.get("text")
                if text is not None and text.strip().lower() == "ping":
                    await websocket.send_json({"event": "pong"})
        except WebSocketDisconnect:
            logger.info("WebSocket disconnected", user_id=str(user.id))
        finally:
            forwarder.cancel()
            try:
                await forwarder
            except (asyncio.CancelledError, WebSocketDisconnect, RuntimeError):
                pass
