import logging
from typing import Dict, Set

from fastapi import WebSocket, WebSocketDisconnect

from src.app.services.realtime_publisher import RealtimePublisher

logger = logging.getLogger(__name__)


class WebSocketHub(RealtimePublisher):
    """In-process registry of WebSocket connections keyed by user id.

    A user may hold several connections (one per open tab); every one of them
    receives the user's events. Frames are ``{"event": ..., "data": ...}``.
    """

    def __init__(self):
        self.connections: Dict[str, Set[WebSocket]] = {}

    async def connect(self, websocket: WebSocket, channel_key: str) -> None:
        """Accept and register a websocket connection."""
        await websocket.accept()
        self.connections.setdefault(channel_key, set()).add(websocket)
        logger.info(f"Realtime client connected on channel {channel_key}")

    def disconnect(self, websocket: WebSocket, channel_key: str) -> None:
        """Unregister a websocket connection."""
        sockets = self.connections.get(channel_key)
        if sockets is None:
            return
        sockets.discard(websocket)
        if not sockets:
            del self.connections[channel_key]

    def connection_count(self, channel_key: str) -> int:
        return len(self.connections.get(channel_key, ()))

    async def publish(self, channel_key: str, event: str, payload: dict) -> None:
        for websocket in list(self.connections.get(channel_key, ())):
            try:
                await websocket.send_json({"event": event, "data": payload})
            except (WebSocketDisconnect, RuntimeError, OSError) as exc:
                # Connection closed under us
                logger.warning(
                    f"Dropping {event} for channel {channel_key}: {exc!r}"
                )
                self.disconnect(websocket, channel_key)
