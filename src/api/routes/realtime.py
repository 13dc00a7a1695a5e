"""
Real-time notification channel.

Clients connect to ``/ws/notifications?token=<jwt>`` and receive the frames
published for their user id.
"""

import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from src.api.utils.jwt import user_id_from_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/notifications")
async def notifications_socket(websocket: WebSocket, token: str = Query("")):
    user_id = user_id_from_token(token) if token else None
    if user_id is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    hub = websocket.app.state.realtime_hub
    channel_key = str(user_id)
    await hub.connect(websocket, channel_key)
    try:
        # Inbound frames are ignored; the loop only waits for the disconnect
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info(f"Realtime client on channel {channel_key} disconnected")
    finally:
        hub.disconnect(websocket, channel_key)
