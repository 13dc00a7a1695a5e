import pytest
from fastapi import WebSocketDisconnect

from src.adapter.services.websocket_hub import WebSocketHub


class RecordingSocket:
    def __init__(self, broken: bool = False):
        self.broken = broken
        self.accepted = False
        self.frames = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, frame):
        if self.broken:
            raise WebSocketDisconnect(code=1006)
        self.frames.append(frame)


@pytest.mark.asyncio
async def test_publish_reaches_every_connection_of_the_user():
    hub = WebSocketHub()
    tab_one, tab_two, other = RecordingSocket(), RecordingSocket(), RecordingSocket()
    await hub.connect(tab_one, "user-1")
    await hub.connect(tab_two, "user-1")
    await hub.connect(other, "user-2")

    await hub.publish("user-1", "notification", {"title": "Task Assigned to You"})

    assert tab_one.accepted and tab_two.accepted
    expected = {"event": "notification", "data": {"title": "Task Assigned to You"}}
    assert tab_one.frames == [expected]
    assert tab_two.frames == [expected]
    assert other.frames == []


@pytest.mark.asyncio
async def test_publish_without_connections_is_noop():
    hub = WebSocketHub()

    await hub.publish("nobody", "notification", {})

    assert hub.connection_count("nobody") == 0


@pytest.mark.asyncio
async def test_broken_connection_is_dropped():
    hub = WebSocketHub()
    healthy, broken = RecordingSocket(), RecordingSocket(broken=True)
    await hub.connect(healthy, "user-1")
    await hub.connect(broken, "user-1")

    await hub.publish("user-1", "notification", {"id": 1})

    assert healthy.frames == [{"event": "notification", "data": {"id": 1}}]
    assert hub.connection_count("user-1") == 1


def test_disconnect_forgets_empty_channels():
    hub = WebSocketHub()
    socket = RecordingSocket()
    hub.connections["user-1"] = {socket}

    hub.disconnect(socket, "user-1")
    hub.disconnect(socket, "user-1")

    assert "user-1" not in hub.connections
