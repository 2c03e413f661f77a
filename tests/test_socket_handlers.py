"""
Tests for the Socket.IO event surface.

Handlers are captured from ``sio.on`` registrations and invoked directly,
with a recording transport standing in for the Socket.IO server.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from jukebox_sync.application.interfaces.session_transport import SessionTransport
from jukebox_sync.config.container import create_container
from jukebox_sync.config.settings import Settings
from jukebox_sync.infrastructure.web.socket_handlers import (
    SocketIOTransport,
    register_socket_handlers,
)

SONG = {"id": "s1", "title": "Heroes", "artist": "David Bowie", "duration": 371}


@pytest_asyncio.fixture
async def harness():
    """Returns (handlers by event name, transport mock, container)."""
    settings = Settings(
        _env_file=None,
        database={"url": "sqlite:///:memory:"},
        cleanup={"enabled": False},
    )
    container = create_container(settings)
    transport = AsyncMock(spec=SessionTransport)
    container.set_transport(transport)

    handlers = {}
    sio = MagicMock()
    sio.on.side_effect = lambda event, handler: handlers.__setitem__(event, handler)
    register_socket_handlers(sio, container)

    await container.initialize()
    yield handlers, transport, container
    await container.shutdown()


def sent_to(transport, sid):
    return [c.args[1] for c in transport.send.await_args_list if c.args[0] == sid]


def last_payload(transport, sid, event):
    return [
        c.args[2]
        for c in transport.send.await_args_list
        if c.args[0] == sid and c.args[1] == event
    ][-1]


class TestSocketIOTransport:
    """Tests for the Socket.IO transport adapter."""

    @pytest.mark.asyncio
    async def test_send_emits_to_session(self):
        sio = MagicMock()
        sio.emit = AsyncMock()

        await SocketIOTransport(sio).send("sid-1", "roomState", {"host": "u1"})

        sio.emit.assert_awaited_once_with("roomState", {"host": "u1"}, to="sid-1")


class TestRegistration:
    """Tests for the registered event names."""

    @pytest.mark.asyncio
    async def test_all_events_registered(self, harness):
        handlers, _, _ = harness

        assert set(handlers) == {
            "connect",
            "disconnect",
            "joinRoom",
            "join_room",
            "addSong",
            "voteSong",
            "hostSkip",
            "host_skip",
            "requestSkip",
            "playerSyncPing",
        }
        assert handlers["joinRoom"] is handlers["join_room"]
        assert handlers["hostSkip"] is handlers["host_skip"]


class TestSocketFlow:
    """End-to-end flows through the socket handlers."""

    @pytest.mark.asyncio
    async def test_join_add_vote_skip(self, harness):
        handlers, transport, container = harness
        room, host_id = await container.room_directory.create_room("Party", "Alice")
        code = str(room.code)

        await handlers["joinRoom"]("sid-host", {"roomCode": code, "userId": host_id})
        await handlers["join_room"]("sid-bob", {"roomCode": code.lower(), "userName": "Bob"})
        bob = container.broadcast_gateway.binding_for("sid-bob").user_id

        await handlers["addSong"]("sid-host", {"roomCode": code, "userId": host_id, "song": SONG})
        await handlers["addSong"](
            "sid-bob", {"roomCode": code, "userId": bob, "song": {**SONG, "id": "s2"}}
        )
        await handlers["voteSong"](
            "sid-bob", {"roomCode": code, "songId": "s2", "userId": bob, "vote": 1}
        )

        assert "vote_update" in sent_to(transport, "sid-host")
        assert last_payload(transport, "sid-host", "songVotesUpdated")["voteCount"] == 1

        await handlers["host_skip"]("sid-host", {"roomCode": code, "userId": host_id})

        changed = last_payload(transport, "sid-bob", "trackChanged")
        assert changed["currentTrack"]["id"] == "s2"
        assert last_payload(transport, "sid-bob", "skipResult") == {"success": True}

    @pytest.mark.asyncio
    async def test_request_skip_progress(self, harness):
        handlers, transport, container = harness
        room, host_id = await container.room_directory.create_room("Party", "Alice")
        code = str(room.code)
        await handlers["joinRoom"]("sid-host", {"roomCode": code, "userId": host_id})
        for sid, name in (("sid-b", "Bob"), ("sid-c", "Carol")):
            await handlers["joinRoom"](sid, {"roomCode": code, "userName": name})
        await handlers["addSong"]("sid-host", {"roomCode": code, "userId": host_id, "song": SONG})
        bob = container.broadcast_gateway.binding_for("sid-b").user_id

        await handlers["requestSkip"]("sid-b", {"roomCode": code, "userId": bob})

        assert last_payload(transport, "sid-c", "skipVoteUpdate") == {"votes": 1, "required": 2}

    @pytest.mark.asyncio
    async def test_rejection_goes_to_sender_only(self, harness):
        handlers, transport, container = harness
        room, host_id = await container.room_directory.create_room("Party", "Alice")
        code = str(room.code)
        await handlers["joinRoom"]("sid-host", {"roomCode": code, "userId": host_id})
        await handlers["joinRoom"]("sid-bob", {"roomCode": code, "userName": "Bob"})
        bob = container.broadcast_gateway.binding_for("sid-bob").user_id
        transport.send.reset_mock()

        await handlers["hostSkip"]("sid-bob", {"roomCode": code, "userId": bob})

        assert sent_to(transport, "sid-bob") == ["error"]
        assert last_payload(transport, "sid-bob", "error") == {"message": "Only host can skip"}
        assert sent_to(transport, "sid-host") == []

    @pytest.mark.asyncio
    async def test_join_unknown_room_reports_error(self, harness):
        handlers, transport, _ = harness

        await handlers["joinRoom"]("sid-1", {"roomCode": "ZZZZZZ", "userName": "Bob"})

        assert last_payload(transport, "sid-1", "error") == {"message": "Room not found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("event", "data", "message"),
        [
            ("joinRoom", {"userName": "Bob"}, "Room code is required"),
            ("joinRoom", None, "Room code is required"),
            ("addSong", {"roomCode": "ABC123", "song": SONG}, "Song and userId are required"),
            ("voteSong", {"roomCode": "ABC123", "songId": "s1", "userId": "u1"},
             "songId, userId and numeric vote are required"),
            ("requestSkip", {"roomCode": "ABC123"}, "userId is required"),
        ],
    )
    async def test_missing_fields_report_error(self, harness, event, data, message):
        handlers, transport, _ = harness

        await handlers[event]("sid-1", data)

        assert last_payload(transport, "sid-1", "error") == {"message": message}

    @pytest.mark.asyncio
    async def test_malformed_payload_reports_error(self, harness):
        handlers, transport, _ = harness

        await handlers["voteSong"](
            "sid-1", {"roomCode": "ABC123", "songId": "s1", "userId": "u1", "vote": "up"}
        )

        assert last_payload(transport, "sid-1", "error")["message"].startswith("Invalid payload")

    @pytest.mark.asyncio
    async def test_disconnect_synthesizes_leave(self, harness):
        handlers, transport, container = harness
        room, host_id = await container.room_directory.create_room("Party", "Alice")
        code = str(room.code)
        await handlers["joinRoom"]("sid-host", {"roomCode": code, "userId": host_id})
        await handlers["joinRoom"]("sid-bob", {"roomCode": code, "userName": "Bob"})
        bob = container.broadcast_gateway.binding_for("sid-bob").user_id

        await handlers["disconnect"]("sid-host", "client disconnect")

        assert last_payload(transport, "sid-bob", "roomState")["host"] == bob
        stored = await container.room_directory.resolve(code)
        assert stored.member_ids == [bob]

    @pytest.mark.asyncio
    async def test_player_sync_ping(self, harness):
        handlers, transport, _ = harness

        await handlers["playerSyncPing"]("sid-1", {"timestamp": 42})

        pong = last_payload(transport, "sid-1", "playerSyncPong")
        assert pong["clientTimestamp"] == 42
        assert isinstance(pong["serverTimestamp"], int)
