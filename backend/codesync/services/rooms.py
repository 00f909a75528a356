from __future__ import annotations
from collections import defaultdict
from typing import Any, Protocol
import structlog
from starlette.websockets import WebSocketDisconnect

log = structlog.get_logger()

# Event names shared with the browser client
CONNECTED = "connected"
JOIN = "join"
JOINED = "joined"
LEAVE = "leave"
DISCONNECTED = "disconnected"
CODE_CHANGE = "code-change"
SYNC_CODE = "sync-code"
CHAT_MESSAGE = "chat-message"


class Connection(Protocol):
    async def send_json(self, data: Any) -> None: ...


class RoomHub:
    """
    Presence and relay for editor rooms.

    Tracks which connection belongs to which username and which rooms each
    connection sits in, and fans payloads out to room peers. Payloads (code,
    chat text) are opaque; the last broadcast to arrive wins.
    """

    def __init__(self) -> None:
        self.connections: dict[str, Connection] = {}
        self.usernames: dict[str, str] = {}
        # room id -> member socket ids, kept in join order
        self.rooms: dict[str, dict[str, None]] = defaultdict(dict)

    def connect(self, socket_id: str, conn: Connection) -> None:
        self.connections[socket_id] = conn

    def clients(self, room_id: str) -> list[dict[str, Any]]:
        return [
            {"socketId": sid, "username": self.usernames.get(sid)}
            for sid in self.rooms.get(room_id, ())
        ]

    def rooms_of(self, socket_id: str) -> list[str]:
        return [room_id for room_id, members in self.rooms.items() if socket_id in members]

    async def emit(self, socket_id: str, event: str, data: dict[str, Any]) -> None:
        conn = self.connections.get(socket_id)
        if conn is None:
            return
        try:
            await conn.send_json({"event": event, "data": data})
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            # peer went away mid-broadcast; its own disconnect handler cleans up
            log.warning("room_emit_failed", socket_id=socket_id, event_name=event, error=str(e))

    async def broadcast(self, room_id: str, event: str, data: dict[str, Any], exclude: str | None = None) -> None:
        for sid in list(self.rooms.get(room_id, ())):
            if sid != exclude:
                await self.emit(sid, event, data)

    async def join(self, socket_id: str, room_id: str, username: str) -> list[dict[str, Any]]:
        self.usernames[socket_id] = username
        self.rooms[room_id][socket_id] = None
        clients = self.clients(room_id)
        log.info("room_join", room_id=room_id, socket_id=socket_id, username=username, size=len(clients))
        await self.broadcast(room_id, JOINED, {"clients": clients, "username": username, "socketId": socket_id})
        return clients

    async def code_change(self, socket_id: str, room_id: str, code: Any) -> None:
        await self.broadcast(room_id, CODE_CHANGE, {"code": code}, exclude=socket_id)

    async def sync_code(self, target_socket_id: str, code: Any) -> None:
        await self.emit(target_socket_id, CODE_CHANGE, {"code": code})

    async def chat(self, room_id: str, username: Any, message: Any) -> None:
        await self.broadcast(room_id, CHAT_MESSAGE, {"username": username, "message": message})

    async def leave(self, socket_id: str, room_id: str) -> None:
        members = self.rooms.get(room_id)
        if not members or socket_id not in members:
            return
        members.pop(socket_id, None)
        if not members:
            del self.rooms[room_id]
        await self.broadcast(room_id, DISCONNECTED, {
            "socketId": socket_id, "username": self.usernames.get(socket_id),
        })
        log.info("room_leave", room_id=room_id, socket_id=socket_id)

    async def disconnect(self, socket_id: str) -> None:
        username = self.usernames.get(socket_id)
        for room_id in self.rooms_of(socket_id):
            members = self.rooms[room_id]
            members.pop(socket_id, None)
            if not members:
                del self.rooms[room_id]
            await self.broadcast(room_id, DISCONNECTED, {"socketId": socket_id, "username": username})
        self.usernames.pop(socket_id, None)
        self.connections.pop(socket_id, None)
        log.info("room_disconnect", socket_id=socket_id, username=username)

    async def dispatch(self, socket_id: str, message: Any) -> None:
        """Route one inbound frame ``{"event": ..., "data": {...}}``."""
        if not isinstance(message, dict):
            log.warning("room_bad_frame", socket_id=socket_id)
            return
        event = message.get("event")
        data = message.get("data") or {}
        if not isinstance(data, dict):
            log.warning("room_bad_frame", socket_id=socket_id, event_name=event)
            return

        if event == JOIN and data.get("roomId"):
            await self.join(socket_id, str(data["roomId"]), data.get("username"))
        elif event == CODE_CHANGE and data.get("roomId"):
            await self.code_change(socket_id, str(data["roomId"]), data.get("code"))
        elif event == SYNC_CODE and data.get("socketId"):
            await self.sync_code(str(data["socketId"]), data.get("code"))
        elif event == CHAT_MESSAGE and data.get("roomId"):
            await self.chat(str(data["roomId"]), data.get("username"), data.get("message"))
        elif event == LEAVE and data.get("roomId"):
            await self.leave(socket_id, str(data["roomId"]))
        else:
            log.warning("room_unknown_event", socket_id=socket_id, event_name=event)


hub = RoomHub()
