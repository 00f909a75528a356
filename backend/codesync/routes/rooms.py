from __future__ import annotations
import json
import uuid
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
import structlog
from codesync.services.rooms import CONNECTED, hub

router = APIRouter(tags=["rooms"])
log = structlog.get_logger()

@router.websocket("/ws")
async def editor_socket(websocket: WebSocket):
    await websocket.accept()
    socket_id = uuid.uuid4().hex
    hub.connect(socket_id, websocket)
    log.info("socket_connected", socket_id=socket_id)
    try:
        await websocket.send_json({"event": CONNECTED, "data": {"socketId": socket_id}})
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                break
            raw = frame.get("text")
            if raw is None:
                # binary frames carry nothing the relay understands
                log.warning("room_bad_frame", socket_id=socket_id, kind="binary")
                continue
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                log.warning("room_bad_frame", socket_id=socket_id, kind="text")
                continue
            await hub.dispatch(socket_id, message)
    except WebSocketDisconnect:
        pass
    finally:
        await hub.disconnect(socket_id)
