from typing import Dict, Set
from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder
import asyncio
import json
import logging

logger = logging.getLogger(__name__)


class WebSocketManager:
    """Fan-out of store events to connected admin consoles, keyed by channel."""

    def __init__(self):
        # channel -> set(WebSocket)
        self.channels: Dict[str, Set[WebSocket]] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket, channel: str = "admin"):
        await websocket.accept()
        async with self._lock:
            self.channels.setdefault(channel, set()).add(websocket)

    async def disconnect(self, websocket: WebSocket):
        async with self._lock:
            for channel, sockets in list(self.channels.items()):
                sockets.discard(websocket)
                if not sockets:
                    del self.channels[channel]

    def subscribers(self, channel: str = "admin") -> int:
        return len(self.channels.get(channel, ()))

    async def broadcast(self, event_type: str, data, channel: str = "admin") -> int:
        """Send {"type", "data"} to every socket on the channel; returns deliveries."""
        payload = json.dumps({"type": event_type, "data": jsonable_encoder(data)})
        sockets = list(self.channels.get(channel, set()))
        delivered = 0
        for ws in sockets:
            try:
                await ws.send_text(payload)
                delivered += 1
            except Exception:
                # dead socket: drop it, polling clients still see the change
                logger.warning("Dropping admin socket after failed send", exc_info=True)
                await self.disconnect(ws)
        return delivered
