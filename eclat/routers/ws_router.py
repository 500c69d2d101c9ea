from fastapi import WebSocket, WebSocketDisconnect, APIRouter
import json

router = APIRouter()


@router.websocket("/ws/admin")
async def websocket_admin(websocket: WebSocket):
    """
    Push channel for the admin console. The server sends {"type", "data"}
    events on every store mutation; clients may send {"action": "ping"}.
    """
    feed = websocket.app.state.feed
    await feed.connect(websocket, "admin")
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                data = json.loads(raw)
            except ValueError:
                await websocket.send_text(json.dumps({"type": "error", "message": "Invalid JSON"}))
                continue
            if isinstance(data, dict) and data.get("action") == "ping":
                await websocket.send_text(json.dumps({"type": "pong"}))
            else:
                await websocket.send_text(json.dumps({"type": "error", "message": "Unsupported action"}))
    except WebSocketDisconnect:
        pass
    finally:
        await feed.disconnect(websocket)
