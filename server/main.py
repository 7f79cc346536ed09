"""FastAPI web server streaming decoded NMEA records.

Start with::

    NMEA_SOURCE=/dev/ttyACM0 uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive a stream of
JSON messages: one message per decoded sentence (``"type": "RMC"``,
``"type": "GGA"``, ...) and one ``"type": "satellites"`` message per
completed GSV round. ``GET /satellites`` returns the last completed
satellites-in-view list.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from server.broadcaster import add_subscriber, remove_subscriber, subscriber_count
from server.config import Config
from server.stream import latest_satellites, run_nmea_source

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = Config.QUEUE_MAX_SIZE
_TIMEOUT_SECONDS = Config.TIMEOUT_SECONDS


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=Config.LOG_LEVEL)
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    loop.run_in_executor(executor, run_nmea_source, loop, Config.NMEA_SOURCE)
    yield
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.get("/satellites")
async def satellites() -> dict[str, Any]:
    """Return the satellites of the last completed GSV round.

    The body is the same ``satellites`` message the WebSocket stream
    carries, so ``in_view`` is the total the receiver declared.
    """
    return latest_satellites()


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded NMEA records as JSON to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the NMEA thread. The connection closes with code 1001, and the
    client should reconnect, if no message arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    add_subscriber(queue)
    try:
        await websocket.accept()
        logger.info("WebSocket client connected (%d subscribers)", subscriber_count())
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(queue)
