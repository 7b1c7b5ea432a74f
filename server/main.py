"""FastAPI web server streaming decoded NMEA 0183 sentences.

Start with::

    NMEA_HOST=192.168.1.20 NMEA_PORT=10110 uvicorn server.main:app --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` (optionally
``/ws?codes=GGA,RMC``) and receive one JSON
message per decoded sentence, in the order the instruments sent them.
"""

import asyncio
import logging
import os
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from marine_nmea.source import NMEASocketReader
from server.broadcaster import add_subscriber, parse_codes, remove_subscriber
from server.sensors import run_nmea_loop

logger = logging.getLogger(__name__)

_DEFAULT_HOST = "localhost"
_DEFAULT_PORT = 10110
_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


def _reader_endpoint() -> tuple[str, int]:
    host = os.environ.get("NMEA_HOST", _DEFAULT_HOST)
    port = int(os.environ.get("NMEA_PORT", _DEFAULT_PORT))
    return host, port


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
    loop = asyncio.get_running_loop()
    host, port = _reader_endpoint()
    logger.info("Streaming NMEA sentences from %s:%d", host, port)
    reader = NMEASocketReader(host, port)
    executor = ThreadPoolExecutor(max_workers=1)
    loop.run_in_executor(executor, run_nmea_loop, loop, reader)
    try:
        yield
    finally:
        reader.cancel()
        executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, codes: str | None = None) -> None:
    """Stream decoded sentences as JSON to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the reader thread. The connection is closed with code 1001,
    and the client should reconnect, if no sentence arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
        codes: Optional comma-separated sentence codes, e.g.
            ``/ws?codes=GGA,RMC``. Other sentences are not sent to this
            client. All codes are sent when omitted.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    subscriber = add_subscriber(queue, parse_codes(codes))
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(subscriber)
