"""NMEASocketReader: TCP client for NMEA 0183 sentence streams.

Connects to an NMEA multiplexer or instrument gateway that serves raw
sentences over TCP (port 10110 is the customary one) and decodes every
line it receives.

Connection strategy:
    The reader never gives up. A failed connection attempt or a lost
    connection is logged and retried after a fixed delay, indefinitely,
    so a gateway that is switched on after the reader, or a network that
    comes and goes, is picked up without intervention. A connection that
    stays silent for longer than the idle timeout counts as lost. Only
    ``cancel()`` ends the loop.
"""

import contextlib
import logging
import socket
import threading
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

from marine_nmea.nmea.dispatcher import NMEADecoder
from marine_nmea.nmea.types import NMEASentence
from marine_nmea.source.base import SentenceHandler

__all__ = ["NMEASocketReader"]

logger = logging.getLogger(__name__)

# --- connection defaults ------------------------------------------------------

_HOST = "localhost"
_PORT = 10110
_CONNECT_TIMEOUT = 5.0
_IDLE_TIMEOUT = 30.0  # silence longer than this is treated as a dead link
_RECONNECT_DELAY = 2.0


class NMEASocketReader:
    """Read and decode NMEA sentences from a TCP server, reconnecting forever.

    Two consumption patterns are supported:

    Callback, as used by server backends::

        reader = NMEASocketReader("192.168.1.20", 10110)
        reader.process(handle_sentence)  # blocks until reader.cancel()

    Iteration::

        with NMEASocketReader() as reader:
            for sentence in reader:
                print(sentence)

    Changing ``host`` or ``port`` while running drops the current
    connection; the loop then reconnects to the new endpoint.

    Args:
        host: Server host (default: ``"localhost"``).
        port: Server TCP port (default: ``10110``).
        reconnect_delay: Seconds to wait before every reconnection attempt.
        decoder: Decoder to use; a fresh ``NMEADecoder`` when omitted.
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
        reconnect_delay: float = _RECONNECT_DELAY,
        decoder: NMEADecoder | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._reconnect_delay = reconnect_delay
        self.decoder = decoder if decoder is not None else NMEADecoder()
        self._sock: socket.socket | None = None
        self._cancelled = threading.Event()

    def __enter__(self) -> "NMEASocketReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Stop the reader and close any open connection."""
        self.cancel()

    @property
    def host(self) -> str:
        return self._host

    @host.setter
    def host(self, host: str) -> None:
        changed = host != self._host
        self._host = host
        if changed:
            self._drop_connection()

    @property
    def port(self) -> int:
        return self._port

    @port.setter
    def port(self, port: int) -> None:
        changed = port != self._port
        self._port = port
        if changed:
            self._drop_connection()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop reading.

        Sets the cancellation flag, wakes a pending reconnect wait, and
        shuts down the socket so that an in-progress ``readline()``
        returns immediately.
        """
        self._cancelled.set()
        self._drop_connection()

    def _drop_connection(self) -> None:
        sock = self._sock
        if sock is not None:
            with contextlib.suppress(OSError):
                sock.shutdown(socket.SHUT_RDWR)

    def _connect(self) -> IO[Any]:
        """Open a connection and return a binary line stream over it.

        Raises:
            OSError: If the connection cannot be established.
        """
        sock = socket.create_connection(
            (self._host, self._port), timeout=_CONNECT_TIMEOUT
        )
        sock.settimeout(_IDLE_TIMEOUT)
        self._sock = sock
        return sock.makefile("rb")

    def _close(self, stream: IO[Any]) -> None:
        stream.close()
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def _recv_lines(self, stream: IO[Any]) -> Iterator[str]:
        """Yield decoded lines from one connection until it ends.

        Raises:
            EOFError: If the peer disconnected, the link went silent, or
                the socket failed.
        """
        while not self._cancelled.is_set():
            try:
                raw: bytes = stream.readline()
            except TimeoutError as e:
                raise EOFError(f"no data for {_IDLE_TIMEOUT:.0f} seconds") from e
            except OSError as e:
                raise EOFError("connection closed") from e
            if not raw:
                raise EOFError("disconnected by peer")
            line = raw.decode("ascii", errors="ignore").strip()
            if line:
                yield line

    def _wait_before_retry(self) -> None:
        self._cancelled.wait(self._reconnect_delay)

    def lines(self) -> Iterator[str]:
        """Yield raw lines indefinitely, reconnecting as needed.

        Transport errors are logged and never propagate. The generator
        returns once ``cancel()`` has been called.
        """
        while not self._cancelled.is_set():
            logger.info("Attempting to connect %s:%d", self._host, self._port)
            try:
                stream = self._connect()
            except OSError as e:
                logger.warning(
                    "Connection failed, trying again in %.0f seconds: %s",
                    self._reconnect_delay,
                    e,
                )
                self._wait_before_retry()
                continue

            logger.info("Connected to %s:%d", self._host, self._port)
            try:
                yield from self._recv_lines(stream)
            except EOFError as e:
                if not self._cancelled.is_set():
                    logger.warning(
                        "Connection lost (%s), reconnecting in %.0f seconds",
                        e,
                        self._reconnect_delay,
                    )
                    self._wait_before_retry()
            finally:
                self._close(stream)

    def __iter__(self) -> Iterator[NMEASentence]:
        """Yield decoded sentences in arrival order until cancelled."""
        return self.decoder.decode_lines(self.lines())

    def process(self, handler: SentenceHandler) -> None:
        """Call ``handler`` once per decoded sentence until cancelled."""
        for sentence in self:
            handler(sentence)
