"""Background sentence reading loop."""

import asyncio
import logging

from marine_nmea.source import NMEAReader
from server.broadcaster import broadcast_message
from server.formatters import format_sentence_message

__all__ = ["run_nmea_loop"]

logger = logging.getLogger(__name__)


def run_nmea_loop(loop: asyncio.AbstractEventLoop, reader: NMEAReader) -> None:
    """Decode sentences continuously and broadcast them to the event loop.

    The caller owns *reader*. The loop exits when ``reader.cancel()`` is
    called; transport errors are handled by the reader itself.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        reader: Line source producing decoded sentences.
    """
    for sentence in reader:
        broadcast_message(
            format_sentence_message(sentence), sentence.sentence_code, loop
        )
    logger.info("Sentence reader stopped")
