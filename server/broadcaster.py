"""Subscriber registry and sentence broadcasting for WebSocket clients.

Each client registers a bounded queue together with the sentence codes it
wants. The reader thread broadcasts every decoded sentence once; only the
subscribers interested in its code receive it.
"""

import asyncio
from dataclasses import dataclass

__all__ = [
    "Subscriber",
    "add_subscriber",
    "broadcast_message",
    "parse_codes",
    "remove_subscriber",
    "subscriber_count",
]


@dataclass(eq=False)
class Subscriber:
    """A client queue and the sentence codes it receives.

    Attributes:
        queue: Bounded queue drained by the client's WebSocket task.
        codes: Sentence codes to deliver, e.g. ``{"GGA", "RMC"}``. None
            delivers every code.
    """

    queue: asyncio.Queue[str]
    codes: frozenset[str] | None = None

    def wants(self, sentence_code: str) -> bool:
        return self.codes is None or sentence_code in self.codes


_subscribers: list[Subscriber] = []


def parse_codes(value: str | None) -> frozenset[str] | None:
    """Parse a comma-separated code list such as ``"gga,RMC"``.

    Returns:
        Upper-cased codes, or None (no filtering) if ``value`` is missing
        or lists no codes
    """
    if not value:
        return None
    codes = frozenset(code.strip().upper() for code in value.split(","))
    codes -= {""}
    return codes or None


def add_subscriber(
    queue: asyncio.Queue[str], codes: frozenset[str] | None = None
) -> Subscriber:
    """Register a queue to receive sentences with the given codes."""
    subscriber = Subscriber(queue, codes)
    _subscribers.append(subscriber)
    return subscriber


def remove_subscriber(subscriber: Subscriber) -> None:
    """Unregister a subscriber; unknown subscribers are ignored."""
    if subscriber in _subscribers:
        _subscribers.remove(subscriber)


def subscriber_count() -> int:
    """Number of connected subscribers."""
    return len(_subscribers)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Slow subscribers lose their oldest sentence rather than stall the reader.
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_message(
    message: str, sentence_code: str, loop: asyncio.AbstractEventLoop
) -> None:
    """Hand a formatted sentence to every interested subscriber.

    Queues belong to ``loop``; the actual enqueue is scheduled on it so this
    is safe to call from the reader thread.

    Args:
        message: JSON text sent to the clients.
        sentence_code: Code of the sentence, matched against each
            subscriber's filter.
        loop: Event loop owning the subscriber queues.
    """
    for subscriber in list(_subscribers):
        if subscriber.wants(sentence_code):
            loop.call_soon_threadsafe(_enqueue_message, subscriber.queue, message)
