"""Common interface of NMEA line sources."""

from collections.abc import Callable, Iterator
from typing import Protocol

from marine_nmea.nmea.types import NMEASentence

SentenceHandler = Callable[[NMEASentence], None]


class NMEAReader(Protocol):
    """A source of decoded sentences, delivered in input order.

    Readers own every wait involved in producing lines (connection
    attempts, reconnect delays, replay pacing); decoding itself never
    blocks. ``cancel()`` may be called from another thread and makes
    ``process`` and iteration return.
    """

    def process(self, handler: SentenceHandler) -> None: ...

    def cancel(self) -> None: ...

    def __iter__(self) -> Iterator[NMEASentence]: ...
