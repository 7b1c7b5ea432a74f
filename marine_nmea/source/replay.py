"""Replay of recorded NMEA dumps at their original pace.

A dump is a text file holding one sentence per line, as captured from a
multiplexer. ``ReplayReader`` decodes it in file order; ``ReplayPacer``
spaces the records out so that the gaps between position fixes match
the gaps between their embedded timestamps.
"""

import logging
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from os import PathLike
from types import TracebackType

from marine_nmea.nmea.dispatcher import NMEADecoder
from marine_nmea.nmea.types import NMEASentence, position_of
from marine_nmea.source.base import SentenceHandler

__all__ = ["ReplayPacer", "ReplayReader"]

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400.0
_HALF_DAY = _SECONDS_PER_DAY / 2


def _time_of_day_of(sentence: NMEASentence) -> float | None:
    """Seconds since UTC midnight of the fix a sentence reports, if any.

    Only the time of day is used. GGA and GLL carry no date at all, and an
    RMC date would put RMC fixes on a different day than the GGA fixes
    recorded alongside them.
    """
    position = position_of(sentence)
    if position is None or position.utc is None:
        return None
    utc = position.utc
    return (
        utc.hour * 3600 + utc.minute * 60 + utc.second + utc.microsecond / 1e6
    )


class ReplayPacer:
    """Delay records so replay time tracks wall-clock time.

    The first timestamped record anchors sentence time to the clock. Each
    later timestamped record is held back until as much wall time has
    passed as sentence time. Records without a timestamp, and all records
    before the anchor, pass straight through.

    Sentence time advances by the difference between consecutive times of
    day. A step backwards by more than half a day is a pass through UTC
    midnight and counts as a step forwards.

    Args:
        clock: Monotonic clock in seconds.
        sleep: Called with the number of seconds to wait.

    Example:
        >>> pacer = ReplayPacer()
        >>> for sentence in pacer.pace(NMEADecoder().decode_lines(lines)):
        ...     handle(sentence)
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._anchor_clock: float | None = None
        self._last_time_of_day = 0.0
        self._sentence_elapsed = 0.0

    def reset(self) -> None:
        """Forget the anchor; the next timestamped record sets a new one."""
        self._anchor_clock = None
        self._last_time_of_day = 0.0
        self._sentence_elapsed = 0.0

    def _advance(self, time_of_day: float) -> None:
        step = time_of_day - self._last_time_of_day
        if step < -_HALF_DAY:
            step += _SECONDS_PER_DAY
        elif step > _HALF_DAY:
            step -= _SECONDS_PER_DAY
        self._sentence_elapsed += step
        self._last_time_of_day = time_of_day

    def delay_for(self, sentence: NMEASentence) -> float:
        """Seconds to wait before emitting ``sentence``, never negative."""
        time_of_day = _time_of_day_of(sentence)
        if time_of_day is None:
            return 0.0

        if self._anchor_clock is None:
            self._anchor_clock = self._clock()
            self._last_time_of_day = time_of_day
            self._sentence_elapsed = 0.0
            return 0.0

        self._advance(time_of_day)
        wall_elapsed = self._clock() - self._anchor_clock
        return max(0.0, self._sentence_elapsed - wall_elapsed)

    def pace(self, sentences: Iterable[NMEASentence]) -> Iterator[NMEASentence]:
        for sentence in sentences:
            delay = self.delay_for(sentence)
            if delay > 0:
                self._sleep(delay)
            yield sentence


class ReplayReader:
    """Read a recorded dump and deliver its sentences in file order.

    By default the records are paced to their original rate; pass a pacer
    built with a no-op ``sleep`` to replay as fast as possible. Waiting
    happens on an event, so ``cancel()`` from another thread interrupts a
    pending delay.

    Args:
        path: Dump file to read.
        decoder: Decoder to use; a fresh ``NMEADecoder`` when omitted.
        pacer: Pacer to use; a real-time ``ReplayPacer`` when omitted.
    """

    def __init__(
        self,
        path: str | PathLike[str],
        decoder: NMEADecoder | None = None,
        pacer: ReplayPacer | None = None,
    ) -> None:
        self.path = path
        self.decoder = decoder if decoder is not None else NMEADecoder()
        self._cancelled = threading.Event()
        self.pacer = pacer if pacer is not None else ReplayPacer(
            sleep=self._cancelled.wait
        )

    def __enter__(self) -> "ReplayReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.cancel()

    def cancel(self) -> None:
        self._cancelled.set()

    def lines(self) -> Iterator[str]:
        """Yield stripped non-empty lines until the file ends or cancel()."""
        logger.info("Replaying %s", self.path)
        with open(self.path, encoding="ascii", errors="ignore") as f:
            for raw in f:
                if self._cancelled.is_set():
                    return
                line = raw.strip()
                if line:
                    yield line
        logger.info("Finished replaying %s", self.path)

    def __iter__(self) -> Iterator[NMEASentence]:
        for sentence in self.pacer.pace(self.decoder.decode_lines(self.lines())):
            if self._cancelled.is_set():
                return
            yield sentence

    def process(self, handler: SentenceHandler) -> None:
        """Call ``handler`` once per decoded sentence, in file order."""
        for sentence in self:
            handler(sentence)
