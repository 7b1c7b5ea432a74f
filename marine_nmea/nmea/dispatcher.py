"""Sentence type dispatch.

``NMEADecoder`` is the entry point for turning raw lines into typed
records. For each line it:

1. Splits the line into fields and checksum (``split_sentence``)
2. Evaluates the checksum; mismatches are only logged unless the decoder
   was created with ``enforce_checksum=True``
3. Looks the three-letter sentence code up in a fixed table of decoders
4. Wraps the decoder's payload in an ``NMEASentence``

Every failure degrades to ``None`` for that line; nothing raises to the
caller. Sentence codes without a decoder are reported once per code
through an ``UnknownTypeTracker`` owned by the decoder.

Recognised codes fall in two tiers: fully decoded ones, and a shallow set
(AAM, APB, BOD, GLC, GSA, GSV, MTW, WPL, XDR) that is accepted without
field extraction and yields ``PassthroughData``.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Sequence

from marine_nmea.nmea.ais import decode_ais_fragment
from marine_nmea.nmea.checksum import validate_checksum
from marine_nmea.nmea.depth import decode_depth, decode_dpt
from marine_nmea.nmea.fields import split_sentence
from marine_nmea.nmea.heading import decode_hdg, decode_hdt, decode_vhw, decode_vlw
from marine_nmea.nmea.position import decode_gga, decode_gll, decode_rmc, decode_zda
from marine_nmea.nmea.types import (
    NMEASentence,
    PassthroughData,
    RawSentence,
    SentenceData,
)
from marine_nmea.nmea.vtg import decode_vtg
from marine_nmea.nmea.waypoint import decode_rmb, decode_waypoint_bearing, decode_xte
from marine_nmea.nmea.wind import decode_mwd, decode_mwv

__all__ = ["DECODERS", "NMEADecoder", "PASSTHROUGH_CODES", "UnknownTypeTracker"]

logger = logging.getLogger(__name__)

Decoder = Callable[[Sequence[str]], SentenceData]


def decode_passthrough(fields: Sequence[str]) -> PassthroughData:
    """Keep a recognised sentence's data fields without interpreting them."""
    return PassthroughData(fields=tuple(fields[1:]))


# Recognised, but not decoded beyond their raw fields
PASSTHROUGH_CODES = frozenset(
    {"AAM", "APB", "BOD", "GLC", "GSA", "GSV", "MTW", "WPL", "XDR"}
)

DECODERS: dict[str, Decoder] = {
    "BWC": decode_waypoint_bearing,
    "BWR": decode_waypoint_bearing,
    "DBK": decode_depth,
    "DBS": decode_depth,
    "DBT": decode_depth,
    "DPT": decode_dpt,
    "GGA": decode_gga,
    "GLL": decode_gll,
    "HDG": decode_hdg,
    "HDT": decode_hdt,
    "MWD": decode_mwd,
    "MWV": decode_mwv,
    "RMB": decode_rmb,
    "RMC": decode_rmc,
    "VDM": decode_ais_fragment,
    "VDO": decode_ais_fragment,
    "VHW": decode_vhw,
    "VLW": decode_vlw,
    "VTG": decode_vtg,
    "XTE": decode_xte,
    "ZDA": decode_zda,
    **{code: decode_passthrough for code in PASSTHROUGH_CODES},
}


class UnknownTypeTracker:
    """Remembers sentence codes that arrived without a decoder.

    The set only grows; its purpose is to answer "has this code been
    reported already" so a talker repeating an unsupported sentence does
    not flood the log. When a new code shows up, the whole accumulated set
    is logged, not just the newcomer.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._lock = threading.Lock()

    @property
    def seen(self) -> frozenset[str]:
        """Snapshot of every unknown code reported so far."""
        with self._lock:
            return frozenset(self._seen)

    def record_if_new(self, code: str) -> bool:
        """Record ``code``; return True and log the set if it was not seen before."""
        with self._lock:
            if code in self._seen:
                return False
            self._seen.add(code)
            seen = sorted(self._seen)
        logger.warning("Unhandled sentence types seen so far: %s", seen)
        return True


class NMEADecoder:
    """Decode raw NMEA lines into ``NMEASentence`` records.

    One instance is meant to live as long as the stream it decodes; it owns
    the set of unknown sentence codes already reported.

    Args:
        enforce_checksum: Drop sentences whose checksum is missing or wrong.
            Off by default: the mismatch is logged at debug level, the
            sentence is still decoded and ``checksum_valid`` is False.
        tracker: Unknown-code tracker to report into. A fresh one is created
            when omitted; pass one in to share it between decoders.

    Example:
        >>> decoder = NMEADecoder()
        >>> sentence = decoder.decode("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        >>> sentence.sentence_code, sentence.data.num_satellites
        ('GGA', 8)
    """

    def __init__(
        self,
        enforce_checksum: bool = False,
        tracker: UnknownTypeTracker | None = None,
    ) -> None:
        self.enforce_checksum = enforce_checksum
        self.tracker = tracker if tracker is not None else UnknownTypeTracker()

    def dispatch(
        self, raw: RawSentence, checksum_valid: bool = True
    ) -> NMEASentence | None:
        """Run the decoder registered for ``raw.sentence_code``.

        Returns:
            NMEASentence, or None if the code is unknown or the decoder
            rejected the fields (too few fields, unparseable required field)
        """
        decoder = DECODERS.get(raw.sentence_code)
        if decoder is None:
            self.tracker.record_if_new(raw.sentence_code)
            return None

        try:
            data = decoder(raw.fields)
        except (ValueError, IndexError) as e:
            logger.warning(
                "Failed to decode %s sentence %s: %s",
                raw.sentence_code,
                ",".join(raw.fields),
                e,
            )
            return None

        return NMEASentence(
            talker_id=raw.talker_id,
            sentence_code=raw.sentence_code,
            checksum=raw.checksum,
            checksum_valid=checksum_valid,
            data=data,
        )

    def decode(self, line: str) -> NMEASentence | None:
        """Decode one raw line.

        Args:
            line: One NMEA sentence with frame character and checksum.
                Trailing CR/LF and surrounding whitespace are ignored.

        Returns:
            NMEASentence, or None if the line is malformed, unrecognised,
            fails to decode, or (when enforcing) fails its checksum
        """
        raw = split_sentence(line)
        if raw is None:
            return None

        checksum_valid = validate_checksum(line)
        if not checksum_valid:
            if self.enforce_checksum:
                logger.warning("Dropping sentence with bad checksum: %r", line.strip())
                return None
            logger.debug("Checksum mismatch: %r", line.strip())

        return self.dispatch(raw, checksum_valid)

    def decode_lines(self, lines: Iterable[str]) -> Iterator[NMEASentence]:
        """Decode a stream of lines, yielding records in input order.

        Lines that produce no record are skipped.
        """
        for line in lines:
            sentence = self.decode(line)
            if sentence is not None:
                yield sentence
