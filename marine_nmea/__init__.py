"""Marine NMEA 0183 decoding: typed records from instrument sentence streams."""

from marine_nmea.nmea import (
    NMEADecoder,
    NMEASentence,
    Position,
    Positioned,
    UnknownTypeTracker,
    compute_checksum,
    position_of,
    split_sentence,
    validate_checksum,
)
from marine_nmea.source import NMEASocketReader, ReplayPacer, ReplayReader

__all__ = [
    "NMEADecoder",
    "NMEASentence",
    "NMEASocketReader",
    "Position",
    "Positioned",
    "ReplayPacer",
    "ReplayReader",
    "UnknownTypeTracker",
    "compute_checksum",
    "position_of",
    "split_sentence",
    "validate_checksum",
]
