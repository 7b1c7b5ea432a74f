"""Line sources delivering decoded sentences: TCP client and dump replay."""

from marine_nmea.source.base import NMEAReader, SentenceHandler
from marine_nmea.source.replay import ReplayPacer, ReplayReader
from marine_nmea.source.socket_reader import NMEASocketReader

__all__ = [
    "NMEAReader",
    "NMEASocketReader",
    "ReplayPacer",
    "ReplayReader",
    "SentenceHandler",
]
