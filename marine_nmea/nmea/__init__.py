"""NMEA 0183 sentence splitting, validation and decoding."""

from marine_nmea.nmea.checksum import (
    compute_checksum,
    format_checksum,
    validate_checksum,
)
from marine_nmea.nmea.dispatcher import (
    DECODERS,
    PASSTHROUGH_CODES,
    NMEADecoder,
    UnknownTypeTracker,
)
from marine_nmea.nmea.fields import (
    date_time_to_utc,
    degrees_from,
    split_sentence,
    time_of_day_to_utc,
)
from marine_nmea.nmea.types import (
    AISFragmentData,
    DepthData,
    DPTData,
    GGAData,
    GLLData,
    HDGData,
    HDTData,
    MWDData,
    MWVData,
    NMEASentence,
    PassthroughData,
    Position,
    Positioned,
    RawSentence,
    RMBData,
    RMCData,
    SentenceData,
    VHWData,
    VLWData,
    VTGData,
    WaypointBearingData,
    XTEData,
    ZDAData,
    position_of,
)

__all__ = [
    "AISFragmentData",
    "DECODERS",
    "DPTData",
    "DepthData",
    "GGAData",
    "GLLData",
    "HDGData",
    "HDTData",
    "MWDData",
    "MWVData",
    "NMEADecoder",
    "NMEASentence",
    "PASSTHROUGH_CODES",
    "PassthroughData",
    "Position",
    "Positioned",
    "RMBData",
    "RMCData",
    "RawSentence",
    "SentenceData",
    "UnknownTypeTracker",
    "VHWData",
    "VLWData",
    "VTGData",
    "WaypointBearingData",
    "XTEData",
    "ZDAData",
    "compute_checksum",
    "date_time_to_utc",
    "degrees_from",
    "format_checksum",
    "position_of",
    "split_sentence",
    "time_of_day_to_utc",
    "validate_checksum",
]
