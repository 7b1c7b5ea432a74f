"""Depth sentence decoders: DBT, DBK, DBS and DPT.

DBT / DBK / DBS Sentence Format (below transducer / keel / surface):
    $SDDBT,7.8,f,2.4,M,1.3,F*0D
           |   | |   | |   |
           +---+-+---+-+---+-- Depth in feet, metres, fathoms

DPT Sentence Format:
    $SDDPT,2.4,0.5,100*49
           |   |   |
           |   |   +-- Maximum range scale in use (NMEA 3.0+, optional)
           |   +-- Offset from transducer, metres
           +-- Water depth relative to transducer, metres

A positive DPT offset is the distance from the transducer to the water line,
a negative one the distance from the transducer to the keel.
"""

from collections.abc import Sequence

from marine_nmea.nmea.fields import (
    field_at,
    parse_float_field,
    require_fields,
)
from marine_nmea.nmea.types import DepthData, DPTData

_DEPTH_FIELD_COUNT = 6
_DPT_FIELD_COUNT = 3

# Some Navico units send a negative offset with the sign after the point
_MISPLACED_SIGN = ".-"


def parse_offset_field(value: str) -> float | None:
    """Parse a DPT offset, tolerating a misplaced minus sign.

    Affected firmware writes -1.7 as "1.-7" or "-1.-7", and -0.7 as "0.-7".
    Dropping the stray sign alone would turn "0.-7" into +0.7, so any
    ``x.-y`` form is read as the negative of ``x.y``.

    Example:
        >>> parse_offset_field("0.-7")
        -0.7
        >>> parse_offset_field("1.-7")
        -1.7
        >>> parse_offset_field("-1.7")
        -1.7
    """
    if _MISPLACED_SIGN not in value:
        return parse_float_field(value)

    whole, _, fraction = value.partition(_MISPLACED_SIGN)
    number = parse_float_field(f"{whole}.{fraction}")
    if number is None:
        return None
    return -abs(number)


def decode_depth(fields: Sequence[str]) -> DepthData:
    """Decode DBT, DBK or DBS fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _DEPTH_FIELD_COUNT)

    return DepthData(
        feet=parse_float_field(fields[1]),
        meters=parse_float_field(fields[3]),
        fathoms=parse_float_field(fields[5]),
    )


def decode_dpt(fields: Sequence[str]) -> DPTData:
    """Decode DPT fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _DPT_FIELD_COUNT)

    return DPTData(
        depth_meters=parse_float_field(fields[1]),
        offset_meters=parse_offset_field(fields[2]),
        max_range_meters=parse_float_field(field_at(fields, 3)),
    )
