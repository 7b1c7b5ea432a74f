"""Wind sentence decoders: MWD and MWV.

MWD Sentence Format:
    $WIMWD,270.0,T,265.0,M,12.5,N,6.4,M*6A
           |     | |     | |    | |   |
           |     | |     | |    | +---+-- Wind speed, m/s
           |     | |     | +----+-- Wind speed, knots
           |     | +-----+-- Wind direction, magnetic
           +-----+-- Wind direction, true

MWV Sentence Format:
    $WIMWV,214.8,R,0.1,K,A*28
           |     | |   | |
           |     | |   | +-- Status (A=valid, V=invalid)
           |     | |   +-- Wind speed units (K/M/N)
           |     | +-- Wind speed
           |     +-- Reference (R=relative, T=true)
           +-- Wind angle, 0 to 360 degrees clockwise from the bow
"""

from collections.abc import Sequence

from marine_nmea.nmea.fields import (
    field_at,
    parse_float_field,
    parse_string_field,
    require_fields,
)
from marine_nmea.nmea.types import MWDData, MWVData

_MWD_FIELD_COUNT = 9
_MWV_FIELD_COUNT = 5


def decode_mwd(fields: Sequence[str]) -> MWDData:
    """Decode MWD fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _MWD_FIELD_COUNT)

    return MWDData(
        direction_true_degrees=parse_float_field(fields[1]),
        direction_magnetic_degrees=parse_float_field(fields[3]),
        speed_knots=parse_float_field(fields[5]),
        speed_meters_per_second=parse_float_field(fields[7]),
    )


def decode_mwv(fields: Sequence[str]) -> MWVData:
    """Decode MWV fields.

    Older wind instruments leave off the status field; such sentences are
    treated as invalid data rather than malformed.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _MWV_FIELD_COUNT)

    return MWVData(
        wind_angle_degrees=parse_float_field(fields[1]),
        reference=parse_string_field(fields[2]),
        wind_speed=parse_float_field(fields[3]),
        wind_speed_units=parse_string_field(fields[4]),
        valid=field_at(fields, 5) == "A",
    )
