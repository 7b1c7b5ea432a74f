"""Heading and log sentence decoders: HDG, HDT, VHW and VLW.

HDG Sentence Format:
    $HCHDG,98.3,0.0,E,12.6,W*57
           |    |   | |    |
           |    |   | +----+-- Magnetic variation + E/W
           |    +---+-- Magnetic deviation + E/W
           +-- Magnetic sensor heading, degrees

HDT Sentence Format:
    $HEHDT,274.07,T*19
           |      |
           +------+-- Heading, degrees true

VHW Sentence Format:
    $IIVHW,245.1,T,245.1,M,000.01,N,000.01,K*55
           |     | |     | |      | |      |
           |     | |     | |      | +------+-- Speed through water, km/h
           |     | |     | +------+-- Speed through water, knots
           |     | +-----+-- Heading, magnetic
           +-----+-- Heading, true

VLW Sentence Format:
    $IIVLW,10.1,N,3.2,N*7C
           |    | |   | (NMEA 3.0 adds total and trip ground distance)
           |    | +---+-- Water distance since reset, nm
           +----+-- Total cumulative water distance, nm
"""

from collections.abc import Sequence

from marine_nmea.nmea.fields import (
    field_at,
    parse_float_field,
    require_fields,
    signed_degrees,
)
from marine_nmea.nmea.types import HDGData, HDTData, VHWData, VLWData

_HDG_FIELD_COUNT = 6
_HDT_FIELD_COUNT = 2
_VHW_FIELD_COUNT = 9
_VLW_FIELD_COUNT = 5


def decode_hdg(fields: Sequence[str]) -> HDGData:
    """Decode HDG fields.

    Deviation and variation are stored with their E/W sign applied, so the
    derived ``true_heading`` is a plain sum.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _HDG_FIELD_COUNT)

    return HDGData(
        heading_degrees=parse_float_field(fields[1]),
        deviation_degrees=signed_degrees(fields[2], fields[3]),
        variation_degrees=signed_degrees(fields[4], fields[5]),
    )


def decode_hdt(fields: Sequence[str]) -> HDTData:
    """Decode HDT fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _HDT_FIELD_COUNT)

    return HDTData(heading_degrees=parse_float_field(fields[1]))


def decode_vhw(fields: Sequence[str]) -> VHWData:
    """Decode VHW fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _VHW_FIELD_COUNT)

    return VHWData(
        heading_true_degrees=parse_float_field(fields[1]),
        heading_magnetic_degrees=parse_float_field(fields[3]),
        speed_knots=parse_float_field(fields[5]),
        speed_kilometers_per_hour=parse_float_field(fields[7]),
    )


def decode_vlw(fields: Sequence[str]) -> VLWData:
    """Decode VLW fields; the NMEA 3.0 ground distances are optional.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _VLW_FIELD_COUNT)

    return VLWData(
        total_water_distance_nautical_miles=parse_float_field(fields[1]),
        water_distance_since_reset_nautical_miles=parse_float_field(fields[3]),
        total_ground_distance_nautical_miles=parse_float_field(field_at(fields, 5)),
        ground_distance_since_reset_nautical_miles=parse_float_field(
            field_at(fields, 7)
        ),
    )
