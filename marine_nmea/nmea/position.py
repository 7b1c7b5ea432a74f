"""Position fix sentence decoders: GGA, GLL, RMC and ZDA.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | | |
           |      |        | |         | | |  |   |     | |    | | +-- DGPS station id
           |      |        | |         | | |  |   |     | |    | +-- DGPS age (seconds)
           |      |        | |         | | |  |   |     | +----+-- Geoid separation + units
           |      |        | |         | | |  |   +-----+-- Altitude above MSL + units
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-8)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (hhmmss.ss)

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,A*5C
           |       | |        | |      | |
           |       | |        | |      | +-- FAA mode (NMEA 2.3+, optional)
           |       | |        | |      +-- Status (A=valid, V=invalid)
           |       | |        | +-- UTC time
           +-------+-+--------+-- Latitude + N/S, Longitude + E/W

RMC Sentence Format:
    $GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*68
           |      | |       | |        | |     |     |      |     | (FAA mode)
           |      | |       | |        | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |       | |        | |     |     +-- Date (ddmmyy)
           |      | |       | |        | |     +-- Track made good, degrees true
           |      | |       | |        | +-- Speed over ground, knots
           |      | +-------+-+--------+-- Latitude + N/S, Longitude + E/W
           |      +-- Status (A=valid, V=navigation receiver warning)
           +-- UTC time

ZDA Sentence Format:
    $GPZDA,160012.71,11,03,2004,-1,00*7D
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours
           |         +--+--+-- Day, month, 4-digit year
           +-- UTC time
"""

from collections.abc import Sequence
from datetime import datetime

from marine_nmea.nmea.fields import (
    date_time_to_utc,
    degrees_from,
    field_at,
    parse_float_field,
    parse_int_field,
    parse_string_field,
    require_fields,
    signed_degrees,
    time_of_day_to_utc,
)
from marine_nmea.nmea.types import GGAData, GLLData, Position, RMCData, ZDAData

# Address field plus the documented data fields; trailing optional fields
# (DGPS station id, FAA mode) are not counted.
_GGA_FIELD_COUNT = 14
_GLL_FIELD_COUNT = 7
_RMC_FIELD_COUNT = 12
_ZDA_FIELD_COUNT = 5


def decode_gga(fields: Sequence[str]) -> GGAData:
    """Decode GGA fields.

    Maps NMEA field indices to GGAData attributes:
        fields[1]      -> position.utc (time of day)
        fields[2..5]   -> position latitude/longitude
        fields[6]      -> fix_quality (empty means 0, i.e. no fix)
        fields[7]      -> num_satellites
        fields[8]      -> horizontal_dilution_of_precision
        fields[9..10]  -> altitude_meters, altitude_units
        fields[11..12] -> geoid_separation_meters, geoid_separation_units
        fields[13]     -> dgps_age_seconds
        fields[14]     -> dgps_station_id (optional)

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _GGA_FIELD_COUNT)

    # Empty fix quality means no fix, same as 0
    fix_quality = parse_int_field(fields[6]) or 0

    return GGAData(
        position=Position(
            degrees_from(fields[2], fields[3]),
            degrees_from(fields[4], fields[5]),
            time_of_day_to_utc(fields[1]),
        ),
        fix_quality=fix_quality,
        num_satellites=parse_int_field(fields[7]),
        horizontal_dilution_of_precision=parse_float_field(fields[8]),
        altitude_meters=parse_float_field(fields[9]),
        altitude_units=parse_string_field(fields[10]),
        geoid_separation_meters=parse_float_field(fields[11]),
        geoid_separation_units=parse_string_field(fields[12]),
        dgps_age_seconds=parse_float_field(fields[13]),
        dgps_station_id=parse_string_field(field_at(fields, 14)),
    )


def decode_gll(fields: Sequence[str]) -> GLLData:
    """Decode GLL fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _GLL_FIELD_COUNT)

    return GLLData(
        position=Position(
            degrees_from(fields[1], fields[2]),
            degrees_from(fields[3], fields[4]),
            time_of_day_to_utc(fields[5]),
        ),
        valid=fields[6] == "A",
        faa_mode=parse_string_field(field_at(fields, 7)),
    )


def decode_rmc(fields: Sequence[str]) -> RMCData:
    """Decode RMC fields.

    The position is dated with the sentence's own date when present, so
    RMC timestamps do not depend on the local clock. Without a usable date
    the time of day is combined with today's date, as for GGA.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _RMC_FIELD_COUNT)

    utc = date_time_to_utc(fields[9], fields[1]) or time_of_day_to_utc(fields[1])

    return RMCData(
        position=Position(
            degrees_from(fields[3], fields[4]),
            degrees_from(fields[5], fields[6]),
            utc,
        ),
        valid=fields[2] == "A",
        speed_knots=parse_float_field(fields[7]),
        track_true_degrees=parse_float_field(fields[8]),
        date=parse_string_field(fields[9]),
        magnetic_variation_degrees=signed_degrees(fields[10], fields[11]),
        faa_mode=parse_string_field(field_at(fields, 12)),
    )


def _zda_utc(time_value: str, day: str, month: str, year: str) -> datetime | None:
    """Build the ZDA instant, or None if any part is missing or out of range."""
    day_number = parse_int_field(day)
    month_number = parse_int_field(month)
    year_number = parse_int_field(year)
    if day_number is None or month_number is None or year_number is None:
        return None

    time_of_day = time_of_day_to_utc(time_value)
    if time_of_day is None:
        return None

    try:
        return time_of_day.replace(
            year=year_number, month=month_number, day=day_number
        )
    except ValueError:
        return None


def decode_zda(fields: Sequence[str]) -> ZDAData:
    """Decode ZDA fields.

    ZDA carries a four-digit year, so unlike RMC no century is assumed.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _ZDA_FIELD_COUNT)

    return ZDAData(
        utc=_zda_utc(fields[1], fields[2], fields[3], fields[4]),
        local_zone_hours=parse_int_field(field_at(fields, 5)),
        local_zone_minutes=parse_int_field(field_at(fields, 6)),
    )
