"""Waypoint navigation sentence decoders: RMB, BWC, BWR and XTE.

These sentences come from a chart plotter or navigation receiver while a
route or "go to" is active, and describe the destination waypoint rather
than the vessel.

RMB Sentence Format:
    $GPRMB,A,0.66,L,003,004,4917.24,N,12309.57,W,001.3,052.5,000.5,V*20
           | |    | |   |   |       | |        | |     |     |     |
           | |    | |   |   |       | |        | |     |     |     +-- Arrival (A=entered, V=not)
           | |    | |   |   |       | |        | |     |     +-- Closing velocity, knots
           | |    | |   |   |       | |        | |     +-- Bearing to destination, true
           | |    | |   |   |       | |        | +-- Range to destination, nm
           | |    | |   |   +-------+-+--------+-- Destination latitude/longitude
           | |    | |   +-- Destination waypoint id
           | |    | +-- Origin waypoint id
           | |    +-- Direction to steer (L/R)
           | +-- Cross track error, nm
           +-- Status (A=active, V=invalid)

BWC / BWR Sentence Format (BWC great circle, BWR rhumb line):
    $GPBWC,220516,5130.02,N,00046.34,W,213.8,T,218.0,M,0004.6,N,EGLM*21
           |      |       | |        | |     | |     | |      | |
           |      |       | |        | |     | |     | |      | +-- Waypoint id
           |      |       | |        | |     | |     | +------+-- Distance, nm
           |      |       | |        | |     | +-----+-- Bearing, magnetic
           |      |       | |        | +-----+-- Bearing, true
           |      +-------+-+--------+-- Waypoint latitude/longitude
           +-- UTC time of observation

XTE Sentence Format:
    $GPXTE,A,A,0.67,L,N*6F
           | | |    | |
           | | |    | +-- Units (N=nautical miles)
           | | |    +-- Direction to steer (L/R)
           | | +-- Cross track error magnitude
           +-+-- Status flags (A=valid)
"""

from collections.abc import Sequence

from marine_nmea.nmea.fields import (
    degrees_from,
    field_at,
    parse_float_field,
    parse_status_field,
    parse_string_field,
    require_fields,
    time_of_day_to_utc,
)
from marine_nmea.nmea.types import Position, RMBData, WaypointBearingData, XTEData

_RMB_FIELD_COUNT = 14
_BEARING_FIELD_COUNT = 13
_XTE_FIELD_COUNT = 6


def decode_rmb(fields: Sequence[str]) -> RMBData:
    """Decode RMB fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _RMB_FIELD_COUNT)

    return RMBData(
        valid=fields[1] == "A",
        cross_track_error_nautical_miles=parse_float_field(fields[2]),
        direction_to_steer=parse_string_field(fields[3]),
        origin_waypoint_id=parse_string_field(fields[4]),
        destination_waypoint_id=parse_string_field(fields[5]),
        destination=Position(
            degrees_from(fields[6], fields[7]),
            degrees_from(fields[8], fields[9]),
        ),
        range_nautical_miles=parse_float_field(fields[10]),
        bearing_true_degrees=parse_float_field(fields[11]),
        closing_velocity_knots=parse_float_field(fields[12]),
        arrival_circle_entered=parse_status_field(fields[13]),
        faa_mode=parse_string_field(field_at(fields, 14)),
    )


def decode_waypoint_bearing(fields: Sequence[str]) -> WaypointBearingData:
    """Decode BWC or BWR fields; both sentences share this layout.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _BEARING_FIELD_COUNT)

    return WaypointBearingData(
        waypoint=Position(
            degrees_from(fields[2], fields[3]),
            degrees_from(fields[4], fields[5]),
            time_of_day_to_utc(fields[1]),
        ),
        bearing_true_degrees=parse_float_field(fields[6]),
        bearing_magnetic_degrees=parse_float_field(fields[8]),
        distance_nautical_miles=parse_float_field(fields[10]),
        waypoint_id=parse_string_field(fields[12]),
        faa_mode=parse_string_field(field_at(fields, 13)),
    )


def decode_xte(fields: Sequence[str]) -> XTEData:
    """Decode XTE fields.

    Raises:
        ValueError: If the sentence has too few fields.
    """
    require_fields(fields, _XTE_FIELD_COUNT)

    return XTEData(
        status=(fields[1], fields[2]),
        cross_track_error=parse_float_field(fields[3]),
        direction_to_steer=parse_string_field(fields[4]),
        units=parse_string_field(fields[5]),
        faa_mode=parse_string_field(field_at(fields, 6)),
    )
