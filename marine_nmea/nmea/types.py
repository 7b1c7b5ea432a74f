"""NMEA data types for decoded sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas, and instruments occasionally emit garbage in a
       numeric slot. Either case becomes None so a single bad field never
       costs the whole sentence.

    2. One envelope, many payloads: every decoded sentence is an
       ``NMEASentence`` carrying the fields common to all sentences (talker,
       code, checksum) plus a per-code payload dataclass in ``data``.
       ``sentence_code`` is the tag consumers switch on.

    3. Position is a capability, not a base class: ``GGAData``, ``GLLData``
       and ``RMCData`` embed a ``Position`` and expose its coordinates through
       read-only properties, so they satisfy the ``Positioned`` protocol
       without copying data. ``position_of`` is the accessor consumers use.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

# NMEA 2.3 FAA mode indicator meaning "data not valid"
_FAA_MODE_NOT_VALID = "N"

# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


@runtime_checkable
class Positioned(Protocol):
    """Anything that can report a (possibly partial) dated position."""

    @property
    def latitude(self) -> float | None: ...

    @property
    def longitude(self) -> float | None: ...

    @property
    def utc(self) -> datetime | None: ...


@dataclass(frozen=True)
class Position:
    """A position, optionally dated.

    Attributes:
        latitude: Decimal degrees, positive=North. None if absent.
        longitude: Decimal degrees, positive=East. None if absent.
        utc: Timezone-aware UTC instant of the fix, None if absent.
    """

    latitude: float | None
    longitude: float | None
    utc: datetime | None = None

    def __str__(self) -> str:
        latitude = "?" if self.latitude is None else self.latitude
        longitude = "?" if self.longitude is None else self.longitude
        when = "" if self.utc is None else f" {self.utc.isoformat()}"
        return f"({latitude}, {longitude}){when}"


@dataclass(frozen=True)
class RawSentence:
    """One line split into fields, before type-specific decoding.

    Attributes:
        frame: Leading frame character, '$' or '!'.
        talker_id: Two-character talker (e.g. "GP", "II", "AI").
        sentence_code: Three-character sentence code (e.g. "GGA").
        fields: Comma-separated fields. ``fields[0]`` is the address field
            (e.g. "$GPGGA") so that ``fields[n]`` is the n-th documented
            data field. The checksum token is not part of this tuple.
        checksum_hex: Checksum token that followed '*', "" if missing.
        checksum: Parsed checksum, None if missing or not hexadecimal.
    """

    frame: str
    talker_id: str
    sentence_code: str
    fields: tuple[str, ...]
    checksum_hex: str
    checksum: int | None


class _PositionDelegate:
    """Read-only coordinate accessors backed by an embedded ``position``."""

    position: Position

    @property
    def latitude(self) -> float | None:
        return self.position.latitude

    @property
    def longitude(self) -> float | None:
        return self.position.longitude

    @property
    def utc(self) -> datetime | None:
        return self.position.utc


@dataclass
class GGAData(_PositionDelegate):
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        position: Fix position dated with the sentence's time of day.

        fix_quality: GPS quality indicator (always present, defaults to 0):
            0 = Invalid, 1 = GPS fix, 2 = DGPS fix, 3 = PPS fix,
            4 = RTK Fixed, 5 = RTK Float, 6 = Estimated (dead reckoning),
            7 = Manual input, 8 = Simulation

        num_satellites: Number of satellites in use. None if empty.

        horizontal_dilution_of_precision: HDOP. None if empty.

        altitude_meters: Antenna altitude above mean sea level.

        altitude_units: Units of the altitude, normally "M".

        geoid_separation_meters: Height of the geoid above the WGS84
            ellipsoid; negative when mean sea level is below it.

        geoid_separation_units: Units of the separation, normally "M".

        dgps_age_seconds: Seconds since the last differential update,
            None when DGPS is not used.

        dgps_station_id: Differential reference station, None if empty.
    """

    position: Position
    fix_quality: int
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude_meters: float | None
    altitude_units: str | None
    geoid_separation_meters: float | None
    geoid_separation_units: str | None
    dgps_age_seconds: float | None
    dgps_station_id: str | None

    @property
    def valid(self) -> bool:
        """Navigation validity: True only if the receiver reports a fix."""
        return self.fix_quality > 0


@dataclass
class GLLData(_PositionDelegate):
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Attributes:
        position: Position dated with the sentence's time of day.
        valid: True when the status field is 'A' (data valid).
        faa_mode: FAA mode indicator (NMEA 2.3+), None if absent.
    """

    position: Position
    valid: bool
    faa_mode: str | None


@dataclass
class RMCData(_PositionDelegate):
    """Parsed RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        position: Fix position. Dated with the full date and time when the
            date field is usable, otherwise with the time of day only.
        valid: True when the status field is 'A', False for 'V' (warning).
        speed_knots: Speed over ground.
        track_true_degrees: Track made good, degrees true.
        date: Raw ``ddmmyy`` date field, None if empty.
        magnetic_variation_degrees: Variation, negative when westerly.
        faa_mode: FAA mode indicator (NMEA 2.3+), None if absent.
    """

    position: Position
    valid: bool
    speed_knots: float | None
    track_true_degrees: float | None
    date: str | None
    magnetic_variation_degrees: float | None
    faa_mode: str | None


@dataclass
class RMBData:
    """Parsed RMB (Recommended Minimum Navigation Information) sentence.

    Sent by a navigation receiver while a destination waypoint is active.

    Attributes:
        valid: True when the status field is 'A', False for 'V'.
        cross_track_error_nautical_miles: Cross track error magnitude.
        direction_to_steer: 'L' or 'R'.
        origin_waypoint_id: Origin waypoint identifier.
        destination_waypoint_id: Destination waypoint identifier.
        destination: Destination waypoint position (undated).
        range_nautical_miles: Range to destination.
        bearing_true_degrees: Bearing to destination, degrees true.
        closing_velocity_knots: Destination closing velocity.
        arrival_circle_entered: True for 'A', False for 'V', None otherwise.
        faa_mode: FAA mode indicator (NMEA 2.3+), None if absent.
    """

    valid: bool
    cross_track_error_nautical_miles: float | None
    direction_to_steer: str | None
    origin_waypoint_id: str | None
    destination_waypoint_id: str | None
    destination: Position
    range_nautical_miles: float | None
    bearing_true_degrees: float | None
    closing_velocity_knots: float | None
    arrival_circle_entered: bool | None
    faa_mode: str | None


@dataclass
class WaypointBearingData:
    """Parsed BWC (great circle) or BWR (rhumb line) sentence.

    Both sentences share one layout; the envelope's ``sentence_code``
    says which kind of course the bearing and distance refer to.

    Attributes:
        waypoint: Waypoint position, dated with the observation time.
        bearing_true_degrees: Bearing to waypoint, degrees true.
        bearing_magnetic_degrees: Bearing to waypoint, degrees magnetic.
        distance_nautical_miles: Distance to waypoint.
        waypoint_id: Waypoint identifier, None if empty.
        faa_mode: FAA mode indicator (NMEA 2.3+), None if absent.
    """

    waypoint: Position
    bearing_true_degrees: float | None
    bearing_magnetic_degrees: float | None
    distance_nautical_miles: float | None
    waypoint_id: str | None
    faa_mode: str | None


@dataclass
class XTEData:
    """Parsed XTE (Cross-Track Error, Measured) sentence."""

    status: tuple[str, str]
    cross_track_error: float | None
    direction_to_steer: str | None
    units: str | None
    faa_mode: str | None


@dataclass
class ZDAData:
    """Parsed ZDA (Time & Date) sentence.

    Attributes:
        utc: Full UTC instant, None if any date or time part is unusable.
        local_zone_hours: Local zone offset hours, -13..13.
        local_zone_minutes: Local zone offset minutes, same sign as hours.
    """

    utc: datetime | None
    local_zone_hours: int | None
    local_zone_minutes: int | None


@dataclass
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    VTG comes in two layouts. The current one labels each value with a
    unit letter and may end with an FAA mode; the legacy one (pre NMEA 3.01)
    is four bare numbers. Both decode into this type.

    Attributes:
        course_true_degrees: Course over ground relative to true north.
            None when stationary (no heading without movement).

        course_magnetic_degrees: Course over ground, magnetic.

        speed_knots: Ground speed in knots.

        speed_kilometers_per_hour: Ground speed in km/h.

        faa_mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous, 'D' = Differential, 'E' = Estimated,
            'N' = Not valid. None for the legacy layout or older receivers.

        legacy_format: True when the sentence used the legacy layout.

    Example:
        >>> vtg = decode_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,D".split(","))
        >>> vtg.course_true_degrees
        54.7
        >>> vtg.speed_meters_per_second
        2.833...
    """

    course_true_degrees: float | None
    course_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None
    faa_mode: str | None
    legacy_format: bool

    @property
    def speed_meters_per_second(self) -> float | None:
        """Ground speed in m/s, derived from km/h."""
        if self.speed_kilometers_per_hour is None:
            return None
        return (
            self.speed_kilometers_per_hour
            / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND
        )

    @property
    def valid(self) -> bool:
        """Navigation validity: mode must exist and not be 'N'."""
        return self.faa_mode is not None and self.faa_mode != _FAA_MODE_NOT_VALID


@dataclass
class DepthData:
    """Parsed DBT, DBK or DBS depth sentence.

    The three sentences share a layout and differ only in the reference
    point: DBT below transducer, DBK below keel, DBS below surface.
    """

    feet: float | None
    meters: float | None
    fathoms: float | None


@dataclass
class DPTData:
    """Parsed DPT (Depth of Water) sentence.

    Attributes:
        depth_meters: Water depth relative to the transducer.
        offset_meters: Offset from the transducer. Positive is the distance
            from transducer to water line, negative from transducer to keel.
        max_range_meters: Maximum range scale in use (NMEA 3.0+).
    """

    depth_meters: float | None
    offset_meters: float | None
    max_range_meters: float | None

    @property
    def depth_below_surface(self) -> float | None:
        if self.depth_meters is None or self.offset_meters is None:
            return None
        if self.offset_meters <= 0:
            return None
        return self.depth_meters + self.offset_meters

    @property
    def depth_below_keel(self) -> float | None:
        if self.depth_meters is None or self.offset_meters is None:
            return None
        if self.offset_meters >= 0:
            return None
        return self.depth_meters + self.offset_meters


@dataclass
class HDGData:
    """Parsed HDG (Heading - Deviation & Variation) sentence.

    Attributes:
        heading_degrees: Magnetic sensor heading.
        deviation_degrees: Magnetic deviation, negative when westerly.
        variation_degrees: Magnetic variation, negative when westerly.
    """

    heading_degrees: float | None
    deviation_degrees: float | None
    variation_degrees: float | None

    @property
    def true_heading(self) -> float | None:
        """Heading corrected by deviation and variation; absent parts count as 0."""
        if self.heading_degrees is None:
            return None
        return (
            self.heading_degrees
            + (self.deviation_degrees or 0.0)
            + (self.variation_degrees or 0.0)
        )


@dataclass
class HDTData:
    """Parsed HDT (Heading - True) sentence."""

    heading_degrees: float | None

    @property
    def true_heading(self) -> float | None:
        return self.heading_degrees


@dataclass
class VHWData:
    """Parsed VHW (Water Speed and Heading) sentence."""

    heading_true_degrees: float | None
    heading_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None


@dataclass
class VLWData:
    """Parsed VLW (Distance Traveled through Water) sentence.

    Ground distances were added in NMEA 3.0 and are None for older talkers.
    """

    total_water_distance_nautical_miles: float | None
    water_distance_since_reset_nautical_miles: float | None
    total_ground_distance_nautical_miles: float | None
    ground_distance_since_reset_nautical_miles: float | None


@dataclass
class MWDData:
    """Parsed MWD (Wind Direction & Speed) sentence."""

    direction_true_degrees: float | None
    direction_magnetic_degrees: float | None
    speed_knots: float | None
    speed_meters_per_second: float | None


@dataclass
class MWVData:
    """Parsed MWV (Wind Speed and Angle) sentence.

    The stored angle is the raw 0-360 value. 'T' references appear to mean
    true wind angle and 'R' apparent wind angle; both are measured clockwise
    from the bow, hence the ``wind_angle_to_bow`` and ``tack`` helpers.

    Attributes:
        wind_angle_degrees: Wind angle, 0 to 360 degrees.
        reference: 'R' (relative) or 'T' (true).
        wind_speed: Wind speed in ``wind_speed_units``.
        wind_speed_units: 'K' (km/h), 'M' (m/s) or 'N' (knots).
        valid: True when the status field is 'A'.
    """

    wind_angle_degrees: float | None
    reference: str | None
    wind_speed: float | None
    wind_speed_units: str | None
    valid: bool

    @property
    def is_true(self) -> bool:
        return self.reference == "T"

    @property
    def wind_angle_to_bow(self) -> float | None:
        """Angle off the bow on either side, 0 to 180 degrees."""
        if self.wind_angle_degrees is None:
            return None
        if self.wind_angle_degrees > 180:
            return 360 - self.wind_angle_degrees
        return self.wind_angle_degrees

    @property
    def tack(self) -> str | None:
        if self.wind_angle_degrees is None:
            return None
        return "Port" if self.wind_angle_degrees >= 180 else "Starboard"


@dataclass
class AISFragmentData:
    """Envelope of a VDM/VDO AIS fragment.

    The armoured payload is kept as received; decoding its bits is left to
    a dedicated AIS library.

    Attributes:
        fragment_count: Number of fragments in the whole message.
        fragment_number: 1-based index of this fragment.
        message_id: Sequential message id for multi-fragment messages.
        radio_channel: 'A' or 'B' (sometimes '1' or '2').
        payload: Six-bit armoured payload.
        fill_bits: Number of pad bits at the end of the payload.
    """

    fragment_count: int
    fragment_number: int
    message_id: str | None
    radio_channel: str | None
    payload: str
    fill_bits: int | None


@dataclass
class PassthroughData:
    """Recognised sentence kept without field extraction.

    Attributes:
        fields: The data fields as received, address field excluded.
    """

    fields: tuple[str, ...]


SentenceData = (
    GGAData
    | GLLData
    | RMCData
    | RMBData
    | WaypointBearingData
    | XTEData
    | ZDAData
    | VTGData
    | DepthData
    | DPTData
    | HDGData
    | HDTData
    | VHWData
    | VLWData
    | MWDData
    | MWVData
    | AISFragmentData
    | PassthroughData
)


@dataclass
class NMEASentence:
    """A decoded NMEA sentence.

    Attributes:
        talker_id: Two-character talker (e.g. "GP").
        sentence_code: Three-character code; the tag selecting ``data``'s type.
        checksum: Checksum carried by the sentence, None if missing.
        checksum_valid: Whether the carried checksum matched the content.
        data: Payload specific to ``sentence_code``.

    Example:
        >>> sentence = NMEADecoder().decode("$GPHDT,274.07,T*03")
        >>> sentence.sentence_code
        'HDT'
        >>> sentence.data.true_heading
        274.07
    """

    talker_id: str
    sentence_code: str
    checksum: int | None
    checksum_valid: bool
    data: SentenceData

    def __str__(self) -> str:
        return f"{self.talker_id}{self.sentence_code} {self.data}"


def position_of(sentence: NMEASentence | SentenceData) -> Position | None:
    """Return the position a sentence reports about the vessel, if any.

    Accepts either a decoded envelope or a bare payload. Waypoint positions
    (RMB, BWC, BWR) describe somewhere else and are not returned here.
    """
    data = sentence.data if isinstance(sentence, NMEASentence) else sentence
    if isinstance(data, Position):
        return data
    if isinstance(data, Positioned):
        return Position(data.latitude, data.longitude, data.utc)
    return None
