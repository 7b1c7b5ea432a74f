"""NMEA field parsing utilities.

This module provides utilities for splitting a raw NMEA line into fields and
for parsing individual fields. NMEA fields are comma-separated and may be
empty (consecutive commas indicate missing data). These utilities handle empty
or malformed fields gracefully by returning None, allowing callers to
distinguish "no data" from "zero value".

Shared encodings handled here:
    - Degree-minute coordinates (DDDMM.MMMM) with a hemisphere letter
    - Truncated time of day (hhmmss[.sss]) with or without a ddmmyy date
"""

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime, timezone

from marine_nmea.nmea.checksum import FRAME_CHARACTERS
from marine_nmea.nmea.types import RawSentence

logger = logging.getLogger(__name__)

# Two-digit years in RMC dates are read as 20yy. Dates before 2000 or after
# 2099 cannot be represented by the sentence and come out a century off.
_CENTURY = 2000

# Frame character + 2-character talker + 3-character code. Shorter address
# fields cannot name a sentence and are rejected as structural errors.
_TALKER_SLICE = slice(1, 3)
_CODE_SLICE = slice(3, 6)
_MINIMUM_ADDRESS_LENGTH = 6

_SOUTH_WEST = ("S", "W")


def require_fields(fields: Sequence[str], count: int) -> None:
    """Raise ValueError unless ``fields`` holds at least ``count`` entries.

    ``count`` includes the address field, so a sentence with N documented
    data fields needs N + 1.
    """
    if len(fields) < count:
        raise ValueError(
            f"{fields[0] if fields else 'sentence'} has {len(fields) - 1} "
            f"data fields, expected at least {count - 1}"
        )


def field_at(fields: Sequence[str], index: int) -> str:
    """Return ``fields[index]``, or "" for an optional field that is missing.

    Used for trailing fields later NMEA revisions appended (FAA mode,
    NMEA 3.0 extensions) which older talkers simply leave off.
    """
    if index < len(fields):
        return fields[index]
    return ""


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty or unparseable

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Similar to parse_float_field but for integer values like satellite count
    or fix quality indicators.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Used for fields like waypoint identifiers or mode indicators where the
    raw string value is meaningful.
    """
    if not value:
        return None
    return value


def parse_status_field(value: str) -> bool | None:
    """Parse an A/V status field: 'A' is True, 'V' is False, anything else None."""
    if value == "A":
        return True
    if value == "V":
        return False
    return None


def degrees_from(value: str, hemisphere: str) -> float | None:
    """Convert an NMEA coordinate (DDDMM.MMMM) to signed decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator. The
    integer part of value/100 is whole degrees and the remainder is minutes.
    Sign convention:
    - North/East = positive
    - South/West = negative

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        hemisphere: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees, or None if the value is empty or not numeric, or
        the hemisphere is not exactly one character

    Example:
        >>> degrees_from("4916.45", "N")
        49.274166...  # 49° + 16.45'/60
        >>> degrees_from("12311.12", "W")
        -123.185333...  # negative for West
    """
    if not value or len(hemisphere) != 1:
        return None

    number = parse_float_field(value)
    if number is None or not math.isfinite(number):
        return None

    # Truncates toward zero so a signed value keeps its minutes
    degrees = int(number / 100)
    minutes = number - degrees * 100
    decimal_degrees = degrees + minutes / 60.0

    if hemisphere in _SOUTH_WEST:
        return -decimal_degrees
    return decimal_degrees


def signed_degrees(value: str, direction: str) -> float | None:
    """Parse plain degrees carrying an E/W direction, westerly negative.

    Used for magnetic deviation and variation, which are not in
    degree-minute format.

    Example:
        >>> signed_degrees("3.1", "W")
        -3.1
    """
    number = parse_float_field(value)
    if number is None:
        return None
    if direction == "W":
        return -number
    return number


def _split_time(value: str) -> tuple[int, int, int, int] | None:
    """Split hhmmss[.sss] into hour, minute, second and microsecond.

    The digits after the decimal point are a fraction of a second, so both
    "123519.5" and "123519.500" mean 500 milliseconds. Some decoders read
    them as a whole number of milliseconds instead, which turns ".50" into
    50 ms; that reading is not used here.
    """
    if len(value) < 6:
        return None
    try:
        hour = int(value[0:2])
        minute = int(value[2:4])
        second = int(value[4:6])
        fraction = value[7:]
        microsecond = 0
        if fraction:
            milliseconds = round(float(f"0.{fraction}") * 1000)
            microsecond = min(milliseconds, 999) * 1000
    except (ValueError, OverflowError):
        return None
    return hour, minute, second, microsecond


def time_of_day_to_utc(value: str, today: date | None = None) -> datetime | None:
    """Convert a time-of-day field to a UTC instant on today's date.

    Time-only sentences carry no date, so the current UTC calendar date is
    assumed. Around midnight this can be a day off; sentences that carry a
    date should go through ``date_time_to_utc`` instead.

    Args:
        value: Time in hhmmss[.sss] format (e.g., "123519.00")
        today: Date to combine with, defaults to the current UTC date

    Returns:
        Timezone-aware datetime, or None if the field is empty or invalid

    Example:
        >>> time_of_day_to_utc("123519.250", date(2024, 3, 1))
        datetime.datetime(2024, 3, 1, 12, 35, 19, 250000, tzinfo=datetime.timezone.utc)
    """
    parts = _split_time(value)
    if parts is None:
        return None

    if today is None:
        today = datetime.now(timezone.utc).date()

    hour, minute, second, microsecond = parts
    try:
        return datetime(
            today.year,
            today.month,
            today.day,
            hour,
            minute,
            second,
            microsecond,
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def date_time_to_utc(date_value: str, time_value: str) -> datetime | None:
    """Combine a ddmmyy date field and a hhmmss[.sss] time field.

    The two-digit year is read as 2000 + yy.

    Args:
        date_value: Date in ddmmyy format (e.g., "230394")
        time_value: Time in hhmmss[.sss] format (e.g., "123519")

    Returns:
        Timezone-aware datetime, or None if either part is empty or invalid

    Example:
        >>> date_time_to_utc("230394", "123519")
        datetime.datetime(2094, 3, 23, 12, 35, 19, tzinfo=datetime.timezone.utc)
    """
    if len(date_value) != 6:
        return None
    parts = _split_time(time_value)
    if parts is None:
        return None

    hour, minute, second, microsecond = parts
    try:
        return datetime(
            _CENTURY + int(date_value[4:6]),
            int(date_value[2:4]),
            int(date_value[0:2]),
            hour,
            minute,
            second,
            microsecond,
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def split_sentence(line: str) -> RawSentence | None:
    """Split one raw NMEA line into its fields and checksum.

    The checksum arrives glued to the last data field ("...,M,,*47"); it is
    moved into its own slot so decoders can index fields by their documented
    positions.

    Args:
        line: One NMEA line, e.g. "$GPHDT,274.07,T*03". Surrounding
            whitespace (including CR/LF) is ignored.

    Returns:
        RawSentence, or None if the line is not shaped like a sentence:
        - empty, or no '$'/'!' frame character
        - fewer than two comma-separated fields
        - address field too short to hold a talker and sentence code

    Example:
        >>> raw = split_sentence("$GPHDT,274.07,T*03")
        >>> raw.talker_id, raw.sentence_code, raw.fields, raw.checksum
        ('GP', 'HDT', ('$GPHDT', '274.07', 'T'), 3)
    """
    line = line.strip()
    fields = line.split(",")

    if (
        not line.startswith(FRAME_CHARACTERS)
        or len(fields) < 2
        or len(fields[0]) < _MINIMUM_ADDRESS_LENGTH
    ):
        logger.warning("Sentence error: %r", line)
        return None

    last_field, _, checksum_hex = fields[-1].partition("*")
    fields[-1] = last_field

    checksum = None
    if checksum_hex:
        try:
            checksum = int(checksum_hex, 16)
        except ValueError:
            checksum = None

    address = fields[0]
    return RawSentence(
        frame=address[0],
        talker_id=address[_TALKER_SLICE],
        sentence_code=address[_CODE_SLICE],
        fields=tuple(fields),
        checksum_hex=checksum_hex,
        checksum=checksum,
    )
