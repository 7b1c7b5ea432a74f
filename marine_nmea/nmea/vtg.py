"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides course and speed over ground.

VTG Sentence Format (NMEA 3.01 and later):
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Course (magnetic north, degrees)
           +-----+-- Course (true north, degrees)

Legacy VTG Sentence Format (older NMEA 0183):
    $GPVTG,054.7,034.4,005.5,010.2*54
           |     |     |     |
           |     |     |     +-- Speed in km/h
           |     |     +-- Speed in knots
           |     +-- Course (magnetic north, degrees)
           +-- Course (true north, degrees)

The two layouts are told apart by the second field, which is the literal
'T' only in the newer one. The discriminant is checked before any other
field position is assumed.

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the course may be empty (no heading when not moving).
"""

from collections.abc import Sequence

from marine_nmea.nmea.fields import (
    field_at,
    parse_float_field,
    parse_string_field,
    require_fields,
)
from marine_nmea.nmea.types import VTGData

# Literal marking the newer layout in fields[2]
_TRUE_MARKER = "T"

# Address field plus data fields; the FAA mode is optional
_FIELD_COUNT = 9
_LEGACY_FIELD_COUNT = 5


def _is_current_format(fields: Sequence[str]) -> bool:
    """Return True if the sentence uses the labelled (NMEA 3.01+) layout.

    Raises:
        IndexError: If the discriminant field is missing altogether.
    """
    return fields[2] == _TRUE_MARKER


def _decode_current(fields: Sequence[str]) -> VTGData:
    """Map the labelled layout.

        fields[1] -> course_true_degrees
        fields[3] -> course_magnetic_degrees
        fields[5] -> speed_knots
        fields[7] -> speed_kilometers_per_hour
        fields[9] -> faa_mode (if present)
    """
    require_fields(fields, _FIELD_COUNT)

    return VTGData(
        course_true_degrees=parse_float_field(fields[1]),
        course_magnetic_degrees=parse_float_field(fields[3]),
        speed_knots=parse_float_field(fields[5]),
        speed_kilometers_per_hour=parse_float_field(fields[7]),
        faa_mode=parse_string_field(field_at(fields, 9)),
        legacy_format=False,
    )


def _decode_legacy(fields: Sequence[str]) -> VTGData:
    """Map the legacy four-number layout; it has no mode indicator."""
    require_fields(fields, _LEGACY_FIELD_COUNT)

    return VTGData(
        course_true_degrees=parse_float_field(fields[1]),
        course_magnetic_degrees=parse_float_field(fields[2]),
        speed_knots=parse_float_field(fields[3]),
        speed_kilometers_per_hour=parse_float_field(fields[4]),
        faa_mode=None,
        legacy_format=True,
    )


def decode_vtg(fields: Sequence[str]) -> VTGData:
    """Decode VTG fields in either layout.

    Args:
        fields: Sentence fields with the address field at index 0

    Returns:
        VTGData; ``legacy_format`` records which layout was seen

    Raises:
        IndexError: If the discriminant field is missing.
        ValueError: If the chosen layout has too few fields.

    Example:
        >>> decode_vtg(["$GPVTG", "054.7", "034.4", "005.5", "010.2"]).legacy_format
        True
    """
    if _is_current_format(fields):
        return _decode_current(fields)
    return _decode_legacy(fields)
