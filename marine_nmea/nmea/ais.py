"""AIS fragment envelope decoder for VDM and VDO sentences.

VDM carries AIS messages received from other vessels, VDO the own vessel's
reports. Only the envelope is decoded here; the six-bit armoured payload is
passed through untouched for an AIS library to interpret.

VDM / VDO Sentence Format:
    !AIVDM,1,1,,A,13aEOK?P00PD2wVMdLDRhgvL289?,0*26
           | | | | |                           |
           | | | | |                           +-- Fill bits
           | | | | +-- Armoured payload
           | | | +-- Radio channel (A/B)
           | | +-- Sequential message id (empty for single fragments)
           | +-- Fragment number
           +-- Fragment count
"""

from collections.abc import Sequence

from marine_nmea.nmea.fields import (
    field_at,
    parse_int_field,
    parse_string_field,
    require_fields,
)
from marine_nmea.nmea.types import AISFragmentData

_FIELD_COUNT = 6


def decode_ais_fragment(fields: Sequence[str]) -> AISFragmentData:
    """Decode the VDM/VDO envelope.

    Fragment count and number are needed to reassemble multi-sentence
    messages, so unlike other numeric fields they must parse.

    Raises:
        ValueError: If the sentence has too few fields, or the fragment
            count or number is not an integer.
    """
    require_fields(fields, _FIELD_COUNT)

    return AISFragmentData(
        fragment_count=int(fields[1]),
        fragment_number=int(fields[2]),
        message_id=parse_string_field(fields[3]),
        radio_channel=parse_string_field(fields[4]),
        payload=fields[5],
        fill_bits=parse_int_field(field_at(fields, 6)),
    )
