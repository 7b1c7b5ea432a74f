"""JSON formatting of decoded sentences."""

import dataclasses
import json
from datetime import datetime
from typing import Any

from marine_nmea.nmea.types import NMEASentence, position_of

__all__ = ["format_sentence_message"]


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def format_sentence_message(sentence: NMEASentence) -> str:
    """Serialize a decoded sentence into a JSON string for WebSocket transmission.

    The payload fields are emitted under ``data`` by name. Sentences that
    report the vessel position also carry a flattened ``position`` so that
    clients do not need to know which codes hold one.

    Example:
        >>> format_sentence_message(NMEADecoder().decode("$HEHDT,274.07,T*19"))
        '{"type": "nmea", "talker": "HE", "code": "HDT", ...}'
    """
    position = position_of(sentence)
    return json.dumps(
        {
            "type": "nmea",
            "talker": sentence.talker_id,
            "code": sentence.sentence_code,
            "checksum_valid": sentence.checksum_valid,
            "position": dataclasses.asdict(position) if position else None,
            "data": dataclasses.asdict(sentence.data),
        },
        default=_json_default,
    )
