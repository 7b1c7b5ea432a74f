"""NMEA checksum calculation and validation.

Every NMEA 0183 sentence carries a mandatory XOR checksum. It is calculated
over all characters between the frame character ('$' for conventional
talkers, '!' for AIS encapsulation) and the '*' separator, both exclusive,
and is sent as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^                        checksum content                     ^^
    frame                                                  checksum (0x47)
"""

FRAME_CHARACTERS = ("$", "!")

_CHECKSUM_SEPARATOR = "*"


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    NMEA sentences follow the format: <frame><content>*<checksum>
    This function separates these components for validation.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPGGA,...*47")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' or '!' frame character
        - Missing '*' checksum separator
        - Checksum is not exactly 2 characters (truncated sentence)

    Example:
        >>> _extract_checksum_parts("!AIVDM,1,1,,A,13aEOK?P00PD2wVMdLDRhgvL289?,0*26")
        ('AIVDM,1,1,,A,13aEOK?P00PD2wVMdLDRhgvL289?,0', '26')
    """
    if not sentence.startswith(FRAME_CHARACTERS):
        return None
    if _CHECKSUM_SEPARATOR not in sentence:
        return None

    end = sentence.rindex(_CHECKSUM_SEPARATOR)
    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if len(provided) != 2:
        return None

    return content, provided


def _calculate_xor_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content, commas included.

    Args:
        content: The string between the frame character and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def compute_checksum(sentence: str) -> int:
    """Compute the checksum an NMEA sentence should carry.

    The sentence may be given with or without its frame character and with
    or without the trailing '*HH' token; only the characters strictly
    between the frame and the '*' are counted.

    Args:
        sentence: NMEA sentence, e.g. "$GPGGA,123519,...*47" or "GPGGA,123519,..."

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> compute_checksum("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        71
    """
    sentence = sentence.strip()
    if sentence.startswith(FRAME_CHARACTERS):
        sentence = sentence[1:]
    content, _, _ = sentence.partition(_CHECKSUM_SEPARATOR)
    return _calculate_xor_checksum(content)


def format_checksum(value: int) -> str:
    """Render a checksum as the two uppercase hex digits used on the wire."""
    return f"{value:02X}"


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between the frame character and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided 2-digit hex checksum

    Args:
        sentence: Complete NMEA sentence including frame, '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing frame or separator)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPGGA,123519,...*47")
        True
        >>> validate_checksum("$GPGGA,123519,...*FF")  # wrong checksum
        False
    """
    sentence = sentence.strip()

    parts = _extract_checksum_parts(sentence)
    if parts is None:
        return False

    content, provided = parts

    try:
        return _calculate_xor_checksum(content) == int(provided, 16)
    except ValueError:
        return False
