"""Helper factories for server tests."""

from marine_nmea import NMEADecoder, NMEASentence

GGA_LINE = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
HDT_LINE = "$HEHDT,274.07,T*19"
DPT_LINE = "$SDDPT,2.4,0.-7*7B"


def make_sentence(line: str) -> NMEASentence:
    sentence = NMEADecoder().decode(line)
    assert sentence is not None
    return sentence
