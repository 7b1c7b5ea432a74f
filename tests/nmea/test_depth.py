"""Tests for depth sentence decoding."""

import pytest

from marine_nmea import NMEADecoder
from marine_nmea.nmea import DepthData, DPTData
from marine_nmea.nmea.depth import parse_offset_field


@pytest.fixture
def decoder():
    return NMEADecoder()


class TestParseOffsetField:
    def test_zero_whole_part(self):
        assert parse_offset_field("0.-7") == pytest.approx(-0.7)

    def test_nonzero_whole_part(self):
        assert parse_offset_field("1.-7") == pytest.approx(-1.7)

    def test_doubly_signed(self):
        assert parse_offset_field("-1.-7") == pytest.approx(-1.7)

    def test_regular_negative_unchanged(self):
        assert parse_offset_field("-1.7") == pytest.approx(-1.7)

    def test_positive(self):
        assert parse_offset_field("0.5") == pytest.approx(0.5)

    def test_empty(self):
        assert parse_offset_field("") is None

    def test_garbage(self):
        assert parse_offset_field("x.-y") is None


class TestDepthBelow:
    @pytest.mark.parametrize(
        "line",
        [
            "$SDDBT,7.8,f,2.4,M,1.3,F*0D",
            "$SDDBK,7.8,f,2.4,M,1.3,F*12",
            "$SDDBS,7.8,f,2.4,M,1.3,F*0A",
        ],
    )
    def test_all_units(self, decoder, line):
        sentence = decoder.decode(line)
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, DepthData)
        assert data.feet == pytest.approx(7.8)
        assert data.meters == pytest.approx(2.4)
        assert data.fathoms == pytest.approx(1.3)


class TestDPT:
    def test_positive_offset(self, decoder):
        sentence = decoder.decode("$SDDPT,2.4,0.5,100*49")
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, DPTData)
        assert data.depth_meters == pytest.approx(2.4)
        assert data.offset_meters == pytest.approx(0.5)
        assert data.max_range_meters == pytest.approx(100.0)
        assert data.depth_below_surface == pytest.approx(2.9)
        assert data.depth_below_keel is None

    def test_misplaced_sign_offset(self, decoder):
        sentence = decoder.decode("$SDDPT,2.4,0.-7*7B")
        assert sentence is not None
        data = sentence.data
        assert data.offset_meters == pytest.approx(-0.7)
        assert data.max_range_meters is None
        assert data.depth_below_keel == pytest.approx(1.7)
        assert data.depth_below_surface is None

    def test_misplaced_sign_with_whole_part(self, decoder):
        sentence = decoder.decode("$SDDPT,2.4,1.-7,100*67")
        assert sentence is not None
        assert sentence.data.offset_meters == pytest.approx(-1.7)

    def test_regular_negative_offset(self, decoder):
        sentence = decoder.decode("$SDDPT,2.4,-1.7*7A")
        assert sentence is not None
        assert sentence.data.offset_meters == pytest.approx(-1.7)
