"""Tests for GGA, GLL, RMC and ZDA decoding."""

from datetime import datetime, timezone

import pytest

from marine_nmea import NMEADecoder, Position, Positioned, position_of
from marine_nmea.nmea import GGAData, GLLData, RMCData, ZDAData
from marine_nmea.nmea.position import decode_gga

GGA_VALID = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"


@pytest.fixture
def decoder():
    return NMEADecoder()


class TestGGA:
    def test_end_to_end(self, decoder):
        sentence = decoder.decode(GGA_VALID)
        assert sentence is not None
        assert sentence.talker_id == "GP"
        assert sentence.sentence_code == "GGA"
        assert sentence.checksum == 0x47
        assert sentence.checksum_valid is True

        data = sentence.data
        assert isinstance(data, GGAData)
        assert data.latitude == pytest.approx(48.1173, rel=1e-4)
        assert data.longitude == pytest.approx(11.5167, rel=1e-4)
        assert data.fix_quality == 1
        assert data.num_satellites == 8
        assert data.horizontal_dilution_of_precision == pytest.approx(0.9)
        assert data.altitude_meters == pytest.approx(545.4)
        assert data.altitude_units == "M"
        assert data.geoid_separation_meters == pytest.approx(46.9)
        assert data.geoid_separation_units == "M"
        assert data.dgps_age_seconds is None
        assert data.dgps_station_id is None
        assert data.valid is True

    def test_position_delegate_equals_embedded_position(self, decoder):
        sentence = decoder.decode(GGA_VALID)
        assert sentence is not None
        assert isinstance(sentence.data, Positioned)
        assert position_of(sentence) == sentence.data.position

    def test_utc_time_of_day(self, decoder):
        sentence = decoder.decode(GGA_VALID)
        assert sentence is not None
        utc = sentence.data.utc
        assert utc is not None
        assert (utc.hour, utc.minute, utc.second) == (12, 35, 19)
        assert utc.tzinfo == timezone.utc

    def test_dgps_fields(self, decoder):
        sentence = decoder.decode(
            "$GPGGA,123519,4807.038,N,01131.000,E,2,08,0.9,545.4,M,46.9,M,3.2,0120*68"
        )
        assert sentence is not None
        assert sentence.data.fix_quality == 2
        assert sentence.data.dgps_age_seconds == pytest.approx(3.2)
        assert sentence.data.dgps_station_id == "0120"

    def test_empty_fields_give_none(self, decoder):
        sentence = decoder.decode("$GNGGA,123519.00,,,,,,,,,,,,,*6B")
        assert sentence is not None
        data = sentence.data
        assert data.latitude is None
        assert data.longitude is None
        assert data.fix_quality == 0
        assert data.num_satellites is None
        assert data.valid is False

    def test_southern_western_hemisphere(self):
        fields = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,".split(",")
        data = decode_gga(fields)
        assert data.latitude == pytest.approx(-33.93538333, rel=1e-4)
        assert data.longitude == pytest.approx(-151.20760, rel=1e-4)

    def test_too_few_fields_raises(self):
        with pytest.raises(ValueError):
            decode_gga("$GPGGA,123519,4807.038,N".split(","))

    def test_too_few_fields_decodes_to_none(self, decoder):
        assert decoder.decode("$GPGGA,123519,4807.038,N*27") is None


class TestGLL:
    def test_with_faa_mode(self, decoder):
        sentence = decoder.decode("$GPGLL,4916.45,N,12311.12,W,225444,A,A*5C")
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, GLLData)
        assert data.latitude == pytest.approx(49.274166, rel=1e-6)
        assert data.longitude == pytest.approx(-123.185333, rel=1e-6)
        assert data.valid is True
        assert data.faa_mode == "A"
        assert data.utc is not None and data.utc.hour == 22

    def test_without_faa_mode(self, decoder):
        sentence = decoder.decode("$GPGLL,4916.45,N,12311.12,W,225444,A*31")
        assert sentence is not None
        assert sentence.data.faa_mode is None
        assert sentence.data.valid is True

    def test_invalid_status(self, decoder):
        sentence = decoder.decode("$GPGLL,,,,,225444,V,N*65")
        assert sentence is not None
        assert sentence.data.valid is False
        assert position_of(sentence) == Position(None, None, sentence.data.utc)


class TestRMC:
    def test_full_sentence(self, decoder):
        sentence = decoder.decode(
            "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*68"
        )
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, RMCData)
        assert data.valid is True
        assert data.latitude == pytest.approx(49.274166, rel=1e-6)
        assert data.longitude == pytest.approx(-123.185333, rel=1e-6)
        assert data.speed_knots == pytest.approx(0.5)
        assert data.track_true_degrees == pytest.approx(54.7)
        assert data.date == "191194"
        assert data.magnetic_variation_degrees == pytest.approx(20.3)
        assert data.faa_mode is None
        assert data.utc == datetime(2094, 11, 19, 22, 54, 46, tzinfo=timezone.utc)

    def test_warning_status_west_variation_no_date(self, decoder):
        sentence = decoder.decode(
            "$GPRMC,225446.50,V,4916.45,N,12311.12,W,000.5,054.7,,003.1,W,N*22"
        )
        assert sentence is not None
        data = sentence.data
        assert data.valid is False
        assert data.date is None
        assert data.magnetic_variation_degrees == pytest.approx(-3.1)
        assert data.faa_mode == "N"
        assert data.utc is not None
        assert data.utc.date() == datetime.now(timezone.utc).date()
        assert data.utc.microsecond == 500000


class TestZDA:
    def test_with_local_zone(self, decoder):
        sentence = decoder.decode("$GPZDA,160012.71,11,03,2004,-1,00*7D")
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, ZDAData)
        assert data.utc == datetime(2004, 3, 11, 16, 0, 12, 710000, tzinfo=timezone.utc)
        assert data.local_zone_hours == -1
        assert data.local_zone_minutes == 0

    def test_without_local_zone(self, decoder):
        sentence = decoder.decode("$GPZDA,160012.71,11,03,2004*61")
        assert sentence is not None
        assert sentence.data.local_zone_hours is None
        assert sentence.data.local_zone_minutes is None

    def test_zda_has_no_position(self, decoder):
        sentence = decoder.decode("$GPZDA,160012.71,11,03,2004*61")
        assert position_of(sentence) is None
