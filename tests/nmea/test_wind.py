"""Tests for wind sentence decoding."""

import pytest

from marine_nmea import NMEADecoder
from marine_nmea.nmea import MWDData, MWVData


@pytest.fixture
def decoder():
    return NMEADecoder()


class TestMWD:
    def test_full_sentence(self, decoder):
        sentence = decoder.decode("$WIMWD,270.0,T,265.0,M,12.5,N,6.4,M*6A")
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, MWDData)
        assert data.direction_true_degrees == pytest.approx(270.0)
        assert data.direction_magnetic_degrees == pytest.approx(265.0)
        assert data.speed_knots == pytest.approx(12.5)
        assert data.speed_meters_per_second == pytest.approx(6.4)


class TestMWV:
    def test_apparent_wind_on_port(self, decoder):
        sentence = decoder.decode("$WIMWV,214.8,R,0.1,K,A*28")
        assert sentence is not None
        data = sentence.data
        assert isinstance(data, MWVData)
        assert data.wind_angle_degrees == pytest.approx(214.8)
        assert data.reference == "R"
        assert data.is_true is False
        assert data.wind_speed == pytest.approx(0.1)
        assert data.wind_speed_units == "K"
        assert data.valid is True
        assert data.wind_angle_to_bow == pytest.approx(145.2)
        assert data.tack == "Port"

    def test_true_wind_on_starboard(self, decoder):
        sentence = decoder.decode("$WIMWV,045.0,T,10.5,N,V*07")
        assert sentence is not None
        data = sentence.data
        assert data.is_true is True
        assert data.valid is False
        assert data.wind_angle_to_bow == pytest.approx(45.0)
        assert data.tack == "Starboard"

    def test_missing_status_is_invalid(self, decoder):
        sentence = decoder.decode("$WIMWV,045.0,T,10.5,N*7D")
        assert sentence is not None
        assert sentence.data.valid is False

    def test_dead_downwind_is_port(self):
        data = MWVData(180.0, "R", 5.0, "N", True)
        assert data.tack == "Port"
        assert data.wind_angle_to_bow == pytest.approx(180.0)

    def test_missing_angle(self):
        data = MWVData(None, "R", 5.0, "N", True)
        assert data.tack is None
        assert data.wind_angle_to_bow is None
