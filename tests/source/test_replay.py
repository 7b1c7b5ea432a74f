"""Tests for dump file replay and pacing."""

import threading
import time

import pytest

from marine_nmea import NMEADecoder, ReplayPacer, ReplayReader

_HDT = "$HEHDT,274.07,T*19"
_GGA_0 = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
_GGA_1 = "$GPGGA,123520,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*4D"
_GGA_3 = "$GPGGA,123522,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*4F"
_GGA_BEFORE_MIDNIGHT = "$GPGGA,235959,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*4B"
_GGA_MIDNIGHT = "$GPGGA,000000,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*4A"
_GGA_AFTER_MIDNIGHT = "$GPGGA,000002,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*48"


class FakeClock:
    """Monotonic clock whose ``sleep`` advances time instantly."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def dump_file(tmp_path):
    path = tmp_path / "capture.nmea"
    path.write_text("\n".join([_HDT, _GGA_0, "garbage", "", _HDT, _GGA_1, _GGA_3]) + "\n")
    return path


class TestReplayPacer:
    def test_sleeps_for_sentence_time_gaps(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        sentences = NMEADecoder().decode_lines([_GGA_0, _GGA_1, _GGA_3])
        list(pacer.pace(sentences))
        assert clock.sleeps == [pytest.approx(1.0), pytest.approx(2.0)]

    def test_wall_time_already_elapsed_is_credited(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        assert pacer.delay_for(decoder.decode(_GGA_0)) == 0.0
        clock.now += 0.25
        assert pacer.delay_for(decoder.decode(_GGA_1)) == pytest.approx(0.75)

    def test_late_record_not_delayed(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        pacer.delay_for(decoder.decode(_GGA_0))
        clock.now += 10
        assert pacer.delay_for(decoder.decode(_GGA_1)) == 0.0

    def test_records_before_first_timestamp_pass_through(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        assert pacer.delay_for(decoder.decode(_HDT)) == 0.0
        assert pacer.delay_for(decoder.decode(_HDT)) == 0.0
        assert clock.sleeps == []

    def test_untimestamped_records_not_delayed(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        pacer.delay_for(decoder.decode(_GGA_0))
        assert pacer.delay_for(decoder.decode(_HDT)) == 0.0

    def test_reset_reanchors(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        pacer.delay_for(decoder.decode(_GGA_0))
        pacer.reset()
        assert pacer.delay_for(decoder.decode(_GGA_3)) == 0.0

    def test_rmc_and_gga_share_time_of_day(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        rmc = decoder.decode(
            "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,010524,003.1,W*67"
        )
        assert pacer.delay_for(rmc) == 0.0
        assert pacer.delay_for(decoder.decode(_GGA_1)) == pytest.approx(1.0)

    def test_rmc_date_change_ignored(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        first = decoder.decode(
            "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*68"
        )
        next_day = decoder.decode(
            "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,201194,020.3,E*62"
        )
        assert pacer.delay_for(first) == 0.0
        assert pacer.delay_for(next_day) == 0.0

    def test_pacing_continues_across_midnight(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        assert pacer.delay_for(decoder.decode(_GGA_BEFORE_MIDNIGHT)) == 0.0
        assert pacer.delay_for(decoder.decode(_GGA_MIDNIGHT)) == pytest.approx(1.0)
        assert pacer.delay_for(decoder.decode(_GGA_AFTER_MIDNIGHT)) == pytest.approx(3.0)

    def test_midnight_crossing_paced_in_stream(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        lines = [_GGA_BEFORE_MIDNIGHT, _GGA_MIDNIGHT, _GGA_AFTER_MIDNIGHT]
        list(pacer.pace(NMEADecoder().decode_lines(lines)))
        assert clock.sleeps == [pytest.approx(1.0), pytest.approx(2.0)]

    def test_small_step_back_not_treated_as_midnight(self, clock):
        pacer = ReplayPacer(clock=clock, sleep=clock.sleep)
        decoder = NMEADecoder()
        pacer.delay_for(decoder.decode(_GGA_1))
        assert pacer.delay_for(decoder.decode(_GGA_0)) == 0.0
        assert pacer.delay_for(decoder.decode(_GGA_3)) == pytest.approx(2.0)


class TestReplayReader:
    def test_lines_skip_blank(self, dump_file):
        reader = ReplayReader(dump_file)
        assert list(reader.lines()) == [_HDT, _GGA_0, "garbage", _HDT, _GGA_1, _GGA_3]

    def test_process_in_file_order(self, dump_file, clock):
        reader = ReplayReader(dump_file, pacer=ReplayPacer(clock=clock, sleep=clock.sleep))
        received = []
        reader.process(received.append)
        assert [s.sentence_code for s in received] == ["HDT", "GGA", "HDT", "GGA", "GGA"]
        assert clock.sleeps == [pytest.approx(1.0), pytest.approx(2.0)]

    def test_uses_given_decoder(self, tmp_path):
        path = tmp_path / "capture.nmea"
        path.write_text("$GPTXT,01,01,02,ANTSTATUS=OK*3B\n")
        decoder = NMEADecoder()
        assert list(ReplayReader(path, decoder=decoder)) == []
        assert decoder.tracker.seen == frozenset({"TXT"})

    def test_non_ascii_bytes_ignored(self, tmp_path):
        path = tmp_path / "capture.nmea"
        path.write_bytes(b"\xff" + _HDT.encode() + b"\r\n")
        received = list(ReplayReader(path))
        assert [s.sentence_code for s in received] == ["HDT"]

    def test_cancel_interrupts_pacing(self, tmp_path):
        path = tmp_path / "capture.nmea"
        path.write_text(f"{_GGA_0}\n{_GGA_BEFORE_MIDNIGHT}\n")
        reader = ReplayReader(path)
        received = []
        timer = threading.Timer(0.05, reader.cancel)

        start = time.monotonic()
        timer.start()
        reader.process(received.append)
        timer.join()
        assert len(received) == 1
        assert time.monotonic() - start < 5

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(ReplayReader(tmp_path / "absent.nmea").lines())
