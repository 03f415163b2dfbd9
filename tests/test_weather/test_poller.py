"""Tests for concurrent watchlist polling and the generation-guarded board."""

import threading
import time

import pytest

from lga_departures.weather import poller as poller_module

from lga_departures.weather.models import FlightCategory
from lga_departures.weather.poller import WeatherBoard, WeatherEntry, WeatherPoller, fetch_batch, fetch_entry
from lga_departures.weather.source import NO_REPORT, WeatherFetchError

REPORTS = {
    "KLGA": "KLGA 191251Z 22012KT 10SM FEW250 18/09 A3001",
    "KJFK": "KJFK 191251Z 22015KT 2SM BR OVC007 17/16 A2998",
    "KEWR": "KEWR 191251Z 21008KT 10SM CLR 19/08 A3002",
    "KTEB": "KTEB 191251Z 20006KT 4SM HZ BKN025 18/10 A3001",
    "KHPN": "KHPN 191256Z 19005KT 10SM SCT040 17/08 A3003",
}


def fake_fetch(station):
    if station == "KBAD":
        raise WeatherFetchError(station, "HTTP 500")
    return REPORTS[station]


class TestFetchEntry:
    """Single station fetch."""

    def test_report(self):
        entry = fetch_entry(fake_fetch, "KJFK")

        assert not entry.failed
        assert entry.flight_category == FlightCategory.IFR
        assert entry.suggested_config == "ILS 22L DEP 22R"

    def test_airport_without_table(self):
        entry = fetch_entry(fake_fetch, "KEWR")
        assert entry.suggested_config is None
        assert "CONFIG" not in entry.summary()

    def test_error(self):
        entry = fetch_entry(fake_fetch, "KBAD")

        assert entry.failed
        assert entry.observation is None
        assert entry.flight_category == FlightCategory.UNKNOWN
        assert "HTTP 500" in entry.summary()

    def test_unexpected_exception(self):
        def broken(station):
            raise KeyError(station)

        entry = fetch_entry(broken, "KLGA")
        assert entry.failed

    def test_no_report_placeholder(self):
        entry = WeatherEntry.from_report("KLGA", NO_REPORT)

        assert entry.flight_category == FlightCategory.UNKNOWN
        assert entry.suggested_config == "—"


class TestFetchBatch:
    """Bounded concurrent batches."""

    def test_order_preserved_with_one_failure(self):
        stations = ["KLGA", "KJFK", "KBAD", "KTEB", "KHPN"]
        delays = {"KLGA": 0.05, "KJFK": 0.0, "KBAD": 0.02, "KTEB": 0.01, "KHPN": 0.0}

        def slow_fetch(station):
            time.sleep(delays[station])
            return fake_fetch(station)

        entries = fetch_batch(slow_fetch, stations, concurrency=5)

        assert [e.station for e in entries] == stations
        assert [e.failed for e in entries] == [False, False, True, False, False]

    def test_concurrency_bound(self):
        lock = threading.Lock()
        in_flight = [0]
        peak = [0]

        def tracking_fetch(station):
            with lock:
                in_flight[0] += 1
                peak[0] = max(peak[0], in_flight[0])
            time.sleep(0.02)
            with lock:
                in_flight[0] -= 1
            return REPORTS["KLGA"]

        entries = fetch_batch(tracking_fetch, ["KLGA"] * 8, concurrency=2)

        assert len(entries) == 8
        assert peak[0] <= 2

    @pytest.mark.filterwarnings("ignore::pytest.PytestUnhandledThreadExceptionWarning")
    def test_unfilled_slots_keep_position(self, monkeypatch):
        real_fetch_entry = poller_module.fetch_entry

        def dying_fetch_entry(fetch, station):
            if station == "KBAD":
                raise RuntimeError("worker died")
            return real_fetch_entry(fetch, station)

        monkeypatch.setattr(poller_module, "fetch_entry", dying_fetch_entry)
        stations = ["KLGA", "KBAD", "KJFK"]
        entries = fetch_batch(fake_fetch, stations, concurrency=1)

        assert [e.station for e in entries] == stations
        assert not entries[0].failed
        assert entries[1].failed
        assert entries[2].failed

    def test_empty_watchlist(self):
        assert fetch_batch(fake_fetch, [], concurrency=5) == []


class TestWeatherBoard:
    """Stale batches never overwrite newer ones."""

    def test_stale_batch_discarded(self):
        board = WeatherBoard()
        old = board.begin_batch()
        new = board.begin_batch()

        assert board.publish(new, [WeatherEntry.from_report("KLGA", REPORTS["KLGA"])])
        assert not board.publish(old, [WeatherEntry.from_error("KLGA", "late")])

        assert board.generation == new
        assert not board.entries[0].failed

    def test_in_order_batches(self):
        board = WeatherBoard()
        first = board.begin_batch()
        assert board.publish(first, [])
        second = board.begin_batch()
        assert board.publish(second, [WeatherEntry.from_error("KLGA", "down")])
        assert board.entries[0].failed


class TestWeatherPoller:
    """Polling loop."""

    def test_refresh(self):
        poller = WeatherPoller(fake_fetch, lambda: ["KLGA", "KBAD"], concurrency=2)

        assert poller.refresh()
        assert [e.station for e in poller.board.entries] == ["KLGA", "KBAD"]
        assert poller.board.generation == 1

    def test_watchlist_read_each_batch(self):
        watchlist = ["KLGA"]
        poller = WeatherPoller(fake_fetch, lambda: watchlist)

        poller.refresh()
        watchlist.append("KJFK")
        poller.refresh()

        assert [e.station for e in poller.board.entries] == ["KLGA", "KJFK"]

    def test_start_and_stop(self):
        fetched = threading.Event()

        def signalling_fetch(station):
            fetched.set()
            return REPORTS[station]

        poller = WeatherPoller(signalling_fetch, lambda: ["KLGA"], interval=0.05)
        poller.start()
        try:
            assert fetched.wait(timeout=5)
        finally:
            poller.stop()

    def test_stop_waits_for_running_batch(self):
        started = threading.Event()

        def slow_fetch(station):
            started.set()
            time.sleep(0.2)
            return REPORTS[station]

        poller = WeatherPoller(slow_fetch, lambda: ["KLGA"], interval=30)
        poller.start()
        assert started.wait(timeout=5)
        poller.stop()

        assert poller.board.generation == 1
        assert [e.station for e in poller.board.entries] == ["KLGA"]
