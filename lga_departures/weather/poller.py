"""
Watchlist weather polling.

A batch fetches every station of the watchlist with a fixed pool of worker
threads. Workers take station indices from a shared queue and write their
result into a pre-sized slot list, so the output keeps watchlist order
whatever order the fetches finish in. One failing station becomes an error
entry and never stops the others.

Batches are tagged with a generation number when they start. The board only
accepts a batch newer than the one it is showing, so a slow batch that
finishes after a later one is discarded instead of overwriting it.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from lga_departures.config import WX_CONCURRENCY, WX_INTERVAL_SECONDS
from lga_departures.weather.models import FlightCategory, WeatherObservation
from lga_departures.weather.parser import MetarParser
from lga_departures.weather.runway_config import suggest_config
from lga_departures.weather.source import NO_REPORT

logger = logging.getLogger(__name__)

FetchFunction = Callable[[str], str]


@dataclass(frozen=True)
class WeatherEntry:
    """
    Display state for one watchlist station.

    Attributes:
        station: Station identifier
        raw_text: Report line, empty on error
        observation: Parsed fields, None on error
        suggested_config: Runway configuration for airports with a table
        error: Error message when the fetch failed
    """

    station: str
    raw_text: str = ""
    observation: Optional[WeatherObservation] = None
    suggested_config: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def flight_category(self) -> FlightCategory:
        if self.observation is None:
            return FlightCategory.UNKNOWN
        return self.observation.flight_category

    @classmethod
    def from_report(cls, station: str, raw_text: str) -> 'WeatherEntry':
        observation = MetarParser.parse("" if raw_text == NO_REPORT else raw_text)
        return cls(
            station=station,
            raw_text=raw_text,
            observation=observation,
            suggested_config=suggest_config(station, observation.wind, observation.flight_category),
        )

    @classmethod
    def from_error(cls, station: str, error: str) -> 'WeatherEntry':
        return cls(station=station, error=error)

    def summary(self) -> str:
        if self.failed:
            return f"{self.station:<5} ERROR: {self.error}"
        line = f"{self.station:<5} {str(self.flight_category):<5} {self.raw_text}"
        if self.suggested_config:
            line += f"\n      CONFIG: {self.suggested_config}"
        return line


def fetch_entry(fetch: FetchFunction, station: str) -> WeatherEntry:
    """Fetch and parse one station, turning any failure into an error entry."""
    try:
        raw_text = fetch(station)
    except Exception as e:
        logger.warning("Weather fetch failed for %s: %s", station, e)
        return WeatherEntry.from_error(station, str(e) or e.__class__.__name__)
    return WeatherEntry.from_report(station, raw_text)


def fetch_batch(fetch: FetchFunction, stations: Sequence[str], concurrency: int = WX_CONCURRENCY) -> List[WeatherEntry]:
    """
    Fetch all stations with at most `concurrency` requests in flight.

    Args:
        fetch: Callable returning the raw report line for a station
        stations: Stations in display order
        concurrency: Number of worker threads

    Returns:
        One entry per station, in the order given.
    """
    slots: List[Optional[WeatherEntry]] = [None] * len(stations)
    pending: 'queue.Queue[int]' = queue.Queue()
    for index in range(len(stations)):
        pending.put(index)

    def worker():
        while True:
            try:
                index = pending.get_nowait()
            except queue.Empty:
                return
            slots[index] = fetch_entry(fetch, stations[index])

    workers = [
        threading.Thread(target=worker, name=f"wx-worker-{n}", daemon=True)
        for n in range(max(1, min(concurrency, len(stations))))
    ]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()

    return [
        entry if entry is not None else WeatherEntry.from_error(station, "no result")
        for station, entry in zip(stations, slots)
    ]


class WeatherBoard:
    """
    Latest weather display state, guarded by batch generation.

    Example:
        generation = board.begin_batch()
        ...
        board.publish(generation, entries)  # False if a newer batch already published
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._started = 0
        self._published = 0
        self._entries: List[WeatherEntry] = []

    def begin_batch(self) -> int:
        with self._lock:
            self._started += 1
            return self._started

    def publish(self, generation: int, entries: Sequence[WeatherEntry]) -> bool:
        with self._lock:
            if generation <= self._published:
                logger.debug("Discarding stale weather batch %d (showing %d)", generation, self._published)
                return False
            self._published = generation
            self._entries = list(entries)
            return True

    @property
    def generation(self) -> int:
        with self._lock:
            return self._published

    @property
    def entries(self) -> List[WeatherEntry]:
        with self._lock:
            return list(self._entries)


class WeatherPoller:
    """
    Periodically refresh the board for the current watchlist.

    Every tick starts its own batch thread, so a slow batch may still be
    running when the next one starts; the board keeps whichever started
    last.

    Args:
        fetch: Callable returning the raw report line for a station
        watchlist: Callable returning the stations to poll
        board: Board receiving the results
        concurrency: Workers per batch
        interval: Seconds between batches
    """

    def __init__(
        self,
        fetch: FetchFunction,
        watchlist: Callable[[], Sequence[str]],
        board: Optional[WeatherBoard] = None,
        concurrency: int = WX_CONCURRENCY,
        interval: float = WX_INTERVAL_SECONDS,
    ):
        self.fetch = fetch
        self.watchlist = watchlist
        self.board = board or WeatherBoard()
        self.concurrency = concurrency
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._batches: List[threading.Thread] = []

    def refresh(self) -> bool:
        """Run one batch now; returns True if its results were published."""
        stations = list(self.watchlist())
        generation = self.board.begin_batch()
        logger.debug("Weather batch %d for %d stations", generation, len(stations))
        entries = fetch_batch(self.fetch, stations, self.concurrency)
        return self.board.publish(generation, entries)

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="wx-poller", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop polling and wait for batches still in flight."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        for batch in self._batches:
            batch.join()
        self._batches = []

    def _run(self) -> None:
        while not self._stop.is_set():
            self._batches = [batch for batch in self._batches if batch.is_alive()]
            batch = threading.Thread(target=self.refresh, name="wx-batch", daemon=True)
            self._batches.append(batch)
            batch.start()
            self._stop.wait(self.interval)
