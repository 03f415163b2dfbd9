"""Aviation Weather (aviationweather.gov) METAR text source."""

import logging
from typing import Optional

import requests

from lga_departures.config import HTTP_TIMEOUT, METAR_URL
from lga_departures.models.validation import LgaDeparturesError

logger = logging.getLogger(__name__)

NO_REPORT = "(no report)"


class WeatherFetchError(LgaDeparturesError):
    """Raised when a station's report cannot be fetched."""

    def __init__(self, station: str, reason: str):
        super().__init__(f"Weather fetch failed for {station}: {reason}")
        self.station = station
        self.reason = reason


class MetarSource:
    """
    Fetch the latest raw METAR line for a station.

    The endpoint may return several lines; the one starting with the
    station identifier is used, otherwise the first line, otherwise the
    "(no report)" placeholder.

    Example:
        source = MetarSource()
        source.fetch_report("KLGA")
    """

    DEFAULT_TIMEOUT = HTTP_TIMEOUT
    USER_AGENT = "lga-departures/1.0 (departure reference tool)"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = METAR_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            base_url: METAR text endpoint.
            timeout: HTTP request timeout in seconds.
        """
        self._session = session or requests.Session()
        self._base_url = base_url
        self._timeout = timeout
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch_report(self, station: str) -> str:
        """
        Return the raw report line for a station.

        Raises:
            WeatherFetchError: on transport errors or non-2xx responses.
        """
        ident = (station or "").strip().upper()
        text = self._fetch_raw(ident)
        return self.select_line(text, ident)

    def _fetch_raw(self, station: str) -> str:
        """
        Make HTTP GET request and return raw text.

        Handles 204 (no data) by returning empty string.
        """
        try:
            response = self._session.get(
                self._base_url,
                params={"ids": station, "format": "raw"},
                timeout=self._timeout,
            )
            if response.status_code == 204:
                return ""
            response.raise_for_status()
            return response.text
        except requests.RequestException as e:
            raise WeatherFetchError(station, str(e)) from e

    @staticmethod
    def select_line(text: str, station: str) -> str:
        """Pick the report line for a station out of a response body."""
        lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
        if not lines:
            return NO_REPORT

        for line in lines:
            tokens = line.split()
            if tokens[0].upper() in ("METAR", "SPECI") and len(tokens) > 1:
                tokens = tokens[1:]
            if tokens[0].upper() == station:
                return line

        logger.debug("No line starting with %s, using first line", station)
        return lines[0]
