import logging
from typing import Optional

import requests

from .base import TableSource
from ..config import HTTP_TIMEOUT
from ..models.validation import TableLoadError

logger = logging.getLogger(__name__)


class HttpTableSource(TableSource):
    """
    Tables served over HTTP next to each other under a base URL.

    Example:
        source = HttpTableSource("https://example.org/lga")
        source.read_text("Gates.tsv")  # GET https://example.org/lga/Gates.tsv
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: int = HTTP_TIMEOUT):
        """
        Args:
            base_url: URL of the directory holding the tables
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def read_text(self, file_name: str) -> str:
        url = f"{self.base_url}/{file_name}"
        logger.info(f"Downloading {url}")
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TableLoadError(file_name, str(e)) from e
        return response.text
