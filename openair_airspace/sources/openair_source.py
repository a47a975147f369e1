"""Loading OpenAir documents over HTTP or from disk."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import requests

from openair_airspace.models.airspace import AirspacePolygon
from openair_airspace.parsers.openair_parser import OpenAirParser

logger = logging.getLogger(__name__)


class OpenAirSource:
    """
    Fetch OpenAir airspace files and parse them into polygons.

    Example:
        source = OpenAirSource()
        polygons = source.fetch("https://example.org/airspace/uk.txt")
        for p in polygons:
            print(p.name, p.airspace_class)
    """

    DEFAULT_TIMEOUT = 30
    USER_AGENT = "openair-airspace/0.1 (airspace parser)"

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = DEFAULT_TIMEOUT,
                 parser: Optional[OpenAirParser] = None):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            parser: Parser to use, defaults to a lenient OpenAirParser.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._parser = parser or OpenAirParser()
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch_text(self, url: str) -> str:
        """
        Download an OpenAir document.

        Raises:
            requests.RequestException: On network or HTTP errors
        """
        logger.info(f"Fetching OpenAir data from {url}")
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch OpenAir data from {url}: {e}")
            raise
        response.encoding = 'utf-8'
        return response.text

    def fetch(self, url: str) -> List[AirspacePolygon]:
        """Download and parse an OpenAir document."""
        polygons = self._parser.parse(self.fetch_text(url))
        logger.info(f"Parsed {len(polygons)} airspace polygons from {url}")
        return polygons


def load_file(path: Union[str, Path], parser: Optional[OpenAirParser] = None) -> List[AirspacePolygon]:
    """Read a UTF-8 OpenAir file and parse it."""
    path = Path(path)
    text = path.read_text(encoding='utf-8')
    polygons = (parser or OpenAirParser()).parse(text)
    logger.info(f"Parsed {len(polygons)} airspace polygons from {path}")
    return polygons
