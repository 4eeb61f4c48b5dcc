"""
Base class for upstream content providers.
"""
import abc
import logging
import pprint
from typing import Any, Dict, Optional, Tuple, Type

import requests
from requests.adapters import HTTPAdapter

from .exceptions import UpstreamTimeoutError, UpstreamTransportError


DEFAULT_USER_AGENT = "inspire-me/1.0 (+https://github.com/inspire-me)"

# Upper bound on establishing the TCP/TLS connection, in seconds
CONNECT_TIMEOUT = 5


def log_request_details(logger, method: str, url: str, headers: Dict,
                        params: Optional[Dict] = None):
    """Log details of outgoing API requests."""
    logger.debug("\n" + "="*80 + f"\nOUTGOING REQUEST DETAILS:\n{'='*80}")
    logger.debug(f"Method: {method}")
    logger.debug(f"URL: {url}")
    logger.debug("\nHeaders:")
    logger.debug(pprint.pformat(headers))

    if params:
        logger.debug("\nQuery Params:")
        logger.debug(pprint.pformat(params))


def log_response_details(logger, response: requests.Response):
    """Log status, redirect chain and headers of an API response."""
    logger.debug("\n" + "="*80 + f"\nRESPONSE DETAILS:\n{'='*80}")
    logger.debug(f"Status Code: {response.status_code}")
    logger.debug(f"Reason: {response.reason}")
    logger.debug(f"Final URL: {response.url}")

    if response.history:
        logger.debug("\nRedirect chain:")
        for hop in response.history:
            logger.debug(f"  {hop.status_code} {hop.url}")

    logger.debug("\nResponse Headers:")
    logger.debug(pprint.pformat(dict(response.headers)))
    logger.debug("="*80)


class UpstreamProvider(abc.ABC):
    """
    Abstract base class for the upstream services the aggregator calls.

    A provider owns one ``requests.Session`` and performs plain GET requests
    against a single fixed endpoint. Transport failures are translated into
    ``connection_error`` (a subclass of ``UpstreamTransportError``) so that
    callers never see raw ``requests`` exceptions.
    """

    BASE_URL = ""
    connection_error: Type[UpstreamTransportError] = UpstreamTransportError

    def __init__(self, name: str, base_url: str, timeout: float = 10,
                 user_agent: Optional[str] = None):
        self.name = name
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.logger = logging.getLogger(f"{__name__}.{name.lower()}")
        self._session = requests.Session()
        self._initialize_session()

    def _initialize_session(self) -> None:
        """Set up the HTTP session with default headers and no retries."""
        self._session.headers.update({
            "Accept": "application/json, */*",
            "User-Agent": self.user_agent,
        })

        adapter = HTTPAdapter(max_retries=0)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    @property
    def request_timeout(self) -> Tuple[float, float]:
        """``(connect, read)`` timeout passed to ``requests``.

        The read part applies to each socket read, not to the whole response.
        """
        return (min(self.timeout, CONNECT_TIMEOUT), self.timeout)

    @abc.abstractmethod
    def fetch(self) -> Any:
        """Call the upstream once and return its interpreted result."""
        raise NotImplementedError

    def _get(self, url: str, **kwargs) -> requests.Response:
        """
        Issue a GET request and return the response once it is known to be 2xx.

        Raises:
            UpstreamTimeoutError: If the upstream does not answer in time
            UpstreamTransportError: On connection failures, redirect loops
                and non-2xx statuses (as ``self.connection_error``)
        """
        log_request_details(self.logger, "GET", url, dict(self._session.headers))

        try:
            response = self._session.get(url, timeout=self.request_timeout, **kwargs)
        except requests.Timeout as e:
            raise UpstreamTimeoutError(
                f"{self.name} did not respond within {self.timeout}s",
                provider=self.name,
                error_code="TIMEOUT",
                details={"original_error": str(e), "url": url}
            ) from e
        except requests.TooManyRedirects as e:
            raise self.connection_error(
                f"Too many redirects from {self.name}",
                provider=self.name,
                error_code="TOO_MANY_REDIRECTS",
                details={"original_error": str(e), "url": url}
            ) from e
        except requests.RequestException as e:
            raise self.connection_error(
                f"Failed to connect to {self.name}: {e}",
                provider=self.name,
                error_code="CONNECTION_FAILED",
                details={"original_error": str(e), "url": url}
            ) from e

        log_response_details(self.logger, response)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            response.close()
            raise self.connection_error(
                f"HTTP error from {self.name}: {response.status_code}",
                provider=self.name,
                error_code="HTTP_ERROR",
                details={"original_error": str(e), "status_code": response.status_code}
            ) from e

        return response

    def close(self):
        """Close the underlying HTTP session."""
        if self._session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
