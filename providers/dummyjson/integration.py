"""
DummyJSON Quotes Integration

The quotes API answers ``GET /quotes/random`` with a JSON object such as::

    {"id": 17, "quote": "Stay hungry", "author": "Jane Doe"}

Only ``quote`` and ``author`` are used; every other field is ignored.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from providers.base.provider import UpstreamProvider
from providers.base.results import QuoteResult

from .exceptions import DummyJSONConnectionError, DummyJSONDecodeError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("quote", "author")


class DummyJSONQuoteProvider(UpstreamProvider):
    """Integration with the DummyJSON random quote endpoint."""

    BASE_URL = "https://dummyjson.com"
    QUOTES_ENDPOINT = "/quotes/random"
    connection_error = DummyJSONConnectionError

    def __init__(self, url: Optional[str] = None, timeout: float = 10,
                 user_agent: Optional[str] = None):
        """Initialize the DummyJSON provider.

        Args:
            url: Full quote endpoint, defaults to the public random quote URL
            timeout: Request timeout in seconds
            user_agent: Custom user agent string
        """
        super().__init__(name="DummyJSON", base_url=self.BASE_URL,
                         timeout=timeout, user_agent=user_agent)
        self.url = url or urljoin(self.BASE_URL, self.QUOTES_ENDPOINT)

    def fetch(self) -> QuoteResult:
        return self.get_quote()

    def get_quote(self) -> QuoteResult:
        """Fetch one random quote.

        Returns:
            QuoteResult with the quote text and its author

        Raises:
            DummyJSONConnectionError: If the API can't be reached or returns an error status
            DummyJSONDecodeError: If the body is not a JSON object with string
                ``quote`` and ``author`` fields
        """
        response = self._get(self.url)
        try:
            data = response.json()
        except requests.JSONDecodeError as e:
            raise DummyJSONDecodeError(
                f"Quote response is not valid JSON: {e}",
                error_code="INVALID_JSON",
                details={"original_error": str(e), "response": response.text[:500]}
            ) from e
        finally:
            response.close()

        return self._parse_quote(data)

    def _parse_quote(self, data: Any) -> QuoteResult:
        if not isinstance(data, dict):
            raise DummyJSONDecodeError(
                f"Quote response must be a JSON object, got {type(data).__name__}",
                error_code="INVALID_RESPONSE",
                details={"response": data}
            )

        missing = [field for field in REQUIRED_FIELDS if field not in data]
        if missing:
            raise DummyJSONDecodeError(
                f"Quote response is missing field(s): {', '.join(missing)}",
                error_code="MISSING_FIELDS",
                details={"response": data}
            )

        fields: Dict[str, str] = {}
        for field in REQUIRED_FIELDS:
            value = data[field]
            if not isinstance(value, str):
                raise DummyJSONDecodeError(
                    f"Quote field '{field}' must be a string, got {type(value).__name__}",
                    error_code="INVALID_FIELD",
                    details={"field": field, "response": data}
                )
            fields[field] = value

        logger.debug(f"Decoded quote by {fields['author']}")
        return QuoteResult(text=fields["quote"], author=fields["author"])
