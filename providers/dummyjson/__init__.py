"""DummyJSON random quote API integration."""

from .exceptions import DummyJSONConnectionError, DummyJSONDecodeError
from .integration import DummyJSONQuoteProvider

__all__ = [
    "DummyJSONQuoteProvider",
    "DummyJSONConnectionError",
    "DummyJSONDecodeError",
]
