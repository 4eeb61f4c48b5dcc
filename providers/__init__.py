"""
Upstream providers package.

This package contains the integrations the aggregator fans out to: a random
quote from DummyJSON and a random image URL from Lorem Picsum.
"""

from .dummyjson import DummyJSONQuoteProvider
from .picsum import PicsumImageProvider

__all__ = ["DummyJSONQuoteProvider", "PicsumImageProvider"]
