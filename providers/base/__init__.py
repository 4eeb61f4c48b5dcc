from .exceptions import (
    ProviderError,
    UpstreamDecodeError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from .provider import UpstreamProvider
from .results import ImageResult, QuoteResult

__all__ = [
    "UpstreamProvider",
    "QuoteResult",
    "ImageResult",
    "ProviderError",
    "UpstreamTransportError",
    "UpstreamTimeoutError",
    "UpstreamDecodeError",
]
