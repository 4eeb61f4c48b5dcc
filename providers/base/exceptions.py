"""Provider-specific exceptions module."""
from typing import Any, Dict, Optional


class ProviderError(Exception):
    """Base class for all provider-related errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.provider = provider
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class UpstreamTransportError(ProviderError):
    """The upstream could not be reached or answered with an error status."""
    pass


class UpstreamTimeoutError(UpstreamTransportError):
    """The upstream did not answer within the allowed time."""
    pass


class UpstreamDecodeError(ProviderError):
    """A response arrived but its body could not be interpreted."""
    pass
