"""DummyJSON-specific exceptions."""
from typing import Any, Dict, Optional

from providers.base.exceptions import UpstreamDecodeError, UpstreamTransportError


class DummyJSONConnectionError(UpstreamTransportError):
    """Raised when we can't reach the DummyJSON quotes API."""

    def __init__(self, message: str, provider: str = "DummyJSON",
                 error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, provider=provider, error_code=error_code, details=details)


class DummyJSONDecodeError(UpstreamDecodeError):
    """Raised when the quote payload is not the JSON object we expect."""

    def __init__(self, message: str, provider: str = "DummyJSON",
                 error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, provider=provider, error_code=error_code, details=details)
