"""Picsum-specific exceptions."""
from typing import Any, Dict, Optional

from providers.base.exceptions import UpstreamTransportError


class PicsumConnectionError(UpstreamTransportError):
    """Raised when the Picsum redirect chain cannot be resolved."""

    def __init__(self, message: str, provider: str = "Picsum",
                 error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, provider=provider, error_code=error_code, details=details)
