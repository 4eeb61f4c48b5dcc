"""Lorem Picsum random image integration."""

from .exceptions import PicsumConnectionError
from .integration import PicsumImageProvider

__all__ = ["PicsumImageProvider", "PicsumConnectionError"]
