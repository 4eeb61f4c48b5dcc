"""
Lorem Picsum Integration

``GET https://picsum.photos/800/600`` answers with a redirect to a randomly
chosen concrete image, e.g. ``https://picsum.photos/id/42/800/600``. The
redirect target is the result; the image bytes are never downloaded.
"""

import logging
from typing import Optional
from urllib.parse import urljoin

from providers.base.provider import UpstreamProvider
from providers.base.results import ImageResult

from .exceptions import PicsumConnectionError

logger = logging.getLogger(__name__)


class PicsumImageProvider(UpstreamProvider):
    """Resolves a random image URL from Lorem Picsum."""

    BASE_URL = "https://picsum.photos"
    IMAGE_ENDPOINT = "/800/600"
    connection_error = PicsumConnectionError

    def __init__(self, url: Optional[str] = None, timeout: float = 10,
                 user_agent: Optional[str] = None):
        super().__init__(name="Picsum", base_url=self.BASE_URL,
                         timeout=timeout, user_agent=user_agent)
        self.url = url or urljoin(self.BASE_URL, self.IMAGE_ENDPOINT)

    def fetch(self) -> ImageResult:
        return self.get_image()

    def get_image(self) -> ImageResult:
        """Follow the redirect chain and return the URL it ends at.

        Raises:
            PicsumConnectionError: If the chain can't be followed or ends in an error status
        """
        # stream=True keeps the image body unread; only the headers matter here
        response = self._get(self.url, allow_redirects=True, stream=True)
        try:
            final_url = response.url
        finally:
            response.close()

        logger.debug(f"Resolved {self.url} to {final_url} in {len(response.history)} redirect(s)")
        return ImageResult(url=final_url)
