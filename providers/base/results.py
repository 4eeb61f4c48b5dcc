"""Values produced by the upstream providers."""
from dataclasses import dataclass


@dataclass(frozen=True)
class QuoteResult:
    text: str
    author: str


@dataclass(frozen=True)
class ImageResult:
    url: str
