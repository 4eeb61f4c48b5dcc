"""
Outcome values exchanged between the leaf tasks and the aggregator.

Every leaf task finishes with exactly one ``Success`` or ``Failure``; the
aggregator only inspects them after the join.
"""

from dataclasses import dataclass
from typing import Any, Union

from providers.base.results import ImageResult, QuoteResult


@dataclass(frozen=True)
class Success:
    """A leaf task that produced its value."""

    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A leaf task that failed; ``str(error)`` is the user-facing description."""

    error: Exception

    @property
    def ok(self) -> bool:
        return False


TaskOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class AggregateResult:
    quote: QuoteResult
    image: ImageResult
