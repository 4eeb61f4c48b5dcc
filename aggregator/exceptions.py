"""Exceptions for the aggregator module"""

from typing import Any, Dict, Optional


class AggregatorError(Exception):
    """Base exception for all aggregator-related errors."""

    def __init__(
        self,
        message: str = "An error occurred in the aggregator",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class AggregationError(AggregatorError):
    """
    One or more leaf tasks failed.

    ``task`` names the leaf whose failure is surfaced and ``cause`` is that
    leaf's exception. The message is the cause's own description.
    """

    def __init__(
        self,
        task: str,
        cause: Exception,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.task = task
        self.cause = cause
        super().__init__(str(cause), details)
