"""Engine error types."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a caller passes a malformed curve or analysis parameter.

    Always raised before any computation starts.
    """
