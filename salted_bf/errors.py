"""Exceptions raised by the salted Bloom filter."""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a filter cannot be built from the given options."""
