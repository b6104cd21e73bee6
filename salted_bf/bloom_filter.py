"""Bloom filter over a salted digest hash family.

Positions come from one digest algorithm salted per function index (see
``hash_family``), and the number of functions is derived from the expected
item count and the desired false positive rate.

By default ``contains`` reports a value as present when *any* of its positions
is active, which is how existing deployments of this filter behave. That is
looser than the textbook contract the sizing formulas assume, so the observed
false positive rate sits well above ``desired_false_positive_rate``. Pass
``match="all"`` to require every position instead.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from . import digests
from .bit_store import MembershipStore
from .errors import ConfigurationError
from .hash_family import HashFamily
from .sizing import bit_space_size, hash_function_count

logger = logging.getLogger(__name__)

DEFAULT_EXPECTED_ITEMS = 100
DEFAULT_FALSE_POSITIVE_RATE = 0.01
DEFAULT_DIGEST_ALGORITHM = "sha1"
MATCH_MODES = ("any", "all")


class BloomFilter:
    """Bloom filter backed by a bytearray bitset of ``max_items`` bits."""

    def __init__(
        self,
        expected_items: int = DEFAULT_EXPECTED_ITEMS,
        max_items: Optional[int] = None,
        desired_false_positive_rate: float = DEFAULT_FALSE_POSITIVE_RATE,
        digest_algorithm: str = DEFAULT_DIGEST_ALGORITHM,
        *,
        match: str = "any",
    ) -> None:
        """Initialize a Bloom filter.

        Args:
            expected_items: Design capacity used for sizing.
            max_items: Size of the index space; defaults to ``expected_items * 5``.
            desired_false_positive_rate: Target rate fed to the sizing formula.
            digest_algorithm: Name from ``digests.supported_algorithms()``.
            match: ``"any"`` or ``"all"``; how many positions ``contains`` needs.

        Raises:
            ConfigurationError: If the digest algorithm or match mode is
                unknown, or a numeric option is out of range.
        """
        if max_items is None:
            max_items = expected_items * 5
        if expected_items <= 0:
            raise ConfigurationError("expected_items must be positive")
        if max_items <= 0:
            raise ConfigurationError("max_items must be positive")
        if not 0 < desired_false_positive_rate < 1:
            raise ConfigurationError("desired_false_positive_rate must be in (0, 1)")
        if match not in MATCH_MODES:
            raise ConfigurationError(f"match must be one of {MATCH_MODES}, got {match!r}")

        self._digest_algorithm = digests.resolve(digest_algorithm)
        self._expected_items = expected_items
        self._max_items = max_items
        self._match = match
        self._number_of_functions = hash_function_count(
            bit_space_size(expected_items, desired_false_positive_rate), max_items
        )
        self._hash_family = HashFamily(self._digest_algorithm, self._number_of_functions, max_items)
        self._store = MembershipStore(max_items)
        logger.debug(
            "bloom filter ready: expected_items=%d max_items=%d k=%d digest=%s match=%s",
            expected_items,
            max_items,
            self._number_of_functions,
            self._digest_algorithm,
            match,
        )

    @property
    def expected_items(self) -> int:
        return self._expected_items

    @property
    def max_items(self) -> int:
        return self._max_items

    @property
    def number_of_functions(self) -> int:
        return self._number_of_functions

    @property
    def digest_algorithm(self) -> str:
        return self._digest_algorithm

    @property
    def match(self) -> str:
        return self._match

    def add(self, value: str) -> None:
        """Insert ``value`` into the filter."""
        for index in self._hash_family.indices(value):
            self._store.activate(index)

    def update(self, values: Iterable[str]) -> None:
        """Insert all ``values`` into the filter."""
        for value in values:
            self.add(value)

    def contains(self, value: str) -> bool:
        """Return True if ``value`` may be present, False if definitely absent."""
        hits = (self._store.is_active(index) for index in self._hash_family.indices(value))
        if self._match == "all":
            return all(hits)
        return any(hits)

    def __contains__(self, value: str) -> bool:
        return self.contains(value)

    @property
    def activated_count(self) -> int:
        """Number of active positions in the store."""
        return self._store.activated_count

    @property
    def bit_array(self) -> bytearray:
        """Expose the underlying bit array (primarily for inspection)."""
        return self._store.bit_array

    def __repr__(self) -> str:
        return (
            f"BloomFilter(expected_items={self._expected_items}, max_items={self._max_items}, "
            f"number_of_functions={self._number_of_functions}, "
            f"digest_algorithm={self._digest_algorithm!r}, match={self._match!r})"
        )
