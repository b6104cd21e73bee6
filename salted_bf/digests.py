"""Digest algorithms available to the hash family.

The supported set is discovered at runtime: everything ``hashlib`` reports,
plus the xxHash and MurmurHash3 families. Every algorithm is driven through
the same ``update``/``digest`` protocol so the hash family can stay agnostic.
"""
from __future__ import annotations

import hashlib
import logging
from typing import Callable, Dict, FrozenSet, Iterable

import mmh3
import xxhash

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Minimum digest width: the hash family reads a 32-bit word from the front.
MIN_DIGEST_SIZE = 4

# Extendable-output functions need an explicit length; these are the common
# fixed lengths other runtimes default to.
_SHAKE_LENGTHS: Dict[str, int] = {"shake_128": 16, "shake_256": 32}

_MMH3_HASHERS: Dict[str, Callable] = {
    "mmh3_32": mmh3.mmh3_32,
    "mmh3_x64_128": mmh3.mmh3_x64_128,
    "mmh3_x86_128": mmh3.mmh3_x86_128,
}


def supported_algorithms() -> FrozenSet[str]:
    """Return every digest name the current interpreter can resolve."""
    names = set(hashlib.algorithms_available)
    names.update(xxhash.algorithms_available)
    names.update(_MMH3_HASHERS)
    return frozenset(names)


def is_supported(algorithm: str) -> bool:
    return algorithm in supported_algorithms()


def _new_hasher(algorithm: str):
    if algorithm in _MMH3_HASHERS:
        return _MMH3_HASHERS[algorithm]()
    if algorithm in xxhash.algorithms_available:
        return getattr(xxhash, algorithm)()
    return hashlib.new(algorithm)


def digest(algorithm: str, chunks: Iterable[bytes]) -> bytes:
    """Feed ``chunks`` in order to a fresh ``algorithm`` hasher and return its digest."""
    hasher = _new_hasher(algorithm)
    for chunk in chunks:
        hasher.update(chunk)
    length = _SHAKE_LENGTHS.get(algorithm)
    if length is not None:
        return hasher.digest(length)
    return hasher.digest()


def resolve(algorithm: str) -> str:
    """Validate ``algorithm`` and return it.

    Raises:
        ConfigurationError: If the name is not in the supported set, cannot be
            instantiated by the backing library, or digests too short.
    """
    if not is_supported(algorithm):
        logger.debug("rejecting digest algorithm %r", algorithm)
        raise ConfigurationError(f"Algorithm not supported {algorithm}")
    # hashlib lists some OpenSSL digests that the provider refuses to build.
    try:
        probe = digest(algorithm, (b"",))
    except ValueError as exc:
        logger.debug("digest algorithm %r listed but unusable: %s", algorithm, exc)
        raise ConfigurationError(f"Algorithm not supported {algorithm}") from exc
    if len(probe) < MIN_DIGEST_SIZE:
        raise ConfigurationError(
            f"Algorithm {algorithm} digests {len(probe)} bytes, need at least {MIN_DIGEST_SIZE}"
        )
    return algorithm
