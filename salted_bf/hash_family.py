"""Salted hash family built on a single digest algorithm.

Function ``i`` hashes the value followed by the hex digest of ``str(i)``, then
reads the first four bytes of the result as a big-endian unsigned integer and
reduces it into the index space. One algorithm therefore yields ``k``
deterministic, quasi-independent positions.
"""
from __future__ import annotations

from typing import List

from . import digests


def encode_value(value: str) -> bytes:
    """UTF-8 encode ``value``, replacing lone surrogates with U+FFFD.

    Surrogate pairs stored as two code points are joined into the character
    they encode.
    """
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError:
        text = value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        return text.encode("utf-8")


class HashFamily:
    """``num_hashes`` salted functions mapping strings into ``[0, max_items)``."""

    __slots__ = ("algorithm", "num_hashes", "max_items", "_salts")

    def __init__(self, algorithm: str, num_hashes: int, max_items: int) -> None:
        self.algorithm = algorithm
        self.num_hashes = num_hashes
        self.max_items = max_items
        # Salts depend only on the function index, so compute them once.
        self._salts = [self._salt(i) for i in range(num_hashes)]

    def _salt(self, i: int) -> bytes:
        salt_digest = digests.digest(self.algorithm, (encode_value(str(i)),))
        return salt_digest.hex().encode("utf-8")

    def _position(self, data: bytes, salt: bytes) -> int:
        raw = digests.digest(self.algorithm, (data, salt))
        return int.from_bytes(raw[:4], "big") % self.max_items

    def index(self, value: str, i: int) -> int:
        """Return the position chosen by function ``i`` for ``value``."""
        salt = self._salts[i] if 0 <= i < self.num_hashes else self._salt(i)
        return self._position(encode_value(value), salt)

    def indices(self, value: str) -> List[int]:
        """Return the positions of all ``num_hashes`` functions for ``value``."""
        data = encode_value(value)
        return [self._position(data, salt) for salt in self._salts]
