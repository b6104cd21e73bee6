"""Dense membership store for filter positions."""
from __future__ import annotations


class MembershipStore:
    """Bitset of ``size`` positions backed by a bytearray."""

    __slots__ = ("size", "_bit_array")

    def __init__(self, size: int) -> None:
        self.size = size
        self._bit_array = bytearray((size + 7) // 8)

    def activate(self, index: int) -> None:
        """Mark ``index`` active. Activating twice is a no-op."""
        self._bit_array[index >> 3] |= 1 << (index & 7)

    def is_active(self, index: int) -> bool:
        return bool(self._bit_array[index >> 3] & (1 << (index & 7)))

    @property
    def activated_count(self) -> int:
        """Number of active positions."""
        return sum(bin(byte).count("1") for byte in self._bit_array)

    @property
    def bit_array(self) -> bytearray:
        """Expose the underlying bit array (primarily for inspection)."""
        return self._bit_array
