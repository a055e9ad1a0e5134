"""Bloom filter backed by seeded FNV-1a hashes."""

from __future__ import annotations

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1


def _fnv1a64(data: bytes) -> int:
    value = _FNV64_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


def _as_bytes(item: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(item, str):
        return item.encode("utf-8")
    return bytes(item)


class BloomFilter:
    """Probabilistic set membership over ``m`` bits with ``k`` hash functions.

    Items are bytes-like objects or strings (encoded as UTF-8).
    """

    def __init__(self, m: int, k: int) -> None:
        if m <= 0:
            raise ValueError("bit array size must be positive")
        if k < 0:
            raise ValueError("number of hash functions must not be negative")
        self._m = m
        self._k = k
        self._bits = [False] * m

    def __repr__(self) -> str:
        return f"{type(self).__name__}(m={self._m}, k={self._k})"

    def _indices(self, item: bytes | bytearray | memoryview | str) -> list[int]:
        data = _as_bytes(item)
        return [
            _fnv1a64(data + bytes([seed & 0xFF])) % self._m for seed in range(self._k)
        ]

    def add(self, item: bytes | bytearray | memoryview | str) -> None:
        """Record ``item`` in the filter."""
        for index in self._indices(item):
            self._bits[index] = True

    def contains(self, item: bytes | bytearray | memoryview | str) -> bool:
        """Return False if ``item`` was certainly never added, True if it may have been."""
        return all(self._bits[index] for index in self._indices(item))

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (bytes, bytearray, memoryview, str)):
            return False
        return self.contains(item)