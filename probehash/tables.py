"""Open-addressing hash tables that resolve collisions by linear probing."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

GROW_THRESHOLD = 0.7
SHRINK_THRESHOLD = 0.3

_FIB_MULTIPLIER = 11400714819323198485  # about 2**64 / golden ratio
_MASK64 = (1 << 64) - 1


class TableFullError(Exception):
    """Raised when no free slot is left for a new key."""


@dataclass
class _Slot:
    key: str = ""
    value: int = 0
    occupied: bool = False
    deleted: bool = False


def _signed_bytes(key: str) -> Iterator[int]:
    """Yield the UTF-8 bytes of ``key`` as signed 8-bit values."""
    for byte in key.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def _to_float32(number: float) -> float:
    """Round ``number`` to single precision."""
    return struct.unpack("f", struct.pack("f", number))[0]


class LinearProbingTable(ABC):
    """A string-to-int map stored in a flat table with linear probing.

    Deleted entries leave a tombstone so that probe chains stay intact.
    The table doubles when the load factor reaches ``GROW_THRESHOLD``.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"table size must not be negative, got {size}")
        self.size = size
        self.initial_size = size
        self._slots = [_Slot() for _ in range(size)]

    @abstractmethod
    def hash_index(self, key: str) -> int:
        """Return the home slot of ``key``."""

    def _probe(self, key: str) -> Iterator[_Slot]:
        """Yield the slots on the probe sequence of ``key``."""
        if not self.size:
            return
        base = self.hash_index(key)
        for step in range(self.size):
            yield self._slots[(base + step) % self.size]

    def insert(self, key: str, value: int) -> None:
        """Add ``key`` or update its value.

        Raises TableFullError if the probe sequence holds no free slot.
        """
        if self.load_factor() >= GROW_THRESHOLD:
            self.grow()
        for slot in self._probe(key):
            if not slot.occupied:
                slot.key = key
                slot.value = value
                slot.occupied = True
                slot.deleted = False
                return
            if slot.key == key:
                slot.value = value
                return
        raise TableFullError(f"no free slot for key {key!r}")

    def search(self, key: str) -> int | None:
        """Return the value stored under ``key``, or None if it is absent."""
        for slot in self._probe(key):
            if slot.occupied and slot.key == key:
                return slot.value
            if not slot.occupied and not slot.deleted:
                return None
        return None

    def load_factor(self) -> float:
        """Return the share of occupied slots, in single precision.

        A table without slots reports 0.0.
        """
        if not self.size:
            return 0.0
        occupied = sum(1 for slot in self._slots if slot.occupied)
        return _to_float32(occupied / self.size)

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was present."""
        for slot in self._probe(key):
            if slot.occupied and slot.key == key:
                slot.occupied = False
                slot.deleted = True
                return True
            if not slot.occupied and not slot.deleted:
                return False
        if self.load_factor() <= SHRINK_THRESHOLD and self.size > self.initial_size:
            self.shrink()
        return False

    def grow(self) -> None:
        """Double the table and re-insert every entry."""
        self._rebuild(self.size * 2)

    def shrink(self) -> None:
        """Halve the table and re-insert every entry."""
        self._rebuild(self.size // 2)

    def _rebuild(self, new_size: int) -> None:
        old_slots = self._slots
        self.size = new_size
        self._slots = [_Slot() for _ in range(new_size)]
        for slot in old_slots:
            if slot.occupied:
                self.insert(slot.key, slot.value)

    def render(self) -> str:
        """Return one line per slot, or a notice if the table has no slots."""
        if not self._slots:
            return "Hash table is empty."
        return "\n".join(
            f"{index}: {slot.key} -> {slot.value}" if slot.occupied else f"{index}: Empty"
            for index, slot in enumerate(self._slots)
        )


class TraditionalHash(LinearProbingTable):
    """Table whose hash is the sum of the key's character codes."""

    def hash_index(self, key: str) -> int:
        total = sum(_signed_bytes(key))
        if (self.size & (self.size - 1)) == 0:
            return total & (self.size - 1)
        return total % self.size


class FibonacciHash(LinearProbingTable):
    """Table using multiplicative Fibonacci hashing of a polynomial key hash."""

    def hash_index(self, key: str) -> int:
        digest = 0
        for code in _signed_bytes(key):
            digest = (digest * 31 + code) & _MASK64
        shift = 64 - (self.size.bit_length() - 1)
        return ((digest * _FIB_MULTIPLIER) & _MASK64) >> shift