from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Union
import xxhash # type: ignore

BytesLike = Union[bytes, bytearray, memoryview]


class AbstractSketch(ABC):
    """Base class for all distinct counters."""

    @abstractmethod
    def add(self, element: BytesLike) -> None:
        """Add a byte sequence to the sketch."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the (estimated) number of distinct elements added."""
        pass

    def add_string(self, s: str) -> None:
        """Add a string to the sketch.

        Args:
            s: String to add, encoded as UTF-8 before hashing
        """
        self.add(s.encode("utf-8"))

    def add_batch(self, elements: Iterable[Union[str, BytesLike]]) -> None:
        """Add multiple elements to the sketch.

        Args:
            elements: Strings or byte sequences to add to the sketch
        """
        for element in elements:
            if isinstance(element, str):
                self.add_string(element)
            else:
                self.add(element)

    @staticmethod
    def _as_bytes(element: BytesLike) -> bytes:
        """Validate a bytes-like element and return it as bytes.

        Raises:
            TypeError: If element is a str or is not bytes-like
        """
        if isinstance(element, bytes):
            return element
        if isinstance(element, (bytearray, memoryview)):
            return bytes(element)
        if isinstance(element, str):
            raise TypeError("add() takes bytes, use add_string() for str")
        raise TypeError(f"Expected a bytes-like element, got {type(element).__name__}")

    # Hash functions - static methods for use by all sketch implementations
    @staticmethod
    def _hash64(data: bytes, seed: int = 0) -> int:
        """64-bit hash function for byte sequences.

        Args:
            data: Bytes to hash
            seed: Random seed for hashing

        Returns:
            64-bit hash value as integer
        """
        return xxhash.xxh64_intdigest(data, seed=seed)

    @staticmethod
    def _hash64_int(x: int, seed: int = 0) -> int:
        """64-bit hash function for signed 64-bit integers."""
        hasher = xxhash.xxh64(seed=seed)
        hasher.update(x.to_bytes(8, byteorder='little', signed=True))
        return hasher.intdigest()

    def hash64(self, data: bytes) -> int:
        """Instance method to hash bytes using the sketch's seed (if available)."""
        seed = getattr(self, 'seed', 0)
        return self._hash64(data, seed=seed)
