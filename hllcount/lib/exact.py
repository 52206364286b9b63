from __future__ import annotations
import sys
from typing import Set
from hllcount.lib.abstractsketch import AbstractSketch, BytesLike

class ExactCounter(AbstractSketch):
    """Exact distinct counter, the baseline HyperLogLog is measured against."""

    def __init__(self):
        """Initialize exact counter."""
        super().__init__()
        self.elements: Set[bytes] = set()

    def add(self, element: BytesLike) -> None:
        """Add a byte sequence to the counter."""
        self.elements.add(self._as_bytes(element))

    def count(self) -> int:
        """Return exact cardinality."""
        return len(self.elements)

    def is_empty(self) -> bool:
        """Check if counter is empty."""
        return not self.elements

    def memory_bytes(self) -> int:
        """Approximate memory held by the stored elements."""
        return sys.getsizeof(self.elements) + sum(sys.getsizeof(e) for e in self.elements)
