from __future__ import annotations
import math
import warnings
from typing import Optional, Tuple
import numpy as np # type: ignore
from hllcount.lib.abstractsketch import AbstractSketch, BytesLike

HASH_BITS = 64
MASK64 = (1 << HASH_BITS) - 1
MIN_PRECISION = 1
MAX_PRECISION = HASH_BITS - 1
RECOMMENDED_PRECISION = (4, 16)

# Durand-Flajolet constant for m=16, applied at every precision by default
FIXED_ALPHA = 0.79402

BIAS_CORRECTIONS = ('fixed', 'flajolet')


class InvalidPrecisionError(ValueError):
    """Raised when a precision cannot index a 64-bit hash."""
    pass


def leading_zeros64(x: int) -> int:
    """Count leading zero bits of a 64-bit unsigned integer (64 for zero)."""
    return HASH_BITS - (x & MASK64).bit_length()


def split_hash(hash_value: int, precision: int) -> Tuple[int, int]:
    """Split a 64-bit hash into a register index and a rank.

    The top `precision` bits select the register. The remaining bits are
    shifted to the top of the word and the rank is one more than their
    leading zero count, so ranks start at 1 and a register value of 0 keeps
    meaning "never touched".

    Args:
        hash_value: 64-bit hash of an element
        precision: Number of index bits

    Returns:
        Tuple of (register index, rank)
    """
    index = hash_value >> (HASH_BITS - precision)
    remaining = (hash_value << precision) & MASK64
    # An all-zero suffix would report 64 zeros; cap at the suffix width
    rank = min(leading_zeros64(remaining) + 1, HASH_BITS - precision + 1)
    return index, rank


class HyperLogLog(AbstractSketch):
    def __init__(self,
                 precision: int = 14,
                 seed: Optional[int] = None,
                 bias_correction: str = 'fixed',
                 debug: bool = False):
        """Initialize HyperLogLog sketch.

        Args:
            precision: Number of hash bits used for register indexing
                      (1-63, recommended 4-16). Standard error is roughly
                      1.04 / sqrt(2**precision).
            seed: Random seed for hashing
            bias_correction: 'fixed' uses alpha = 0.79402 at every precision,
                      'flajolet' derives alpha from the number of registers
            debug: Whether to print debug information

        Raises:
            InvalidPrecisionError: If precision is not an integer in 1-63
            ValueError: If bias_correction is unknown
        """
        super().__init__()

        if isinstance(precision, bool) or not isinstance(precision, (int, np.integer)):
            raise InvalidPrecisionError(f"Precision must be an integer, got {precision!r}")
        if not MIN_PRECISION <= precision <= MAX_PRECISION:
            raise InvalidPrecisionError(
                f"Precision must be between {MIN_PRECISION} and {MAX_PRECISION}, got {precision}")
        if bias_correction not in BIAS_CORRECTIONS:
            raise ValueError(f"Invalid bias_correction: {bias_correction}")

        low, high = RECOMMENDED_PRECISION
        if precision < low or precision > high:
            warnings.warn(f"Precision {precision} is outside recommended range ({low}-{high}). "
                          "This may reduce accuracy or use a lot of memory.", RuntimeWarning)

        self.precision = int(precision)
        self.num_registers = 1 << self.precision
        # Largest rank is 65 - precision, so a byte per register is enough
        self.registers = np.zeros(self.num_registers, dtype=np.uint8)
        self.max_rank = HASH_BITS - self.precision + 1
        self.seed = seed if seed is not None else 42
        self.bias_correction = bias_correction
        self.debug = debug

        self.item_count = 0

        if bias_correction == 'fixed':
            self.alpha = FIXED_ALPHA
        else:
            self.alpha = self._get_alpha(self.num_registers)

    @staticmethod
    def _get_alpha(m: int) -> float:
        """Get alpha constant based on number of registers."""
        if m <= 16:
            return 0.673
        elif m == 32:
            return 0.697
        elif m == 64:
            return 0.709
        else:
            return 0.7213 / (1.0 + 1.079 / m)

    def get_alpha(self) -> float:
        """Return the bias correction factor used by this sketch."""
        return self.alpha

    def add(self, element: BytesLike) -> None:
        """Add a byte sequence to the sketch.

        Args:
            element: Bytes-like value to add; empty input is allowed

        Raises:
            TypeError: If element is not bytes-like
        """
        data = self._as_bytes(element)
        self._update(self.hash64(data))

    def add_int(self, value: int) -> None:
        """Add a signed 64-bit integer to the sketch."""
        self._update(self._hash64_int(value, seed=self.seed))

    def _update(self, hash_value: int) -> None:
        self.item_count += 1
        idx, rank = split_hash(hash_value, self.precision)
        if rank > self.registers[idx]:
            self.registers[idx] = rank

    def raw_estimate(self) -> float:
        """Calculate the raw cardinality estimate before corrections.

        Returns:
            alpha * m^2 / sum(2^-register)
        """
        m = float(self.num_registers)
        # Cast before negating, uint8 negation wraps around
        sum_inv = float(np.sum(np.exp2(-self.registers.astype(np.float64))))
        return self.alpha * m * m / sum_inv

    def zero_registers(self) -> int:
        """Number of registers no element has hashed into."""
        return int(np.count_nonzero(self.registers == 0))

    def linear_count(self) -> float:
        """Linear counting estimate m * ln(m / zeros).

        Falls back to the raw estimate when no register is empty.
        """
        zeros = self.zero_registers()
        if zeros == 0:
            return self.raw_estimate()
        m = float(self.num_registers)
        return m * math.log(m / zeros)

    def count(self) -> int:
        """Estimate the number of distinct elements added.

        Uses linear counting while the raw estimate is at most 2.5 * m and
        some registers are still empty, the raw estimate otherwise. The
        result is truncated toward zero.
        """
        m = self.num_registers
        raw = self.raw_estimate()

        if raw <= 2.5 * m:
            zeros = self.zero_registers()
            if zeros == 0:
                estimate = raw
                branch = 'raw'
            else:
                estimate = m * math.log(m / zeros)
                branch = 'linear'
        else:
            zeros = None
            estimate = raw
            branch = 'raw'

        if self.debug:
            print(f"DEBUG: items={self.item_count}, raw={raw:.1f}, zeros={zeros}, "
                  f"branch={branch}, estimate={estimate:.1f}")
            print(f"DEBUG: register histogram={self.register_histogram().tolist()}")
        return int(estimate)

    def register_histogram(self) -> np.ndarray:
        """Counts of each register value from 0 to the maximum rank."""
        return np.bincount(self.registers, minlength=self.max_rank + 1)

    def standard_error(self) -> float:
        """Theoretical relative standard error for this precision."""
        return 1.04 / math.sqrt(self.num_registers)

    def memory_bytes(self) -> int:
        """Memory used by the register array."""
        return int(self.registers.nbytes)

    def is_empty(self) -> bool:
        """Check if sketch is empty."""
        return not self.registers.any()

    def __repr__(self) -> str:
        return (f"HyperLogLog(precision={self.precision}, seed={self.seed}, "
                f"bias_correction={self.bias_correction!r})")
