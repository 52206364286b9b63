from .abstractsketch import AbstractSketch
from .hyperloglog import HyperLogLog, InvalidPrecisionError, split_hash, leading_zeros64
from .exact import ExactCounter

__all__ = [
    'AbstractSketch',
    'HyperLogLog',
    'InvalidPrecisionError',
    'ExactCounter',
    'split_hash',
    'leading_zeros64',
]
