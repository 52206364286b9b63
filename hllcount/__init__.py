"""
hllcount - Python Library for HyperLogLog Cardinality Estimation
"""

from hllcount.lib.hyperloglog import HyperLogLog, InvalidPrecisionError
from hllcount.lib.exact import ExactCounter

__version__ = '0.1.0'

__all__ = [
    'HyperLogLog',
    'InvalidPrecisionError',
    'ExactCounter',
]
