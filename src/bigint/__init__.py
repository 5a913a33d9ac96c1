"""
bigint — byte-chunked arbitrary-precision unsigned integers.

Public API:
- BigInt.from_bytes / from_bytes: raw little-endian construction
- from_string / to_string: radix conversion (bases 2, 8, 10, 16)
- add / equals: multi-precision addition and equality
"""

import logging

from bigint.core.domain import Base, BigInt, from_bytes
from bigint.core.math import (
    DivisionResult,
    add,
    divide_by_small,
    equals,
    multiply_by_small,
)
from bigint.core.radix import InvalidDigitError, from_string, to_string

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Base",
    "BigInt",
    "DivisionResult",
    # Exceptions
    "InvalidDigitError",
    # Functions
    "from_bytes",
    "from_string",
    "to_string",
    "add",
    "equals",
    "multiply_by_small",
    "divide_by_small",
]
