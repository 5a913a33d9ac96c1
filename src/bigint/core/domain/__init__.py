"""
Domain models and value objects.

Contains the BigInt value type and the Base radix descriptor.
"""

from bigint.core.domain.base import (
    DIGIT_ALPHABET,
    Base,
    digit_char,
    digit_value,
)
from bigint.core.domain.value import BigInt, from_bytes, trim_chunks

__all__ = [
    # Base module
    "DIGIT_ALPHABET",
    "Base",
    "digit_char",
    "digit_value",
    # BigInt model
    "BigInt",
    "from_bytes",
    "trim_chunks",
]
