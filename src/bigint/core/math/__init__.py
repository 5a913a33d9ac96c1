"""
Core math modules для bigint

Арифметические примитивы над byte-chunked представлением.
"""

# Single-Chunk Primitives
from bigint.core.math.primitives import (
    # Chunk constants
    CHUNK_BASE,
    CHUNK_BITS,
    CHUNK_MAX,
    # Types
    DivisionResult,
    # Functions
    divide_by_small,
    multiply_by_small,
    trim_chunks,
)

# Multi-Precision Addition
from bigint.core.math.addition import (
    add,
    equals,
)

__all__ = [
    # Single-Chunk Primitives — Constants
    "CHUNK_BASE",
    "CHUNK_BITS",
    "CHUNK_MAX",
    # Single-Chunk Primitives — Types
    "DivisionResult",
    # Single-Chunk Primitives — Functions
    "divide_by_small",
    "multiply_by_small",
    "trim_chunks",
    # Addition — Functions
    "add",
    "equals",
]
