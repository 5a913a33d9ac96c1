"""
Core domain models, arithmetic primitives, and invariants.

This module contains the foundational building blocks of the byte-chunked
unsigned integer engine: the value type, single-chunk primitives,
multi-precision addition, and radix conversion.
"""
