"""
Radix conversion

Парсинг строк цифр в BigInt и рендеринг BigInt в строки цифр
для оснований 2, 8, 10 и 16.
"""

from bigint.core.radix.parser import InvalidDigitError, from_string
from bigint.core.radix.renderer import to_string

__all__ = [
    # Exceptions
    "InvalidDigitError",
    # Functions
    "from_string",
    "to_string",
]
