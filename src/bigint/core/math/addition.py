"""
Multi-Precision Addition & Equality

Сложение двух BigInt произвольной длины с распространением carry и
поэлементное сравнение на равенство.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Недостающие chunks более короткого операнда считаются нулевыми
2. Финальный carry дописывается одним chunk, результат никогда не усекается
3. Операнды не изменяются, возвращается новый BigInt

ФОРМУЛЫ:
    sum_i = a[i] + b[i] + carry_in
    c[i] = sum_i mod 256
    carry_out = sum_i div 256   (0 или 1)
"""

from bigint.core.domain.value import BigInt
from bigint.core.math.primitives import CHUNK_BASE


# =============================================================================
# ADD
# =============================================================================


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Сложение двух BigInt.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Новый BigInt = a + b

    Examples:
        >>> add(BigInt.from_bytes([0xFF, 0xFF]), BigInt.from_bytes([0x01]))
        BigInt (3): [0, 0, 1]
        >>> add(BigInt.from_bytes([0xE4, 0x08]), BigInt.from_bytes([0xF1, 0x03]))
        BigInt (2): [213, 12]
    """
    left = a.chunks
    right = b.chunks
    longest = max(len(left), len(right))

    result = bytearray()
    carry = 0

    for index in range(longest):
        left_chunk = left[index] if index < len(left) else 0
        right_chunk = right[index] if index < len(right) else 0

        total = left_chunk + right_chunk + carry
        result.append(total % CHUNK_BASE)
        carry = total // CHUNK_BASE

    # Единственный путь роста результата
    if carry:
        result.append(carry)

    return BigInt.from_bytes(result)


# =============================================================================
# EQUALS
# =============================================================================


def equals(a: BigInt, b: BigInt) -> bool:
    """
    Поэлементное равенство chunks, включая длину.

    Оба значения нормализованы при создании, поэтому численно равные
    BigInt всегда имеют одинаковые chunks.
    """
    return a.chunks == b.chunks
