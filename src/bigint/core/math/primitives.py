"""
Single-Chunk Primitives — Умножение и деление на малый скаляр

Строительные блоки парсера и рендерера:
- multiply_by_small: BigInt × скаляр с распространением carry
- divide_by_small: BigInt ÷ делитель → (частное, остаток)

Скаляр и делитель помещаются в один chunk ([0, 255] и [1, 255]).
Промежуточные вычисления выполняются в int без ограничения разрядности,
итоговый chunk = результат mod CHUNK_BASE, carry = результат div CHUNK_BASE.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализован (без старших нулевых chunks)
2. Операнд не изменяется, возвращается новый BigInt
3. Деление на ноль → ZeroDivisionError, частичный результат не возвращается
"""

from typing import Final, NamedTuple

from bigint.core.domain.value import BigInt, trim_chunks

# =============================================================================
# ПАРАМЕТРЫ CHUNK
# =============================================================================

# Ширина одного chunk в битах
CHUNK_BITS: Final[int] = 8

# Основание позиционного представления: 2^CHUNK_BITS
CHUNK_BASE: Final[int] = 1 << CHUNK_BITS

# Максимальное значение одного chunk
CHUNK_MAX: Final[int] = CHUNK_BASE - 1


# =============================================================================
# TYPES
# =============================================================================


class DivisionResult(NamedTuple):
    """Результат divide_by_small"""

    quotient: BigInt
    remainder: int


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def _validate_small(name: str, value: int, min_value: int) -> None:
    if not min_value <= value <= CHUNK_MAX:
        raise ValueError(f"{name} must be in [{min_value}, {CHUNK_MAX}], got {value}")


# =============================================================================
# MULTIPLY BY SMALL
# =============================================================================


def multiply_by_small(value: BigInt, scalar: int) -> BigInt:
    """
    Умножение BigInt на скаляр, помещающийся в один chunk.

    Для каждого chunk: product = chunk × scalar + carry;
    chunk' = product mod 256, carry = product div 256.
    Оставшийся carry дописывается новыми старшими chunks.

    Args:
        value: Множимое
        scalar: Множитель в [0, 255]

    Returns:
        Новый BigInt = value × scalar

    Raises:
        ValueError: Если scalar вне [0, 255]

    Examples:
        >>> multiply_by_small(BigInt.from_bytes([0xFF]), 2)
        BigInt (2): [254, 1]
        >>> multiply_by_small(BigInt.zero(), 10)
        BigInt (0): []
    """
    _validate_small("scalar", scalar, 0)

    # Short-circuit: не порождаем лишних нулевых chunks
    if value.is_zero() or scalar == 0:
        return BigInt.zero()

    result = bytearray()
    carry = 0

    for chunk in value.chunks:
        product = chunk * scalar + carry
        result.append(product % CHUNK_BASE)
        carry = product // CHUNK_BASE

    while carry:
        result.append(carry % CHUNK_BASE)
        carry //= CHUNK_BASE

    return BigInt.from_bytes(result)


# =============================================================================
# DIVIDE BY SMALL
# =============================================================================


def divide_by_small(value: BigInt, divisor: int) -> DivisionResult:
    """
    Деление BigInt на делитель, помещающийся в один chunk.

    Проход от старшего chunk к младшему с накоплением остатка:
        r = r × 256 + chunk[i]
        quotient[i] = r // divisor
        r = r % divisor

    Частное нормализуется, поэтому повторное деление сходится к
    значению, для которого is_zero() == True.

    Args:
        value: Делимое
        divisor: Делитель в [1, 255]

    Returns:
        DivisionResult(quotient, remainder), 0 <= remainder < divisor

    Raises:
        ZeroDivisionError: Если divisor == 0
        ValueError: Если divisor вне [1, 255]

    Examples:
        >>> divide_by_small(BigInt.from_bytes([0xD2, 0x04]), 10)
        DivisionResult(quotient=BigInt (1): [123], remainder=4)
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    _validate_small("divisor", divisor, 1)

    chunks = value.chunks
    quotient = bytearray(len(chunks))
    remainder = 0

    for index in reversed(range(len(chunks))):
        remainder = remainder * CHUNK_BASE + chunks[index]
        quotient[index] = remainder // divisor
        remainder %= divisor

    return DivisionResult(BigInt.from_bytes(quotient), remainder)
