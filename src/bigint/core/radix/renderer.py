"""
Renderer — Преобразование BigInt в строку цифр

Повторное деление рабочей копии на radix через divide_by_small: каждый остаток
даёт следующую младшую цифру, частное заменяет рабочее значение. Цифры
собираются от младшей к старшей и разворачиваются перед склейкой.

Результат: без ведущих нулей, цифры ≥ 10 в верхнем регистре, ноль → "0".
"""

import logging

from bigint.core.domain.base import Base, digit_char
from bigint.core.domain.value import BigInt
from bigint.core.math.primitives import divide_by_small

logger = logging.getLogger(__name__)


def to_string(value: BigInt, base: Base) -> str:
    """
    Рендеринг BigInt в строку цифр.

    Args:
        value: Значение
        base: Система счисления

    Returns:
        Строка цифр без ведущих нулей

    Examples:
        >>> to_string(BigInt.from_bytes([0xD2, 0x02, 0x96, 0x49]), Base.HEXADECIMAL)
        '499602D2'
        >>> to_string(BigInt.from_bytes([0, 0, 0]), Base.DECIMAL)
        '0'
    """
    if value.is_zero():
        return "0"

    radix = base.radix
    digits: list[str] = []
    working = value

    while not working.is_zero():
        working, remainder = divide_by_small(working, radix)
        digits.append(digit_char(remainder))

    logger.debug("Rendered %d chunks as %d digits in base %d", value.chunk_count, len(digits), radix)

    return "".join(reversed(digits))
