"""
Parser — Построение BigInt из строки цифр

Схема Горнера: для каждого символа слева направо
    value = value × radix + digit
через multiply_by_small и add однобайтового значения digit.

Политика ошибок: любой символ, не являющийся цифрой для выбранного основания
(в том числе пробелы, знаки и не-ASCII символы), отклоняется
InvalidDigitError. Частично построенное значение не возвращается.

Сложность O(n²) по числу цифр.
"""

import logging

from bigint.core.domain.base import Base, digit_value
from bigint.core.domain.value import BigInt
from bigint.core.math.addition import add
from bigint.core.math.primitives import multiply_by_small

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitError(ValueError):
    """
    Символ строки не является допустимой цифрой для основания.

    Attributes:
        character: Отклонённый символ
        position: Индекс символа во входной строке
        base: Основание, для которого выполнялся парсинг
    """

    def __init__(self, character: str, position: int, base: Base):
        self.character = character
        self.position = position
        self.base = base
        super().__init__(
            f"invalid digit for base {base.radix}: {character!r} at position {position}"
        )


# =============================================================================
# FROM STRING
# =============================================================================


def from_string(text: str, base: Base) -> BigInt:
    """
    Парсинг строки цифр в заданной системе счисления.

    Args:
        text: Строка цифр без знака и префикса ('0x' и т.п. не поддерживаются)
        base: Система счисления

    Returns:
        BigInt; пустая строка и строка из нулей → ноль

    Raises:
        InvalidDigitError: Если символ не является цифрой или digit >= radix

    Examples:
        >>> from_string("1234", Base.DECIMAL)
        BigInt (2): [210, 4]
        >>> from_string("ff", Base.HEXADECIMAL)
        BigInt (1): [255]
        >>> from_string("", Base.DECIMAL)
        BigInt (0): []
    """
    radix = base.radix
    value = BigInt.zero()

    for position, character in enumerate(text):
        digit = digit_value(character)

        if digit is None or digit >= radix:
            logger.debug(
                "Rejected %r at position %d while parsing %d-character string in base %d",
                character,
                position,
                len(text),
                radix,
            )
            raise InvalidDigitError(character, position, base)

        value = add(multiply_by_small(value, radix), BigInt.from_bytes([digit]))

    return value
