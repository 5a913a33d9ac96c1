"""
Base — Системы счисления для парсинга и рендеринга

Immutable перечисление поддерживаемых оснований (2, 8, 10, 16) и
единственный допустимый способ отображения цифр в символы и обратно:
- '0'-'9' → 0-9
- 'A'-'Z' / 'a'-'z' → 10-35 (без учёта регистра)

При рендеринге цифры ≥ 10 всегда выводятся в верхнем регистре.
"""

from enum import Enum
from typing import Final, Optional


# =============================================================================
# АЛФАВИТ ЦИФР
# =============================================================================

# Символ цифры по её значению: DIGIT_ALPHABET[d] для d в [0, 35]
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


# =============================================================================
# ENUMS
# =============================================================================


class Base(str, Enum):
    """Основание системы счисления"""

    BINARY = "binary"  # 2
    OCTAL = "octal"  # 8
    DECIMAL = "decimal"  # 10
    HEXADECIMAL = "hexadecimal"  # 16

    @property
    def radix(self) -> int:
        """Числовое основание (2, 8, 10 или 16)"""
        return _RADIX_BY_BASE[self]

    @classmethod
    def from_radix(cls, radix: int) -> "Base":
        """
        Поиск Base по числовому основанию.

        Args:
            radix: Числовое основание

        Returns:
            Соответствующий Base

        Raises:
            ValueError: Если основание не поддерживается

        Examples:
            >>> Base.from_radix(16)
            <Base.HEXADECIMAL: 'hexadecimal'>
        """
        for base, value in _RADIX_BY_BASE.items():
            if value == radix:
                return base
        raise ValueError(
            f"Unsupported radix {radix}, expected one of {sorted(_RADIX_BY_BASE.values())}"
        )


_RADIX_BY_BASE: Final[dict[Base, int]] = {
    Base.BINARY: 2,
    Base.OCTAL: 8,
    Base.DECIMAL: 10,
    Base.HEXADECIMAL: 16,
}


# =============================================================================
# ОТОБРАЖЕНИЕ ЦИФР
# =============================================================================


def digit_value(character: str) -> Optional[int]:
    """
    Значение цифры для одного символа.

    Args:
        character: Один символ

    Returns:
        Значение в [0, 35] или None, если символ не является цифрой
        ни в одной системе счисления (пробел, знак, не-ASCII и т.п.)

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("b")
        11
        >>> digit_value("-") is None
        True
    """
    # Только ASCII: некоторые Unicode-символы в upper() превращаются в ASCII буквы
    if len(character) != 1 or not character.isascii():
        return None

    index = DIGIT_ALPHABET.find(character.upper())
    if index < 0:
        return None
    return index


def digit_char(value: int) -> str:
    """
    Символ цифры (верхний регистр) по её значению.

    Args:
        value: Значение цифры в [0, 35]

    Returns:
        Символ '0'-'9' или 'A'-'Z'

    Raises:
        ValueError: Если значение вне [0, 35]
    """
    if not 0 <= value < len(DIGIT_ALPHABET):
        raise ValueError(f"digit value must be in [0, {len(DIGIT_ALPHABET) - 1}], got {value}")
    return DIGIT_ALPHABET[value]
