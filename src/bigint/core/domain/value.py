"""
BigInt — Беззнаковое целое произвольной точности

Immutable Pydantic модель: упорядоченная последовательность 8-битных chunks
в little-endian порядке (chunks[0] — младший). Представляет число
Σ chunks[i] × 256^i.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническое представление нуля — пустая последовательность
2. Нормализация (удаление старших нулевых chunks) выполняется при каждом
   создании значения, поэтому структурное равенство == численное равенство
3. Значение не изменяется после создания; арифметика возвращает новый BigInt
"""

from typing import Iterable, Union

from pydantic import BaseModel, Field, field_validator

from bigint.core.domain.base import Base


ChunkSource = Union[bytes, bytearray, Iterable[int]]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_chunks(chunks: bytes) -> bytes:
    """
    Удаление старших (конечных) нулевых chunks.

    Examples:
        >>> trim_chunks(bytes([0xE4, 0x00, 0x00]))
        b'\\xe4'
        >>> trim_chunks(bytes([0, 0]))
        b''
    """
    return chunks.rstrip(b"\x00")


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Неотрицательное целое произвольной величины.

    Хранит chunks как bytes (little-endian). Старшие нулевые chunks
    отбрасываются валидатором, поэтому from_bytes([0, 0, 0]) == from_bytes([]).

    Immutable модель (frozen=True), hashable.
    """

    chunks: bytes = Field(
        default=b"",
        strict=True,
        description="Chunks в little-endian порядке (индекс 0 — младший)",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("chunks")
    @classmethod
    def trim_trailing_zero_chunks(cls, v: bytes) -> bytes:
        """Нормализация: удаление старших нулевых chunks"""
        return trim_chunks(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, chunks: ChunkSource) -> "BigInt":
        """
        Создание BigInt из little-endian chunks без семантической проверки.

        Args:
            chunks: bytes, bytearray или последовательность int в [0, 255]

        Returns:
            Нормализованный BigInt

        Raises:
            TypeError: Если передан int вместо последовательности chunks
            ValueError: Если какой-либо chunk вне [0, 255]

        Examples:
            >>> BigInt.from_bytes([0xE4, 0x08])
            BigInt (2): [228, 8]
            >>> BigInt.from_bytes([0, 0, 0])
            BigInt (0): []
        """
        # bytes(n) создаёт n нулевых байт, а не chunk со значением n
        if isinstance(chunks, int):
            raise TypeError(
                f"chunks must be bytes or an iterable of ints, got int {chunks}"
            )
        return cls(chunks=bytes(chunks))

    @classmethod
    def zero(cls) -> "BigInt":
        """Каноническое значение нуля (пустая последовательность)"""
        return cls(chunks=b"")

    @classmethod
    def from_string(cls, text: str, base: Base) -> "BigInt":
        """Парсинг строки цифр в заданной системе счисления (см. radix.parser)"""
        from bigint.core.radix.parser import from_string

        return from_string(text, base)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """
        Проверка на ноль.

        Returns:
            True если последовательность пуста или все chunks равны нулю
        """
        return not any(self.chunks)

    @property
    def chunk_count(self) -> int:
        """Количество хранимых chunks"""
        return len(self.chunks)

    def to_string(self, base: Base) -> str:
        """Рендеринг в строку цифр в заданной системе счисления (см. radix.renderer)"""
        from bigint.core.radix.renderer import to_string

        return to_string(self, base)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented

        from bigint.core.math.addition import add

        return add(self, other)

    def __repr__(self) -> str:
        # Диагностический формат: количество chunks и их десятичные значения
        values = ", ".join(str(chunk) for chunk in self.chunks)
        return f"BigInt ({len(self.chunks)}): [{values}]"

    def __str__(self) -> str:
        return self.to_string(Base.DECIMAL)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def from_bytes(chunks: ChunkSource) -> BigInt:
    """Создание BigInt из little-endian chunks (см. BigInt.from_bytes)"""
    return BigInt.from_bytes(chunks)
