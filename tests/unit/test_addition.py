"""
Тесты для Multi-Precision Addition & Equality

Проверяет:
1. Сложение операндов одинаковой и разной длины
2. Распространение carry и рост результата
3. Аддитивную единицу и коммутативность
4. equals
"""

from bigint.core.domain.value import BigInt
from bigint.core.math.addition import add, equals


class TestAdd:
    """Тесты для add"""

    def test_same_length(self) -> None:
        """Операнды одинаковой длины"""
        a = BigInt.from_bytes([0xE4, 0x08])
        b = BigInt.from_bytes([0xF1, 0x03])

        assert add(a, b) == BigInt.from_bytes([0xD5, 0x0C])

    def test_different_length(self) -> None:
        """Короткий операнд дополняется нулями"""
        a = BigInt.from_bytes([0xE4, 0x08])
        b = BigInt.from_bytes([0xF1, 0x03, 0x02])

        assert add(a, b) == BigInt.from_bytes([0xD5, 0x0C, 0x02])

    def test_different_length_with_overflow(self) -> None:
        """Carry проходит через все chunks и добавляет новый"""
        a = BigInt.from_bytes([0xFF, 0xFF])
        b = BigInt.from_bytes([0x01])

        assert add(a, b) == BigInt.from_bytes([0x00, 0x00, 0x01])

    def test_same_length_with_overflow(self) -> None:
        """Переполнение при одинаковой длине"""
        a = BigInt.from_bytes([0xFF, 0xFF])
        b = BigInt.from_bytes([0x01, 0x01])

        assert add(a, b) == BigInt.from_bytes([0x00, 0x01, 0x01])

    def test_max_chunks_overflow(self) -> None:
        """0xFF + 0xFF = 0x1FE"""
        a = BigInt.from_bytes([0xFF])

        assert add(a, a) == BigInt.from_bytes([0xFE, 0x01])

    def test_result_grows_by_one_chunk_at_most(self) -> None:
        """Результат длиннее самого длинного операнда не более чем на один chunk"""
        a = BigInt.from_bytes([0xFF] * 8)
        b = BigInt.from_bytes([0xFF] * 8)

        result = add(a, b)

        assert result.chunk_count == 9
        assert result.chunks == bytes([0xFE] + [0xFF] * 7 + [0x01])

    def test_additive_identity(self) -> None:
        """v + 0 == v"""
        value = BigInt.from_bytes([0xE4, 0x08])

        assert add(value, BigInt.from_bytes([])) == value
        assert add(BigInt.from_bytes([]), value) == value

    def test_zero_plus_zero(self) -> None:
        """0 + 0 → канонический ноль"""
        result = add(BigInt.zero(), BigInt.from_bytes([0, 0]))

        assert result.is_zero()
        assert result.chunks == b""

    def test_commutative(self) -> None:
        """a + b == b + a"""
        a = BigInt.from_bytes([0x12, 0xFF, 0x7A])
        b = BigInt.from_bytes([0xEE, 0x01])

        assert add(a, b) == add(b, a)

    def test_operands_not_mutated(self) -> None:
        """Операнды не изменяются"""
        a = BigInt.from_bytes([0xFF, 0xFF])
        b = BigInt.from_bytes([0x01])

        add(a, b)

        assert a == BigInt.from_bytes([0xFF, 0xFF])
        assert b == BigInt.from_bytes([0x01])


class TestEquals:
    """Тесты для equals"""

    def test_equal(self) -> None:
        """Одинаковые chunks"""
        assert equals(BigInt.from_bytes([0xE4, 0x08]), BigInt.from_bytes([0xE4, 0x08]))

    def test_not_equal_lengths(self) -> None:
        """Разная длина"""
        assert not equals(BigInt.from_bytes([0xE4, 0x08]), BigInt.from_bytes([0xE4]))

    def test_equal_after_normalization(self) -> None:
        """Нормализация при создании делает равными [0xE4, 0] и [0xE4]"""
        assert equals(BigInt.from_bytes([0xE4, 0x00]), BigInt.from_bytes([0xE4]))

    def test_zero_forms_equal(self) -> None:
        """Все формы нуля равны"""
        assert equals(BigInt.from_bytes([]), BigInt.from_bytes([0]))
        assert equals(BigInt.from_bytes([0, 0, 0]), BigInt.zero())

    def test_agrees_with_operator(self) -> None:
        """equals согласован с =="""
        a = BigInt.from_bytes([1, 2])
        b = BigInt.from_bytes([1, 2, 0])
        c = BigInt.from_bytes([2, 1])

        assert equals(a, b) == (a == b)
        assert equals(a, c) == (a == c)
