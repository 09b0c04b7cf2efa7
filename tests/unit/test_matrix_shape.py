"""
Тесты для Pydantic модели MatrixShape

Проверяет:
1. Создание и валидацию размерностей
2. Immutability (frozen=True) и strict-режим
3. Предикаты согласованности операндов
"""

import pytest
from pydantic import ValidationError

from intmatrix.domain import MatrixShape


class TestMatrixShape:
    """Тесты для модели MatrixShape"""

    def test_creation(self) -> None:
        """Создание с положительными размерностями"""
        shape = MatrixShape(rows=2, cols=3)
        assert shape.rows == 2
        assert shape.cols == 3
        assert str(shape) == "2x3"

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (-2, 2)])
    def test_non_positive_rejected(self, rows: int, cols: int) -> None:
        """rows/cols <= 0 → ValidationError"""
        with pytest.raises(ValidationError):
            MatrixShape(rows=rows, cols=cols)

    def test_strict_rejects_float_and_str(self) -> None:
        """Strict-режим: float и str не приводятся к int"""
        with pytest.raises(ValidationError):
            MatrixShape(rows=2.0, cols=2)  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            MatrixShape(rows="2", cols=2)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        """Модель immutable (frozen=True)"""
        shape = MatrixShape(rows=2, cols=2)
        with pytest.raises(ValidationError):
            shape.rows = 3  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Frozen модели сравниваются по значению и хэшируются"""
        assert MatrixShape(rows=2, cols=3) == MatrixShape(rows=2, cols=3)
        assert hash(MatrixShape(rows=2, cols=3)) == hash(MatrixShape(rows=2, cols=3))

    def test_is_square(self) -> None:
        """is_square"""
        assert MatrixShape(rows=3, cols=3).is_square is True
        assert MatrixShape(rows=3, cols=1).is_square is False

    def test_transposed(self) -> None:
        """transposed меняет rows и cols местами"""
        assert MatrixShape(rows=2, cols=5).transposed() == MatrixShape(rows=5, cols=2)

    def test_same_as(self) -> None:
        """Согласованность для сложения"""
        a = MatrixShape(rows=2, cols=3)
        assert a.same_as(MatrixShape(rows=2, cols=3)) is True
        assert a.same_as(MatrixShape(rows=3, cols=2)) is False

    def test_product_shape(self) -> None:
        """(2×3) × (3×4) → 2×4"""
        a = MatrixShape(rows=2, cols=3)
        b = MatrixShape(rows=3, cols=4)

        assert a.can_multiply(b) is True
        assert a.product_shape(b) == MatrixShape(rows=2, cols=4)

    def test_product_shape_incompatible(self) -> None:
        """Несогласованные размерности → ValueError"""
        a = MatrixShape(rows=2, cols=3)
        b = MatrixShape(rows=2, cols=3)

        assert a.can_multiply(b) is False
        with pytest.raises(ValueError, match="Cannot multiply 2x3 by 2x3"):
            a.product_shape(b)
