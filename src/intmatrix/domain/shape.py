"""
MatrixShape — Модель размерности матрицы

Immutable Pydantic модель пары (rows, cols) с проверками согласованности
операндов для сложения/вычитания и умножения.
"""

from pydantic import BaseModel, Field


class MatrixShape(BaseModel):
    """
    Размерность матрицы: rows × cols.

    Immutable модель (frozen=True). Strict-режим: bool и float
    в качестве размерности отклоняются.
    """

    rows: int = Field(..., gt=0, description="Количество строк (>= 1)")
    cols: int = Field(..., gt=0, description="Количество столбцов (>= 1)")

    model_config = {"frozen": True, "strict": True}

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def transposed(self) -> "MatrixShape":
        """Размерность транспонированной матрицы (cols × rows)."""
        return MatrixShape(rows=self.cols, cols=self.rows)

    def same_as(self, other: "MatrixShape") -> bool:
        """Согласованность для сложения/вычитания: одинаковые rows и cols."""
        return self.rows == other.rows and self.cols == other.cols

    def can_multiply(self, other: "MatrixShape") -> bool:
        """Согласованность для умножения: self.cols == other.rows."""
        return self.cols == other.rows

    def product_shape(self, other: "MatrixShape") -> "MatrixShape":
        """
        Размерность произведения self × other.

        Raises:
            ValueError: Если размерности не согласованы для умножения
        """
        if not self.can_multiply(other):
            raise ValueError(
                f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        return MatrixShape(rows=self.rows, cols=other.cols)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"
