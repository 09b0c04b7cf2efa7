"""
MathMatrix — Целочисленная матрица с семантикой значения

Immutable Pydantic модель: двумерная прямоугольная сетка целых чисел.

Семантика значения:
- Конструктор всегда делает глубокую копию входной сетки
- Хранилище — tuple of tuples, изменяемое представление наружу не отдаётся
- Все арифметические операции возвращают новый экземпляр
- Равенство структурное и только между экземплярами ровно MathMatrix

Все нарушения предусловий → InvalidArgument (см. intmatrix.math).
Экземпляры неизменяемы (frozen=True), поэтому совместное чтение из
нескольких потоков безопасно без блокировок; copy/deepcopy/pickle
поддерживаются средствами pydantic.
"""

import logging
from typing import Any, Iterator, final

from pydantic import BaseModel, Field, ValidationError

from intmatrix.domain.render import RenderConfig, render_cells
from intmatrix.domain.shape import MatrixShape
from intmatrix.math.grid_safeguards import (
    Cells,
    Grid,
    copy_grid,
    filled_cells,
    is_integer_value,
    precondition_violation,
    validate_grid,
    validate_index,
    validate_integer,
)

logger = logging.getLogger(__name__)


@final
class MathMatrix(BaseModel):
    """
    Матрица целых чисел фиксированного размера rows × cols.

    Создаётся только двумя способами:
        MathMatrix(grid)                           — копия существующей сетки
        MathMatrix.filled(rows, cols, initial_val) — заполнение значением

    Immutable модель (frozen=True): присваивание полей запрещено.
    Не предназначена для наследования: равенство сравнивает точный тип.
    """

    cells: Cells = Field(..., description="Ячейки построчно (row-major), tuple of tuples")

    model_config = {"frozen": True, "strict": True}

    def __init__(self, grid: Grid, /):
        """
        Args:
            grid: Непустая прямоугольная сетка целых (list/tuple строк)

        Raises:
            InvalidArgument: Если grid равен None, не содержит строк,
                первая строка пуста, сетка непрямоугольна или ячейка не целое
        """
        validate_grid(grid)
        super().__init__(cells=copy_grid(grid))

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("MathMatrix is a closed value type and cannot be subclassed")

    @classmethod
    def filled(cls, num_rows: int, num_cols: int, initial_val: int) -> "MathMatrix":
        """
        Матрица num_rows × num_cols, все ячейки равны initial_val.

        Raises:
            InvalidArgument: Если num_rows <= 0 или num_cols <= 0,
                или аргументы не целые
        """
        try:
            shape = MatrixShape(rows=num_rows, cols=num_cols)
        except ValidationError as e:
            raise precondition_violation(
                f"num_rows and num_cols must be integers greater than zero, "
                f"got num_rows={num_rows!r}, num_cols={num_cols!r}"
            ) from e

        validate_integer(initial_val, "initial_val")
        return cls._from_cells(filled_cells(shape.rows, shape.cols, int(initial_val)))

    @classmethod
    def _from_cells(cls, cells: Cells) -> "MathMatrix":
        # Только для уже проверенного, никому не принадлежащего хранилища
        return cls.model_construct(cells=cells)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def num_rows(self) -> int:
        return len(self.cells)

    @property
    def num_cols(self) -> int:
        return len(self.cells[0])

    @property
    def shape(self) -> MatrixShape:
        return MatrixShape(rows=self.num_rows, cols=self.num_cols)

    def value_at(self, row: int, col: int) -> int:
        """
        Значение ячейки (row, col), индексы с нуля.

        Raises:
            InvalidArgument: Если row вне [0, num_rows) или col вне [0, num_cols)
        """
        validate_index(row, self.num_rows, "row")
        validate_index(col, self.num_cols, "col")
        return self.cells[row][col]

    def __getitem__(self, key: tuple[int, int]) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"MathMatrix indices must be (row, col) pairs, got {key!r}")
        return self.value_at(*key)

    def to_list(self) -> list[list[int]]:
        """Новая вложенная list-копия ячеек; её изменение не влияет на матрицу."""
        return [list(row) for row in self.cells]

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Итератор по строкам (неизменяемые кортежи)."""
        return iter(self.cells)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _require_same_shape(self, other: Any, operation: str) -> "MathMatrix":
        if not isinstance(other, MathMatrix) or not self.shape.same_as(other.shape):
            raise precondition_violation(
                f"{operation}: right hand side must be a MathMatrix of shape {self.shape}, "
                f"got {_describe(other)}"
            )
        return other

    def add(self, right_hand_side: "MathMatrix") -> "MathMatrix":
        """
        Поэлементная сумма self + right_hand_side.

        Raises:
            InvalidArgument: Если операнд отсутствует или размеры не совпадают
        """
        other = self._require_same_shape(right_hand_side, "add")
        return MathMatrix._from_cells(tuple(
            tuple(a + b for a, b in zip(row, other_row))
            for row, other_row in zip(self.cells, other.cells)
        ))

    def subtract(self, right_hand_side: "MathMatrix") -> "MathMatrix":
        """
        Поэлементная разность self - right_hand_side.

        Raises:
            InvalidArgument: Если операнд отсутствует или размеры не совпадают
        """
        other = self._require_same_shape(right_hand_side, "subtract")
        return MathMatrix._from_cells(tuple(
            tuple(a - b for a, b in zip(row, other_row))
            for row, other_row in zip(self.cells, other.cells)
        ))

    def multiply(self, right_hand_side: "MathMatrix") -> "MathMatrix":
        """
        Матричное произведение self × right_hand_side.

        result(i, j) = sum(self(i, k) * rhs(k, j) for k in range(self.num_cols)),
        накопление в порядке возрастания k. Размер результата:
        self.num_rows × rhs.num_cols.

        Raises:
            InvalidArgument: Если операнд отсутствует или
                rhs.num_rows != self.num_cols
        """
        if not isinstance(right_hand_side, MathMatrix) or not self.shape.can_multiply(
            right_hand_side.shape
        ):
            raise precondition_violation(
                f"multiply: right hand side must be a MathMatrix with {self.num_cols} rows, "
                f"got {_describe(right_hand_side)}"
            )

        other = right_hand_side.cells
        product_shape = self.shape.product_shape(right_hand_side.shape)
        logger.debug("multiply %s by %s", self.shape, right_hand_side.shape)

        product = []
        for i in range(product_shape.rows):
            row = self.cells[i]
            product_row = []
            for j in range(product_shape.cols):
                current = 0
                for k in range(self.num_cols):
                    current += row[k] * other[k][j]
                product_row.append(current)
            product.append(tuple(product_row))
        return MathMatrix._from_cells(tuple(product))

    def scaled_by(self, factor: int) -> "MathMatrix":
        """
        Копия матрицы, каждая ячейка умножена на factor.

        Raises:
            InvalidArgument: Если factor не целое число
        """
        validate_integer(factor, "factor")
        factor = int(factor)
        return MathMatrix._from_cells(tuple(
            tuple(value * factor for value in row) for row in self.cells
        ))

    def transposed(self) -> "MathMatrix":
        """Транспонированная матрица: num_cols × num_rows, result(i, j) = self(j, i)."""
        return MathMatrix._from_cells(tuple(zip(*self.cells)))

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def is_square(self) -> bool:
        return self.shape.is_square

    def is_upper_triangular(self) -> bool:
        """
        Все элементы строго ниже главной диагонали равны нулю.

        Raises:
            InvalidArgument: Если матрица не квадратная
        """
        if not self.shape.is_square:
            raise precondition_violation(
                f"is_upper_triangular: matrix must be square, got {self.shape}"
            )

        size = self.num_rows
        for col in range(size):
            for row in range(col + 1, size):
                if self.cells[row][col] != 0:
                    return False
        return True

    # =========================================================================
    # EQUALITY & DISPLAY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        # Точное сравнение типа; для чужих типов и None — False, без исключений
        if type(other) is not MathMatrix:
            return False
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def to_string(self, config: RenderConfig | None = None) -> str:
        """Текстовое представление с заданной конфигурацией (см. RenderConfig)."""
        return render_cells(self.cells, config)

    def __str__(self) -> str:
        return render_cells(self.cells)

    def __repr__(self) -> str:
        return f"MathMatrix({self.to_list()!r})"

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: object) -> "MathMatrix":
        if not isinstance(other, MathMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "MathMatrix":
        if not isinstance(other, MathMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> "MathMatrix":
        if not isinstance(other, MathMatrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, factor: object) -> "MathMatrix":
        if not is_integer_value(factor):
            return NotImplemented
        return self.scaled_by(factor)

    __rmul__ = __mul__


def _describe(value: Any) -> str:
    if isinstance(value, MathMatrix):
        return f"MathMatrix of shape {value.shape}"
    return repr(value) if value is None else type(value).__name__
