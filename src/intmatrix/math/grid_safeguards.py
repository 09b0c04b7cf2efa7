"""
Grid Safeguards — Validation Primitives for Integer Grids

Модуль обеспечивает проверку предусловий для всех операций MathMatrix:
- Проверка прямоугольности сетки (публичная утилита rectangular_matrix)
- Валидация входной сетки (структура, типы ячеек, прямоугольность)
- Валидация размерностей, индексов и скалярных множителей
- Глубокое копирование сетки в неизменяемое хранилище

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любое нарушение предусловия → InvalidArgument, немедленно и синхронно
2. Скопированная сетка никогда не разделяет хранилище с исходной
3. Ячейки — только целые числа (bool не считается целым)
"""

import logging
import numbers
from typing import Any, Sequence

from intmatrix.contracts.validators import MatrixGridValidator

logger = logging.getLogger(__name__)

# Общий валидатор контракта: схема и validator строятся один раз
_GRID_VALIDATOR = MatrixGridValidator()

Grid = Sequence[Sequence[int]]
Cells = tuple[tuple[int, ...], ...]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Нарушение предусловия операции над матрицей.

    Единственный вид ошибки модуля: null/пустая сетка, непрямоугольная сетка,
    неположительные размерности, индекс вне диапазона, несогласованные
    размеры операндов, неквадратная матрица для проверки треугольности.
    """


def precondition_violation(message: str) -> InvalidArgument:
    """Построить InvalidArgument, записав нарушение в DEBUG-лог."""
    logger.debug("Precondition violated: %s", message)
    return InvalidArgument(message)


# =============================================================================
# RECTANGULARITY
# =============================================================================


def rectangular_matrix(grid: Grid | None) -> bool:
    """
    Проверка, что все строки сетки одной длины.

    Публичная утилита без состояния; используется конструктором MathMatrix
    и доступна для самостоятельного вызова.

    Args:
        grid: Сетка с хотя бы одной строкой

    Returns:
        True если длина каждой строки равна длине первой, иначе False

    Raises:
        InvalidArgument: Если grid равен None или не содержит строк

    Examples:
        >>> rectangular_matrix([[1, 2], [3, 4]])
        True
        >>> rectangular_matrix([[1, 2], [3]])
        False
    """
    if grid is None or len(grid) == 0:
        raise precondition_violation(
            f"argument grid may not be None and must have at least one row, got {grid!r}"
        )

    columns = len(grid[0])
    return all(len(row) == columns for row in grid[1:])


# =============================================================================
# GRID VALIDATION & COPY
# =============================================================================


def validate_grid(grid: Any) -> None:
    """
    Валидация входной сетки для конструктора MathMatrix.

    Порядок проверок:
    1. None / ноль строк / пустая первая строка
    2. Контракт matrix_grid (последовательность последовательностей целых)
    3. Прямоугольность

    Raises:
        InvalidArgument: Если хотя бы одна проверка не пройдена
    """
    if grid is None:
        raise precondition_violation("grid must not be None")

    if not isinstance(grid, (list, tuple)):
        raise precondition_violation(f"grid must be a list or tuple of rows, got {type(grid).__name__}")

    if len(grid) == 0:
        raise precondition_violation("grid must have at least one row")

    if not isinstance(grid[0], (list, tuple)) or len(grid[0]) == 0:
        raise precondition_violation("grid must have at least one column")

    error = _GRID_VALIDATOR.first_error(grid)
    if error is not None:
        path = "/".join(str(p) for p in error.absolute_path) or "<root>"
        raise precondition_violation(f"grid violates matrix_grid contract at {path}: {error.message}")

    if not rectangular_matrix(grid):
        raise precondition_violation("grid must be rectangular (all rows of equal length)")


def copy_grid(grid: Grid) -> Cells:
    """
    Глубокая копия сетки в неизменяемое хранилище (tuple of tuples).

    Ячейки приводятся к int, чтобы подклассы int не протекали в хранилище.
    """
    return tuple(tuple(int(value) for value in row) for row in grid)


def filled_cells(num_rows: int, num_cols: int, value: int) -> Cells:
    """Хранилище num_rows × num_cols, все ячейки равны value."""
    row = (value,) * num_cols
    return (row,) * num_rows


# =============================================================================
# SCALAR VALIDATION
# =============================================================================


def is_integer_value(value: Any) -> bool:
    """True для целых (int, numpy-целые и т.п.), False для bool и прочего."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_integer(value: Any, name: str) -> None:
    """
    Валидация, что значение целое.

    Raises:
        InvalidArgument: Если value не целое число (в т.ч. bool)
    """
    if not is_integer_value(value):
        raise precondition_violation(f"{name} must be an integer, got {value!r}")


def validate_index(index: Any, size: int, name: str) -> None:
    """
    Валидация 0-based индекса: 0 <= index < size.

    Raises:
        InvalidArgument: Если index не целое или вне диапазона
    """
    validate_integer(index, name)

    if index < 0 or index >= size:
        raise precondition_violation(f"{name} must be in [0, {size}), got {index}")
