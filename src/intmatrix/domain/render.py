"""
Текстовое представление целочисленной сетки.

Формат по умолчанию: одна строка на ряд, ряд обрамлён символом "|",
каждая ячейка выровнена вправо в общей ширине столбца.

    ширина = max(len(str(cell))) + padding

Ширина общая для всех ячеек матрицы, знак минус входит в длину.
После последнего ряда ставится перевод строки.
"""

from dataclasses import dataclass
from typing import Final

from intmatrix.math.grid_safeguards import Cells, is_integer_value, precondition_violation


DEFAULT_LEFT_DELIMITER: Final[str] = "|"
DEFAULT_RIGHT_DELIMITER: Final[str] = "|"
DEFAULT_CELL_PADDING: Final[int] = 1


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация текстового представления матрицы.

    Значения по умолчанию дают канонический вид str(MathMatrix).
    """
    left_delimiter: str = DEFAULT_LEFT_DELIMITER
    right_delimiter: str = DEFAULT_RIGHT_DELIMITER
    padding: int = DEFAULT_CELL_PADDING
    line_break: str = "\n"

    def __post_init__(self) -> None:
        if not is_integer_value(self.padding) or self.padding < 0:
            raise precondition_violation(
                f"padding must be a non-negative integer, got {self.padding!r}"
            )


def cell_width(cells: Cells, padding: int = DEFAULT_CELL_PADDING) -> int:
    """Длина самого длинного десятичного представления ячейки + padding."""
    longest = max(len(str(value)) for row in cells for value in row)
    return longest + padding


def render_cells(cells: Cells, config: RenderConfig | None = None) -> str:
    """
    Детерминированное многострочное представление сетки.

    Args:
        cells: Непустая прямоугольная сетка
        config: Конфигурация (default: RenderConfig())

    Returns:
        Строка, каждая строка сетки завершается config.line_break

    Examples:
        >>> render_cells(((1, 10), (100, 2)))
        '|   1  10|\\n| 100   2|\\n'
    """
    config = config or RenderConfig()
    width = cell_width(cells, config.padding)

    lines = []
    for row in cells:
        body = "".join(str(value).rjust(width) for value in row)
        lines.append(f"{config.left_delimiter}{body}{config.right_delimiter}{config.line_break}")
    return "".join(lines)
