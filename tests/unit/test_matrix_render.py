"""
Тесты текстового представления сетки

Проверяет:
1. Правило ширины столбца (самое длинное значение + padding)
2. Разделители и переводы строк
3. Валидацию RenderConfig
"""

import dataclasses

import pytest

from intmatrix.domain.render import (
    DEFAULT_CELL_PADDING,
    RenderConfig,
    cell_width,
    render_cells,
)
from intmatrix.math.grid_safeguards import InvalidArgument


class TestCellWidth:
    """Тесты для cell_width"""

    def test_longest_value_plus_padding(self) -> None:
        """'100' → 3 + 1"""
        assert cell_width(((1, 10), (100, 2))) == 4

    def test_negative_sign_included(self) -> None:
        """'-1000' → 5 + 1"""
        assert cell_width(((-1000, 5),)) == 6

    def test_custom_padding(self) -> None:
        """padding=0 → ширина равна длине самого длинного значения"""
        assert cell_width(((12, 3),), padding=0) == 2


class TestRenderCells:
    """Тесты для render_cells"""

    def test_default_format(self) -> None:
        """Канонический формат"""
        assert render_cells(((1, 10), (100, 2))) == "|   1  10|\n| 100   2|\n"

    def test_uniform_width_across_rows(self) -> None:
        """Ширина одинакова для всех строк и столбцов"""
        text = render_cells(((1, 2), (3, -400)))
        assert text == "|    1    2|\n|    3 -400|\n"

    def test_custom_config(self) -> None:
        """Пользовательские разделители и перевод строки"""
        config = RenderConfig(left_delimiter="<", right_delimiter=">", padding=0, line_break=";")
        assert render_cells(((1, 22),), config) == "< 122>;"

    def test_default_config_values(self) -> None:
        """Значения по умолчанию"""
        config = RenderConfig()
        assert config.left_delimiter == "|"
        assert config.right_delimiter == "|"
        assert config.padding == DEFAULT_CELL_PADDING == 1
        assert config.line_break == "\n"

    def test_config_immutable(self) -> None:
        """RenderConfig — frozen dataclass"""
        config = RenderConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.padding = 3  # type: ignore[misc]

    def test_negative_padding_rejected(self) -> None:
        """Отрицательный padding → InvalidArgument, как и прочие предусловия"""
        with pytest.raises(InvalidArgument, match="padding must be a non-negative integer"):
            RenderConfig(padding=-1)

    @pytest.mark.parametrize("padding", [1.5, "2", None, True])
    def test_non_integer_padding_rejected(self, padding) -> None:
        """padding не целое → InvalidArgument"""
        with pytest.raises(InvalidArgument, match="padding must be a non-negative integer"):
            RenderConfig(padding=padding)
