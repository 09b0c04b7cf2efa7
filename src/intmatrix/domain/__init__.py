"""
Domain models and value objects.

Contains the MathMatrix value type, its MatrixShape and display configuration.
"""

from intmatrix.domain.matrix import MathMatrix
from intmatrix.domain.render import (
    DEFAULT_CELL_PADDING,
    DEFAULT_LEFT_DELIMITER,
    DEFAULT_RIGHT_DELIMITER,
    RenderConfig,
    cell_width,
    render_cells,
)
from intmatrix.domain.shape import MatrixShape

__all__ = [
    # Matrix model
    "MathMatrix",
    # Shape model
    "MatrixShape",
    # Render
    "DEFAULT_CELL_PADDING",
    "DEFAULT_LEFT_DELIMITER",
    "DEFAULT_RIGHT_DELIMITER",
    "RenderConfig",
    "cell_width",
    "render_cells",
]
