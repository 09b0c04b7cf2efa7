"""
Core math modules для intmatrix

Примитивы проверки предусловий для целочисленных сеток.
"""

from intmatrix.math.grid_safeguards import (
    Cells,
    Grid,
    InvalidArgument,
    precondition_violation,
    copy_grid,
    filled_cells,
    is_integer_value,
    rectangular_matrix,
    validate_grid,
    validate_index,
    validate_integer,
)

__all__ = [
    # Types
    "Cells",
    "Grid",
    # Exceptions
    "InvalidArgument",
    "precondition_violation",
    # Rectangularity
    "rectangular_matrix",
    # Grid validation & copy
    "validate_grid",
    "copy_grid",
    "filled_cells",
    # Scalar validation
    "is_integer_value",
    "validate_integer",
    "validate_index",
]
