"""
intmatrix — immutable integer matrix value type.

Construction, element access, add/subtract/multiply, scalar scaling,
transpose, structural equality, formatted display and the upper-triangular
predicate. All precondition violations raise InvalidArgument.
"""

from intmatrix.domain import MathMatrix, MatrixShape, RenderConfig
from intmatrix.math import InvalidArgument, rectangular_matrix

__all__ = [
    "InvalidArgument",
    "MathMatrix",
    "MatrixShape",
    "RenderConfig",
    "rectangular_matrix",
]
