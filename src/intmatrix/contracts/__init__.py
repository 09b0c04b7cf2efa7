"""
Contract Validation Module

Модуль для валидации входных данных intmatrix через JSON Schema контракты.
"""

from .validators import (
    GRID_SCHEMA_NAME,
    ContractValidator,
    MatrixGridValidator,
    SchemaLoader,
    StrictDraft202012Validator,
    validate_matrix_grid,
)

__all__ = [
    # Constants
    "GRID_SCHEMA_NAME",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixGridValidator",
    "StrictDraft202012Validator",
    # Functions
    "validate_matrix_grid",
]
