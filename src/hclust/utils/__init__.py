"""Utility functions for hclust."""

from .validation import (
    validate_data,
    column_statistics,
    mean_square_deviation,
    standardize
)

from .io import (
    read_table,
    table_to_matrix,
    load_matrix
)

__all__ = [
    # Validation and statistics
    'validate_data',
    'column_statistics',
    'mean_square_deviation',
    'standardize',

    # Loading
    'read_table',
    'table_to_matrix',
    'load_matrix'
]
