"""Text reports for clustering runs."""

from .text import (
    format_cluster,
    format_merge_event,
    format_merge_report,
    format_vector,
    format_matrix,
    format_distance_matrix
)

__all__ = [
    'format_cluster',
    'format_merge_event',
    'format_merge_report',
    'format_vector',
    'format_matrix',
    'format_distance_matrix'
]
