"""Distance metrics for clustering."""

from .euclidean import EuclideanDistance, distance_matrix

__all__ = [
    'EuclideanDistance',
    'distance_matrix'
]
