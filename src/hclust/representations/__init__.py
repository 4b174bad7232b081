"""Cluster representation implementations."""

from .centroid import CentroidRepresentation

__all__ = [
    'CentroidRepresentation'
]
