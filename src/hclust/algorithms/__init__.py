"""Clustering algorithms."""

from .agglomerative import CentroidLinkage

__all__ = [
    'CentroidLinkage'
]
