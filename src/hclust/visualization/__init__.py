"""Visualization utilities for clustering results."""

from .dendrogram import (
    leaf_order,
    plot_dendrogram
)

__all__ = [
    'leaf_order',
    'plot_dendrogram'
]
