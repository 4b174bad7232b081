"""
Euclidean distance metric.

Used both for the diagnostic observation distance matrix and for the
centroid-to-centroid distance that drives the merge loop.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..utils.validation import MatrixLike, validate_data


class EuclideanDistance(DistanceMetric):
    """Euclidean (L2) distance metric.

    Computes ||a - b|| along the last dimension.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False, return actual Euclidean distances (default).
        """
        self.squared = squared

    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        """Compute Euclidean distances between ``a`` and ``b``.

        Args:
            a: (d,) or (n, d) tensor
            b: Tensor broadcastable against ``a``

        Returns:
            Scalar or (n,) tensor of distances
        """
        diff = a - b
        squared_distances = torch.sum(diff * diff, dim=-1)

        if not torch.isfinite(squared_distances).all():
            return self._compute_rescaled(a, b)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def _compute_rescaled(self, a: Tensor, b: Tensor) -> Tensor:
        """Same distances, computed on inputs divided by their largest magnitude.

        Only used when the direct sum of squares overflows.
        """
        scale = torch.maximum(a.abs().amax(), b.abs().amax())
        diff = a / scale - b / scale
        scaled = torch.sum(diff * diff, dim=-1)

        if self.squared:
            return scale * scale * scaled
        else:
            return scale * torch.sqrt(scaled)


def distance_matrix(X: MatrixLike) -> Tensor:
    """Pairwise Euclidean distances between all rows of ``X``.

    Differences are formed explicitly rather than through the
    ||x||² + ||y||² - 2<x,y> expansion, so the result is exactly symmetric
    with an exactly zero diagonal.

    Args:
        X: (n, m) observation matrix

    Returns:
        (n, n) tensor with D[i, j] = ||X[i] - X[j]||

    Raises:
        InvalidInput: If X has zero rows or columns or non-finite values
    """
    X = validate_data(X)
    return EuclideanDistance().compute(X.unsqueeze(1), X.unsqueeze(0))
