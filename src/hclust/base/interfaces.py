"""
Core interfaces for the hclust components.

This module defines the abstract base classes shared by the distance metric
and the cluster representation, so the engine can be written against a
consistent API.
"""

from abc import ABC, abstractmethod
from typing import Dict
from torch import Tensor


class ClusterRepresentation(ABC):
    """Abstract base class for cluster representations.

    Centroid linkage only needs the mean vector, but the representation owns
    how that vector is derived from the member rows.
    """

    @abstractmethod
    def update_from_points(self, points: Tensor) -> None:
        """Recompute the representation from the member rows.

        Args:
            points: (k, d) tensor of member rows
        """
        pass

    @abstractmethod
    def get_parameters(self) -> Dict[str, Tensor]:
        """Return all parameters defining this cluster representation."""
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        pass


class DistanceMetric(ABC):
    """Abstract base class for distance computations."""

    @abstractmethod
    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        """Compute distances between matching rows of ``a`` and ``b``.

        Args:
            a: (d,) or (n, d) tensor
            b: Tensor broadcastable against ``a``

        Returns:
            Scalar or (n,) tensor of distances
        """
        pass

    def between(self, first: ClusterRepresentation,
                second: ClusterRepresentation) -> float:
        """Distance between the means of two representations."""
        params_a = first.get_parameters()
        params_b = second.get_parameters()
        if 'mean' not in params_a or 'mean' not in params_b:
            raise ValueError(f"{type(self).__name__} requires representations with 'mean' parameter")
        return float(self.compute(params_a['mean'], params_b['mean']))
