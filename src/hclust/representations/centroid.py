"""
Centroid representation for centroid-linkage clustering.

The simplest cluster representation - just a mean point in space.
"""

from typing import Dict, Optional
import torch
from torch import Tensor

from ..base.interfaces import ClusterRepresentation
from ..base.exceptions import EmptyCluster


class CentroidRepresentation(ClusterRepresentation):
    """Cluster represented by the mean of its member rows."""

    def __init__(self, dimension: int,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        """
        Args:
            dimension: Ambient dimension d of the data
            device: Torch device for tensor allocation
            dtype: Floating point type of the mean
        """
        self._dimension = dimension
        self._device = device if device is not None else torch.device('cpu')
        self._dtype = dtype
        self._mean = torch.zeros(dimension, device=self._device, dtype=dtype)

    @classmethod
    def from_points(cls, points: Tensor) -> 'CentroidRepresentation':
        """Build a centroid directly from (k, d) member rows."""
        if points.dim() != 2:
            raise ValueError(f"Expected 2D tensor, got {points.dim()}D")
        rep = cls(points.shape[1], device=points.device, dtype=points.dtype)
        rep.update_from_points(points)
        return rep

    @property
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        return self._dimension

    @property
    def device(self) -> torch.device:
        """Device where tensors are stored."""
        return self._device

    @property
    def mean(self) -> Tensor:
        """Cluster mean/centroid."""
        return self._mean

    def update_from_points(self, points: Tensor) -> None:
        """Set the centroid to the column-wise mean of the member rows.

        Args:
            points: (k, d) tensor of member rows

        Raises:
            EmptyCluster: If ``points`` has no rows
        """
        self._check_points_shape(points)

        if len(points) == 0:
            raise EmptyCluster("Cannot compute the centroid of an empty cluster")

        points = points.to(device=self._device, dtype=self._dtype)
        mean = points.mean(dim=0)

        # Column sums can overflow for rows near the float limit
        if not torch.isfinite(mean).all():
            mean = (points / len(points)).sum(dim=0)

        self._mean = mean

    def get_parameters(self) -> Dict[str, Tensor]:
        """Return parameters defining this centroid."""
        return {'mean': self._mean.clone()}

    def _check_points_shape(self, points: Tensor):
        """Validate shape of input points."""
        if points.dim() != 2:
            raise ValueError(f"Expected 2D tensor, got {points.dim()}D")
        if points.shape[1] != self._dimension:
            raise ValueError(f"Expected dimension {self._dimension}, got {points.shape[1]}")

    def __repr__(self) -> str:
        return f"CentroidRepresentation(dimension={self._dimension}, mean_norm={self._mean.norm():.3f})"
