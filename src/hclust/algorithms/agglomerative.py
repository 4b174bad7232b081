"""
Agglomerative hierarchical clustering with centroid linkage.

Starts from one singleton cluster per observation and repeatedly merges the
two clusters whose centroids are closest, until a single cluster remains.
"""

from typing import Optional, List, Sequence, Tuple
import torch
from torch import Tensor
import time

from ..base.data_structures import MergeEvent
from ..base.exceptions import EmptyCluster, InsufficientClusters, InvalidInput
from ..distances.euclidean import EuclideanDistance
from ..representations.centroid import CentroidRepresentation
from ..utils.validation import MatrixLike, validate_data


class CentroidLinkage:
    """Centroid-linkage agglomerative clustering.

    The distance between two clusters is the Euclidean distance between their
    centroids. Centroids and distances are recomputed from live cluster
    membership at every step; nothing is cached between merges.

    Parameters
    ----------
    verbose : int, default=0
        Verbosity level (0=silent, 1=summary, 2=one line per merge)
    device : torch.device, optional
        Device for computation (defaults to CPU)
    dtype : torch.dtype, default=torch.float64
        Floating point type the data is converted to

    Attributes
    ----------
    merges_ : list of MergeEvent
        Merge sequence produced by the last call to ``fit``
    fitted_ : bool
        Whether ``fit`` has completed

    Example:
        >>> engine = CentroidLinkage().initialize([[0, 0], [0, 1], [10, 10]])
        >>> [e.merged for e in engine.run()]
        [(0, 1), (0, 1, 2)]
    """

    def __init__(self,
                 verbose: int = 0,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        self.verbose = verbose
        self.device = device if device is not None else torch.device('cpu')
        self.dtype = dtype
        self.metric = EuclideanDistance()

        self.data_: Optional[Tensor] = None
        self._clusters: List[List[int]] = []
        self._step = 0

        self.merges_: List[MergeEvent] = []
        self.fitted_ = False

    def initialize(self, X: MatrixLike) -> 'CentroidLinkage':
        """Store the observation matrix and build one singleton per row.

        Args:
            X: (n, m) observation matrix

        Returns:
            Self

        Raises:
            InvalidInput: If X has zero rows or columns or non-finite values
        """
        self.data_ = validate_data(X, dtype=self.dtype, device=self.device)
        self._clusters = [[i] for i in range(self.data_.shape[0])]
        self._step = 0
        self.merges_ = []
        self.fitted_ = False
        return self

    @property
    def clusters(self) -> List[List[int]]:
        """Copy of the current partition, in position order."""
        return [list(cluster) for cluster in self._clusters]

    @property
    def n_clusters(self) -> int:
        """Number of clusters in the current partition."""
        return len(self._clusters)

    def centroid(self, cluster: Sequence[int]) -> Tensor:
        """Column-wise mean of the rows indexed by ``cluster``.

        Raises:
            EmptyCluster: If ``cluster`` has no members
            InvalidInput: If a member is not a row index of the data
        """
        return self._representation(cluster).mean

    def cluster_distance(self, cluster_a: Sequence[int], cluster_b: Sequence[int]) -> float:
        """Euclidean distance between the centroids of two clusters."""
        return self.metric.between(self._representation(cluster_a),
                                   self._representation(cluster_b))

    def _representation(self, cluster: Sequence[int]) -> CentroidRepresentation:
        self._check_initialized()
        if len(cluster) == 0:
            raise EmptyCluster("Cannot compute the centroid of an empty cluster")

        n = self.data_.shape[0]
        outside = [i for i in cluster if not 0 <= i < n]
        if outside:
            raise InvalidInput(f"Cluster members {outside} are outside [0, {n})")

        index = torch.as_tensor(list(cluster), dtype=torch.long, device=self.device)
        return CentroidRepresentation.from_points(self.data_[index])

    def find_closest_pair(self) -> Tuple[int, int]:
        """Positions (i, j), i < j, of the two clusters with the smallest centroid distance.

        Pairs are scanned with i ascending and, for each i, j ascending. Only
        a strictly smaller distance replaces the current best, so the first
        pair reaching the minimum wins ties.

        Raises:
            InsufficientClusters: If fewer than two clusters remain
        """
        self._check_initialized()
        if len(self._clusters) < 2:
            raise InsufficientClusters(f"Need at least 2 clusters to merge, have {len(self._clusters)}")

        best_distance = float('inf')
        best_pair = (0, 1)

        for i in range(len(self._clusters)):
            for j in range(i + 1, len(self._clusters)):
                distance = self.cluster_distance(self._clusters[i], self._clusters[j])
                if distance < best_distance:
                    best_distance = distance
                    best_pair = (i, j)

        return best_pair

    def merge_step(self) -> MergeEvent:
        """Merge the closest pair of clusters and describe the merge.

        The sorted union takes the position of the lower-positioned source
        cluster; the other source cluster is removed. Clusters not involved
        in the merge keep their relative order.
        """
        i, j = self.find_closest_pair()
        cluster_a = self._clusters[i]
        cluster_b = self._clusters[j]

        distance = self.cluster_distance(cluster_a, cluster_b)
        merged = sorted(cluster_a + cluster_b)

        self._clusters[i] = merged
        del self._clusters[j]
        self._step += 1

        event = MergeEvent(
            step=self._step,
            cluster_a=tuple(cluster_a),
            cluster_b=tuple(cluster_b),
            distance=distance,
            merged=tuple(merged)
        )

        if self.verbose >= 2:
            print(f"Step {event.step:3d}: {list(event.cluster_a)} + {list(event.cluster_b)} "
                  f"at distance {event.distance:.4f} ({self.n_clusters} clusters left)")

        return event

    def run(self) -> List[MergeEvent]:
        """Merge until one cluster remains.

        Returns:
            Merge events in chronological order; n - 1 of them for n
            observations
        """
        self._check_initialized()
        start_time = time.time()

        events = []
        while len(self._clusters) > 1:
            events.append(self.merge_step())

        if self.verbose:
            print(f"Merged {self.data_.shape[0]} observations in {len(events)} steps "
                  f"({time.time() - start_time:.3f}s)")

        return events

    def fit(self, X: MatrixLike, y=None) -> 'CentroidLinkage':
        """Cluster ``X`` completely and keep the merge sequence.

        Args:
            X: (n, m) observation matrix
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        self.initialize(X)
        self.merges_ = self.run()
        self.fitted_ = True
        return self

    def _check_initialized(self) -> None:
        if self.data_ is None:
            raise RuntimeError("Engine must be initialized with a data matrix first")

    def get_params(self, deep: bool = True) -> dict:
        """Get parameters (sklearn compatibility)."""
        return {
            'verbose': self.verbose,
            'device': self.device,
            'dtype': self.dtype
        }

    def __repr__(self) -> str:
        if self.data_ is None:
            return "CentroidLinkage(uninitialized)"
        return (f"CentroidLinkage(n_observations={self.data_.shape[0]}, "
                f"n_clusters={self.n_clusters})")
