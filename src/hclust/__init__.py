"""
hclust: agglomerative hierarchical clustering with centroid linkage.

Every observation starts as its own cluster; the two clusters whose centroids
are closest are merged, step by step, until a single cluster remains. Each
merge is reported as a MergeEvent carrying both source clusters, their
centroid distance and the merged membership.

Example usage:
    >>> from hclust import CentroidLinkage, format_merge_report
    >>>
    >>> X = [[0.0, 0.0], [0.0, 1.0], [10.0, 10.0]]
    >>> engine = CentroidLinkage().fit(X)
    >>> print(format_merge_report(engine.merges_))
    Cluster { 0 } and Cluster { 1 } merged at distance 1.0000 into Cluster { 0, 1 }
    Cluster { 0, 1 } and Cluster { 2 } merged at distance 13.7931 into Cluster { 0, 1, 2 }
"""

__version__ = '0.1.0'

from .algorithms.agglomerative import CentroidLinkage
from .distances.euclidean import EuclideanDistance, distance_matrix

from .base import (
    MergeEvent,
    replay_merges,
    ClusteringError,
    InvalidInput,
    EmptyCluster,
    InsufficientClusters
)

from .utils import (
    load_matrix,
    column_statistics,
    mean_square_deviation,
    standardize
)

from .reporting import (
    format_cluster,
    format_merge_event,
    format_merge_report,
    format_matrix,
    format_vector,
    format_distance_matrix
)

from .visualization import (
    leaf_order,
    plot_dendrogram
)

__all__ = [
    # Core
    'CentroidLinkage',
    'EuclideanDistance',
    'distance_matrix',

    # Records and errors
    'MergeEvent',
    'replay_merges',
    'ClusteringError',
    'InvalidInput',
    'EmptyCluster',
    'InsufficientClusters',

    # Data preparation
    'load_matrix',
    'column_statistics',
    'mean_square_deviation',
    'standardize',

    # Reporting
    'format_cluster',
    'format_merge_event',
    'format_merge_report',
    'format_matrix',
    'format_vector',
    'format_distance_matrix',

    # Visualization
    'leaf_order',
    'plot_dendrogram',

    # Version
    '__version__'
]
