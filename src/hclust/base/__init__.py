"""Base classes, records and errors for hclust."""

from .interfaces import (
    ClusterRepresentation,
    DistanceMetric
)

from .data_structures import (
    MergeEvent,
    replay_merges
)

from .exceptions import (
    ClusteringError,
    InvalidInput,
    EmptyCluster,
    InsufficientClusters
)

__all__ = [
    # Interfaces
    'ClusterRepresentation',
    'DistanceMetric',

    # Data structures
    'MergeEvent',
    'replay_merges',

    # Errors
    'ClusteringError',
    'InvalidInput',
    'EmptyCluster',
    'InsufficientClusters'
]
