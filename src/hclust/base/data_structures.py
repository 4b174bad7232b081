"""
Core data structures for hierarchical clustering.

This module holds the records exchanged between the clustering engine and
its collaborators (reporting, plotting, tests).
"""

from typing import List, Sequence, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class MergeEvent:
    """One merge of the agglomerative loop.

    Attributes:
        step: 1-based position of this merge in the run
        cluster_a: Members of the lower-positioned source cluster
        cluster_b: Members of the higher-positioned source cluster
        distance: Centroid distance between the two source clusters
        merged: Sorted union of both source clusters
    """
    step: int
    cluster_a: Tuple[int, ...]
    cluster_b: Tuple[int, ...]
    distance: float
    merged: Tuple[int, ...]

    def __post_init__(self):
        assert self.distance >= 0.0
        assert len(self.merged) == len(self.cluster_a) + len(self.cluster_b)

    @property
    def size(self) -> int:
        """Number of observations in the merged cluster."""
        return len(self.merged)


def replay_merges(n_observations: int, events: Sequence[MergeEvent]) -> List[List[int]]:
    """Rebuild the partition reached after applying ``events`` to singletons.

    Args:
        n_observations: Number of initial singleton clusters
        events: Merge events in chronological order

    Returns:
        Clusters remaining after the last event, in no particular order

    Raises:
        ValueError: If an event references a cluster that does not exist
            at that point of the replay
    """
    clusters = {(i,): [i] for i in range(n_observations)}

    for event in events:
        for source in (event.cluster_a, event.cluster_b):
            if tuple(source) not in clusters:
                raise ValueError(f"Step {event.step} merges unknown cluster {list(source)}")
        del clusters[tuple(event.cluster_a)]
        del clusters[tuple(event.cluster_b)]
        merged = sorted(event.cluster_a + event.cluster_b)
        clusters[tuple(merged)] = merged

    return list(clusters.values())
