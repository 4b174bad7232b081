"""
Plain-text rendering of datasets, statistics and merge sequences.

All functions return strings; printing is left to the caller.
"""

from typing import Iterable, Sequence
import torch
from torch import Tensor

from ..base.data_structures import MergeEvent


def format_cluster(members: Sequence[int]) -> str:
    """Render cluster membership, e.g. ``Cluster { 0, 1, 4 }``."""
    return "Cluster { " + ", ".join(str(i) for i in members) + " }"


def format_merge_event(event: MergeEvent, decimals: int = 4) -> str:
    """One line describing a merge.

    Example:
        Cluster { 0 } and Cluster { 1 } merged at distance 1.0000 into Cluster { 0, 1 }
    """
    return (f"{format_cluster(event.cluster_a)} and {format_cluster(event.cluster_b)} "
            f"merged at distance {event.distance:.{decimals}f} "
            f"into {format_cluster(event.merged)}")


def format_merge_report(events: Iterable[MergeEvent], decimals: int = 4) -> str:
    """One line per merge, in the order given."""
    return "\n".join(format_merge_event(event, decimals) for event in events)


def format_vector(v: Tensor, decimals: int = 4, sep: str = "\t") -> str:
    """Render a 1D tensor on a single line."""
    v = torch.as_tensor(v).detach().cpu().reshape(-1)
    return sep.join(f"{value:.{decimals}f}" for value in v.tolist())


def format_matrix(X: Tensor, decimals: int = 2, sep: str = " ") -> str:
    """Render a 2D tensor, one row per line."""
    X = torch.as_tensor(X).detach().cpu()
    if X.dim() != 2:
        raise ValueError(f"Expected 2D tensor, got {X.dim()}D")
    return "\n".join(format_vector(row, decimals, sep) for row in X)


def format_distance_matrix(D: Tensor, decimals: int = 4) -> str:
    """Render a distance matrix with tab-separated columns."""
    return format_matrix(D, decimals=decimals, sep="\t")
