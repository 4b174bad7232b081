"""
Dendrogram plotting for merge sequences.

Leaves are ordered by a depth-first walk of the merge tree so brackets never
cross. Each merge is drawn at its centroid distance as reported; centroid
linkage can produce inversions (a merge lower than one of its children) and
those are drawn as they are.
"""

from typing import Optional, List, Sequence, Dict, Tuple
import matplotlib.pyplot as plt

from ..base.data_structures import MergeEvent


def _build_tree(events: Sequence[MergeEvent], n_observations: int) -> Tuple[Dict, List]:
    """Map each merged cluster to its two children and find the roots."""
    children = {}
    nodes = {(i,) for i in range(n_observations)}

    for event in events:
        a, b = tuple(event.cluster_a), tuple(event.cluster_b)
        if a not in nodes or b not in nodes:
            raise ValueError(f"Step {event.step} merges a cluster that does not exist yet")
        nodes -= {a, b}
        nodes.add(tuple(event.merged))
        children[tuple(event.merged)] = (a, b, event.distance)

    roots = sorted(nodes, key=lambda node: node[0])
    return children, roots


def _infer_size(events: Sequence[MergeEvent], n_observations: Optional[int]) -> int:
    if n_observations is not None:
        return n_observations
    if not events:
        raise ValueError("n_observations is required when there are no merge events")
    return max(max(event.merged) for event in events) + 1


def leaf_order(events: Sequence[MergeEvent], n_observations: Optional[int] = None) -> List[int]:
    """Observation indices in dendrogram order (``cluster_a`` side first).

    Args:
        events: Merge events in chronological order
        n_observations: Number of observations; inferred from the events
            if omitted

    Returns:
        Permutation of range(n_observations)
    """
    n = _infer_size(events, n_observations)
    children, roots = _build_tree(events, n)

    order = []
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        if node in children:
            left, right, _ = children[node]
            stack.append(right)
            stack.append(left)
        else:
            order.append(node[0])
    return order


def plot_dendrogram(events: Sequence[MergeEvent],
                    n_observations: Optional[int] = None,
                    labels: Optional[Sequence[str]] = None,
                    ax: Optional[plt.Axes] = None,
                    color: str = 'tab:blue',
                    linewidth: float = 1.5,
                    annotate: bool = False,
                    title: Optional[str] = None) -> plt.Axes:
    """Plot the merge sequence as a dendrogram.

    Args:
        events: Merge events in chronological order
        n_observations: Number of observations (inferred if omitted)
        labels: Optional tick label per observation index
        ax: Matplotlib axes (created if None)
        color: Line color
        linewidth: Line width
        annotate: Whether to write each merge distance next to its bracket
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    n = _infer_size(events, n_observations)
    children, _ = _build_tree(events, n)
    order = leaf_order(events, n)

    x_pos = {(idx,): float(pos) for pos, idx in enumerate(order)}
    height = {(idx,): 0.0 for idx in order}

    # Events arrive children-first, so positions are always known
    for event in events:
        a, b, distance = children[tuple(event.merged)]
        merged = tuple(event.merged)
        x_pos[merged] = (x_pos[a] + x_pos[b]) / 2
        height[merged] = distance

        ax.plot([x_pos[a], x_pos[a], x_pos[b], x_pos[b]],
                [height[a], distance, distance, height[b]],
                color=color, linewidth=linewidth)

        if annotate:
            ax.annotate(f"{distance:.2f}", (x_pos[merged], distance),
                        textcoords='offset points', xytext=(0, 3),
                        ha='center', fontsize=8)

    ax.set_xticks(range(n))
    if labels is not None:
        ax.set_xticklabels([labels[idx] for idx in order])
    else:
        ax.set_xticklabels([str(idx) for idx in order])
    ax.set_xlim(-0.5, n - 0.5)
    top = max(height.values(), default=0.0)
    ax.set_ylim(0.0, top * 1.1 if top > 0 else 1.0)
    ax.set_ylabel('Centroid distance')
    ax.set_xlabel('Observation')

    if title:
        ax.set_title(title)

    ax.grid(True, axis='y', alpha=0.3)

    return ax
