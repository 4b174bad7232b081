# tests/utils.py
"""
Small, reusable helpers used across the hclust test suite.

Functions:
- reference_centroid_linkage(X): straightforward NumPy centroid linkage used as an oracle.
- is_partition(clusters, n): whether clusters cover range(n) exactly once.
- merge_signature(events): comparable (cluster_a, cluster_b, merged) triples.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np


def reference_centroid_linkage(X: np.ndarray) -> List[Tuple[List[int], List[int], float, List[int]]]:
    """
    Independent centroid-linkage implementation on NumPy float64 arrays.

    Uses the same scan order and strict-less-than tie rule as the engine, and
    returns (cluster_a, cluster_b, distance, merged) per merge.
    """
    X = np.asarray(X, dtype=np.float64)
    clusters = [[i] for i in range(X.shape[0])]
    merges = []

    while len(clusters) > 1:
        centroids = [X[c].mean(axis=0) for c in clusters]
        best, best_pair = np.inf, None
        for i in range(len(clusters)):
            for j in range(i + 1, len(clusters)):
                d = float(np.linalg.norm(centroids[i] - centroids[j]))
                if d < best:
                    best, best_pair = d, (i, j)
        i, j = best_pair
        a, b = clusters[i], clusters[j]
        merged = sorted(a + b)
        merges.append((list(a), list(b), best, merged))
        clusters[i] = merged
        del clusters[j]

    return merges


def is_partition(clusters: Sequence[Sequence[int]], n: int) -> bool:
    """True when every index in range(n) appears in exactly one cluster."""
    flat = [i for cluster in clusters for i in cluster]
    return sorted(flat) == list(range(n)) and all(len(c) > 0 for c in clusters)


def merge_signature(events) -> List[Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]]:
    """Membership part of each event, for exact comparison between runs."""
    return [(tuple(e.cluster_a), tuple(e.cluster_b), tuple(e.merged)) for e in events]


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Example
    -------
    >>> with time_block("fit", {"n": 60, "d": 3}):
    ...     engine.fit(X)

    Output
    ------
    [timing] fit {"n":60,"d":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.

    Example:
    [timing] fit {"n":60,"d":3} 0.123s
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"), default=repr)
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
