# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the hclust test suite.

Intended usage:
    >>> X, y = make_blobs(n_per=5, centers=[[0, 0], [10, 0]], seed=0)
    >>> X.shape, y.shape
    ((10, 2), (10,))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray


def make_blobs(
    n_per: int = 5,
    centers: Sequence[Sequence[float]] = ((0.0, 0.0), (10.0, 0.0), (0.0, 10.0)),
    spread: float = 0.2,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Isotropic Gaussian blobs, one per centre, rows grouped by blob.

    Parameters
    ----------
    n_per : int
        Points per blob.
    centers : sequence of (d,) coordinates
        Blob centres; all must share the same length.
    spread : float
        Standard deviation of each coordinate around its centre.
    seed : int or None
        RNG seed for reproducibility.

    Returns
    -------
    X : (len(centers) * n_per, d) ndarray, float64
    y : (len(centers) * n_per,) ndarray, int64 blob index per row
    """
    rng = np.random.default_rng(seed)
    centers = np.asarray(centers, dtype=np.float64)
    k, d = centers.shape

    X = np.concatenate([c + spread * rng.standard_normal((n_per, d)) for c in centers])
    y = np.repeat(np.arange(k, dtype=np.int64), n_per)
    return X, y


def make_uniform(n: int = 20, d: int = 3, seed: Optional[int] = None) -> NDArray:
    """Points drawn uniformly from the unit cube [0, 1]^d."""
    rng = np.random.default_rng(seed)
    return rng.random((n, d))


def make_identical_rows(n: int = 4, value: Sequence[float] = (1.0, 1.0)) -> NDArray:
    """n copies of the same row."""
    return np.tile(np.asarray(value, dtype=np.float64), (n, 1))


def make_inversion_triangle() -> NDArray:
    """
    Equilateral triangle with unit sides.

    The first merge joins two corners at distance 1; the centroid of that pair
    lies sqrt(3)/2 from the third corner, so the second merge is lower than
    the first (a centroid-linkage inversion).
    """
    return np.array([
        [0.0, 0.0],
        [1.0, 0.0],
        [0.5, np.sqrt(3.0) / 2.0],
    ])
