"""
Input validation and preprocessing utilities.

Provides functions for validating data before clustering, plus the column
statistics and z-score standardization used when reporting on a dataset.
"""

from typing import Optional, Union, Tuple
import torch
from torch import Tensor
import numpy as np
import pandas as pd
import warnings

from ..base.exceptions import InvalidInput


MatrixLike = Union[Tensor, np.ndarray, pd.DataFrame, list]


def validate_data(X: MatrixLike,
                  dtype: torch.dtype = torch.float64,
                  device: Optional[torch.device] = None,
                  ensure_2d: bool = True,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1,
                  ensure_min_features: int = 1) -> Tensor:
    """Validate and convert input data to a fresh tensor.

    The returned tensor never shares storage with ``X``, so the caller's
    matrix cannot be changed through it.

    Args:
        X: Input data (tensor, numpy array, DataFrame, or nested list)
        dtype: Target data type
        device: Target device
        ensure_2d: Whether to ensure 2D shape
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required
        ensure_min_features: Minimum number of features required

    Returns:
        Validated tensor

    Raises:
        InvalidInput: If validation fails
    """
    if isinstance(X, pd.DataFrame):
        X = X.to_numpy()

    if not isinstance(X, (Tensor, np.ndarray, list, tuple)):
        raise InvalidInput(f"Cannot convert {type(X)} to tensor")

    try:
        if isinstance(X, Tensor):
            X = X.detach().to(dtype=dtype, device=device).clone()
        else:
            X = torch.tensor(X, dtype=dtype, device=device)
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidInput(f"Input is not a rectangular numeric matrix: {e}") from e

    if ensure_2d:
        if X.dim() == 1:
            X = X.unsqueeze(1)
        elif X.dim() != 2:
            raise InvalidInput(f"Expected 2D array, got {X.dim()}D")

        n_samples, n_features = X.shape

        if n_samples < ensure_min_samples:
            raise InvalidInput(f"Found {n_samples} samples, but need at least "
                               f"{ensure_min_samples}")

        if n_features < ensure_min_features:
            raise InvalidInput(f"Found {n_features} features, but need at least "
                               f"{ensure_min_features}")

    if ensure_finite:
        if torch.isnan(X).any():
            raise InvalidInput("Input contains NaN values")
        if torch.isinf(X).any():
            raise InvalidInput("Input contains infinite values")

    return X


def column_statistics(X: MatrixLike) -> Tuple[Tensor, Tensor]:
    """Column-wise mean and sample standard deviation.

    Args:
        X: (n, d) data

    Returns:
        (d,) mean vector and (d,) standard deviation vector. The deviation
        uses the n - 1 denominator and is 0 for a single observation.
    """
    X = validate_data(X)
    mean = X.mean(dim=0)

    if X.shape[0] < 2:
        std = torch.zeros_like(mean)
    else:
        std = X.std(dim=0)

    return mean, std


def mean_square_deviation(X: MatrixLike, mean: Optional[Tensor] = None) -> Tensor:
    """Root of the mean squared deviation of each column from ``mean``.

    Computes sqrt(sum_i (x_ij - mean_j)^2 / n) for every column j.

    Args:
        X: (n, d) data
        mean: Optional (d,) mean vector; computed from X if None

    Returns:
        (d,) tensor
    """
    X = validate_data(X)
    if mean is None:
        mean = X.mean(dim=0)
    else:
        mean = validate_data(mean, ensure_2d=False).to(X.device).reshape(-1)
        if mean.shape[0] != X.shape[1]:
            raise InvalidInput(f"Expected mean of length {X.shape[1]}, got {mean.shape[0]}")

    squared = (X - mean.unsqueeze(0)) ** 2
    return torch.sqrt(squared.sum(dim=0) / X.shape[0])


def standardize(X: MatrixLike,
                mean: Optional[Tensor] = None,
                std: Optional[Tensor] = None) -> Tensor:
    """Z-score each column: (x - mean) / std.

    Columns with zero standard deviation are only centred.

    Args:
        X: (n, d) data
        mean: Optional (d,) means; computed with std if either is None
        std: Optional (d,) standard deviations

    Returns:
        Standardized (n, d) tensor
    """
    X = validate_data(X)
    if mean is None or std is None:
        mean, std = column_statistics(X)
    else:
        mean = validate_data(mean, ensure_2d=False).to(X.device).reshape(-1)
        std = validate_data(std, ensure_2d=False).to(X.device).reshape(-1)

    if mean.shape[0] != X.shape[1] or std.shape[0] != X.shape[1]:
        raise InvalidInput(f"Expected statistics of length {X.shape[1]}, "
                           f"got mean {mean.shape[0]} and std {std.shape[0]}")

    constant = std == 0
    if constant.any():
        warnings.warn(f"{int(constant.sum())} constant feature(s) were centred but not scaled")
        std = torch.where(constant, torch.ones_like(std), std)

    return (X - mean.unsqueeze(0)) / std.unsqueeze(0)
