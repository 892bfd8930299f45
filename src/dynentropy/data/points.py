# src/dynentropy/data/points.py
"""Coercion of caller data into the arrays the estimators work on.

Provides:
    - as_dataset(data) -> (n_points, D) float64 array
    - as_series(x) -> (n_samples,) float64 array

A dataset is any array-like of points sharing one dimension D: a list of tuples,
a numpy matrix, or a 1-D series (read as n one-dimensional points).
"""
from __future__ import annotations

from typing import Any

import numpy as np

from ..errors import EmptyInput, InvalidDataset

__all__ = ["as_dataset", "as_series"]


def _as_float_array(data: Any) -> np.ndarray:
    try:
        arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidDataset(f"Cannot read input as a numeric array: {exc}") from exc
    return arr


def _check_finite(arr: np.ndarray) -> None:
    if not np.isfinite(arr).all():
        raise InvalidDataset("Input contains NaN or infinite values")


def as_dataset(data: Any) -> np.ndarray:
    """
    Read `data` as a point cloud.

    Args:
        data: array-like of shape (n_points, D), or (n_points,) for scalar points.

    Returns:
        float64 array of shape (n_points, D).

    Raises:
        InvalidDataset: if the input is 0-D, has more than two axes, or holds non-finite values.
        EmptyInput: if there are no points or the points have no coordinates.
    """
    arr = _as_float_array(data)
    if arr.ndim == 1:
        arr = arr[:, None]
    if arr.ndim != 2:
        raise InvalidDataset(f"dataset must be shape (n_points, D), got {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise EmptyInput(f"dataset has no points (shape {arr.shape})")
    _check_finite(arr)
    return arr


def as_series(x: Any) -> np.ndarray:
    """
    Read `x` as a scalar time series.

    Column or row vectors ((n, 1) / (1, n)) are flattened; any other 2-D shape is rejected.
    """
    arr = _as_float_array(x)
    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.ravel()
    if arr.ndim != 1:
        raise InvalidDataset(f"series must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise EmptyInput("series is empty")
    _check_finite(arr)
    return arr
