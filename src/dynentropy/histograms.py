"""Sparse box-counting histograms of point clouds.

Provides:
  - non0hist(eps, data) -> p
  - binhist(eps, data) -> (p, edges)

Points are mapped to integer box indices, the indices are sorted
lexicographically and each run of equal indices becomes one histogram entry.
No grid is ever allocated, so cost depends on the number of points and not on
the number of boxes covering the data: high-dimensional datasets and tiny box
sizes are fine.
"""

from __future__ import annotations
import math
from typing import Any, Tuple

import numpy as np

from .data.points import as_dataset
from .errors import InvalidBoxSize
from .utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["non0hist", "binhist"]


def _check_eps(eps: float) -> float:
    try:
        e = float(eps)
    except (TypeError, ValueError) as exc:
        raise InvalidBoxSize(f"box size must be a number, got {eps!r}") from exc
    if not math.isfinite(e) or e <= 0:
        raise InvalidBoxSize(f"box size must be finite and > 0, got {eps!r}")
    return e


def _non0hist(eps: float, data: Any) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Shared worker for `non0hist` and `binhist`.

    Returns:
        (p, boxes, mini) where `boxes` holds the distinct box indices (n_boxes, D)
        in the same order as `p` and `mini` is the per-dimension minimum.
    """
    e = _check_eps(eps)
    X = as_dataset(data)
    n = X.shape[0]
    mini = X.min(axis=0)

    scaled = np.floor((X - mini) / e)
    # int64 cast of values >= 2**63 (or inf) is undefined and merges distinct boxes
    if not scaled.max() < 2.0 ** 63:
        raise InvalidBoxSize(
            f"box size {eps!r} is too small for the data range "
            f"({float(np.max(X.max(axis=0) - mini)):g}); box indices overflow int64"
        )
    bins = scaled.astype(np.int64)
    # lexsort treats its last key as primary; reverse so column 0 is most significant
    bins = bins[np.lexsort(bins.T[::-1])]

    # a new run starts wherever a row differs from its predecessor
    new_run = np.empty(n, dtype=bool)
    new_run[0] = True
    np.any(bins[1:] != bins[:-1], axis=1, out=new_run[1:])
    starts = np.flatnonzero(new_run)
    counts = np.diff(np.append(starts, n))

    p = counts / float(n)
    logger.debug("eps=%g: %d points in %d occupied boxes (D=%d)", e, n, p.size, X.shape[1])
    return p, bins[starts], mini


def non0hist(eps: float, data: Any) -> np.ndarray:
    """
    Partition a dataset into boxes of side `eps` and return the occupied-box probabilities.

    Args:
        eps: box size, finite and > 0.
        data: point cloud, array-like of shape (n_points, D) (1-D input = scalar points).

    Returns:
        1D array of probabilities summing to 1, one entry per occupied box.
        Entry order carries no meaning; use `binhist` to know which box is which.

    Raises:
        InvalidBoxSize: if eps is not a finite positive number.
        EmptyInput: if the dataset has no points.
    """
    return _non0hist(eps, data)[0]


def binhist(eps: float, data: Any) -> Tuple[np.ndarray, np.ndarray]:
    """
    Same as `non0hist` but also return the lower-corner coordinates of each occupied box.

    Returns:
        (p, edges) with `edges` of shape (len(p), D); row i is `box_index * eps + min`
        for the box whose probability is p[i].
    """
    p, boxes, mini = _non0hist(eps, data)
    edges = boxes * float(eps) + mini
    return p, edges
