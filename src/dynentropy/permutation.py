"""Permutation entropy of scalar time series (Bandt & Pompe, 2002).

Every window of `order` samples, taken `interval` samples apart, is reduced to
its ordinal pattern: the (1-based) permutation that sorts the window. Ties are
ranked by position inside the window, so equal values never produce a
spurious pattern. The entropy is the Shannon entropy of the observed pattern
frequencies.

References:
    C. Bandt & B. Pompe, Phys. Rev. Lett. 88 (17), 174102 (2002)
"""

from __future__ import annotations
import math
from bisect import bisect_left
from itertools import permutations
from numbers import Integral
from typing import Any, List, Tuple

import numpy as np

from ._logbase import check_base, shannon
from .data.points import as_series
from .errors import EmptyInput, InvalidInterval, InvalidOrder
from .utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["MAX_PERMUTATION_ORDER", "ordinal_patterns", "permentropy"]

MAX_PERMUTATION_ORDER = 255


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def ordinal_patterns(order: int) -> List[Tuple[int, ...]]:
    """All permutations of 1..order, sorted lexicographically."""
    return sorted(permutations(range(1, order + 1)))


def permentropy(x: Any, order: int, interval: int = 1, base: float = math.e) -> float:
    """
    Compute the permutation entropy of `x` for patterns of length `order`.

    Args:
        x: 1D signal.
        order: pattern length, 2 <= order <= 255. The pattern table has order! entries,
            so practical values are single digits.
        interval: spacing between the samples of one window.
        base: logarithm base.

    Returns:
        Entropy scalar >= 0; 0 when every window has the same ordinal pattern.

    Raises:
        InvalidOrder: order outside [2, 255] or not an integer.
        InvalidInterval: interval not a positive integer.
        EmptyInput: x is empty or shorter than one window.
    """
    if not _is_int(order) or not 2 <= order <= MAX_PERMUTATION_ORDER:
        raise InvalidOrder(f"order must be an integer in [2, {MAX_PERMUTATION_ORDER}], got {order!r}")
    if not _is_int(interval) or interval < 1:
        raise InvalidInterval(f"interval must be a positive integer, got {interval!r}")
    b = check_base(base)
    x = as_series(x)

    span = interval * (order - 1)
    n_windows = x.size - span
    if n_windows < 1:
        raise EmptyInput(f"series of length {x.size} is too short for order={order}, interval={interval}")

    patterns = ordinal_patterns(int(order))
    counts = np.zeros(len(patterns), dtype=np.int64)
    for t in range(n_windows):
        window = x[t : t + span + 1 : interval]
        pattern = tuple(int(i) + 1 for i in np.argsort(window, kind="stable"))
        counts[bisect_left(patterns, pattern)] += 1

    # zero counts would feed log(0); they contribute nothing anyway
    nonzero = counts[counts > 0]
    logger.debug("order=%d interval=%d: %d windows, %d distinct patterns", order, interval, n_windows, nonzero.size)
    p = nonzero / nonzero.sum()
    return shannon(p, b)
