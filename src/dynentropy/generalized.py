"""Generalized (Renyi) entropies of probability arrays and point clouds.

For probabilities p (summing to 1) the order-alpha Renyi entropy is

    H_alpha(p) = 1 / (1 - alpha) * log(sum_i p_i ** alpha)

which reduces to the Hartley / max entropy (alpha = 0), the Shannon entropy
(alpha = 1), the collision entropy (alpha = 2) and the min-entropy
(alpha -> inf). The alpha = 0 and alpha = 1 cases are evaluated through their
closed forms whenever alpha lies within `ALPHA_TOL` of them.

Entry points:
  - genentropy(alpha, p, base=e)
  - genentropy_dataset(alpha, eps, data, base=e)
  - genentropy_sweep(alpha, eps_list, data, base=e)

References:
    A. Renyi, Proc. 4th Berkeley Symposium on Mathematics, Statistics and Probability, p. 547 (1960)
    C. E. Shannon, Bell System Technical Journal 27, p. 379 (1948)
"""

from __future__ import annotations
import math
from typing import Any, Iterable, List

import numpy as np

from ._logbase import check_base, log_base, shannon
from .errors import EmptyInput, InvalidOrder
from .histograms import non0hist

__all__ = ["ALPHA_TOL", "genentropy", "genentropy_dataset", "genentropy_sweep"]

# absolute tolerance used to snap alpha onto the 0 and 1 limits
ALPHA_TOL = 1e-9


def _check_alpha(alpha: float) -> float:
    try:
        a = float(alpha)
    except (TypeError, ValueError) as exc:
        raise InvalidOrder(f"entropy order must be a number, got {alpha!r}") from exc
    if math.isnan(a) or a < 0:
        raise InvalidOrder(f"entropy order must be >= 0, got {alpha!r}")
    return a


def genentropy(alpha: float, p: Any, base: float = math.e, *, atol: float = ALPHA_TOL) -> float:
    """
    Order-`alpha` generalized entropy of an array of probabilities.

    Args:
        alpha: entropy order, >= 0 (``math.inf`` gives the min-entropy).
        p: probabilities, assumed sum-normalized; they are not renormalized here.
        base: logarithm base.
        atol: how close alpha must be to 0 or 1 to use the Hartley / Shannon form.

    Returns:
        Entropy as a float.

    Raises:
        InvalidOrder: alpha negative or NaN.
        EmptyInput: p has no entries.
        InvalidBase: base not usable for logarithms.
    """
    a = _check_alpha(alpha)
    b = check_base(base)
    p = np.asarray(p, dtype=np.float64).ravel()
    if p.size == 0:
        raise EmptyInput("probability array is empty")

    if abs(a) <= atol:
        # Hartley: counts entries, ignores their weights
        return float(log_base(p.size, b))
    if abs(a - 1.0) <= atol:
        return shannon(p, b)
    if math.isinf(a):
        return float(-log_base(p.max(), b))
    return float(log_base(np.sum(p ** a), b) / (1.0 - a))


def genentropy_dataset(
    alpha: float, eps: float, data: Any, base: float = math.e, *, atol: float = ALPHA_TOL
) -> float:
    """
    Order-`alpha` entropy of a point cloud partitioned into boxes of side `eps`.

    Equivalent to ``genentropy(alpha, non0hist(eps, data), base, atol=atol)``.
    """
    _check_alpha(alpha)
    check_base(base)
    return genentropy(alpha, non0hist(eps, data), base, atol=atol)


def genentropy_sweep(
    alpha: float, eps_list: Iterable[float], data: Any, base: float = math.e, *, atol: float = ALPHA_TOL
) -> List[float]:
    """Same as ``[genentropy_dataset(alpha, eps, data, base, atol=atol) for eps in eps_list]``."""
    return [genentropy_dataset(alpha, eps, data, base, atol=atol) for eps in eps_list]
