"""Logarithm helpers shared by the estimators.

The base is always an explicit argument; `math.e` is the default at every public entry point.
"""

from __future__ import annotations
import math

import numpy as np
from scipy.special import entr

from .errors import InvalidBase


def check_base(base: float) -> float:
    """Validate a logarithm base and return it as a float."""
    try:
        b = float(base)
    except (TypeError, ValueError) as exc:
        raise InvalidBase(f"log base must be a number, got {base!r}") from exc
    if not math.isfinite(b) or b <= 0 or b == 1.0:
        raise InvalidBase(f"log base must be finite, > 0 and != 1, got {base!r}")
    return b


def log_base(x, base: float):
    """Logarithm of `x` in `base` (scalar or elementwise)."""
    if base == math.e:
        return np.log(x)
    return np.log(x) / math.log(base)


def shannon(p: np.ndarray, base: float) -> float:
    """-sum(p * log_base(p)); scipy's `entr` maps p == 0 to 0."""
    return float(np.sum(entr(p)) / math.log(base))
