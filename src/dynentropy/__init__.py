"""Box-counting histograms and entropy estimators for dynamical systems and time series.

This module keeps the package importable and documents the public API surface.
"""

from .data.points import as_dataset, as_series
from .errors import (
    EmptyInput,
    EntropyError,
    InvalidBase,
    InvalidBoxSize,
    InvalidDataset,
    InvalidInterval,
    InvalidOrder,
)
from .generalized import ALPHA_TOL, genentropy, genentropy_dataset, genentropy_sweep
from .histograms import binhist, non0hist
from .permutation import MAX_PERMUTATION_ORDER, permentropy

__all__ = [
    "non0hist",
    "binhist",
    "genentropy",
    "genentropy_dataset",
    "genentropy_sweep",
    "permentropy",
    "as_dataset",
    "as_series",
    "ALPHA_TOL",
    "MAX_PERMUTATION_ORDER",
    "EntropyError",
    "InvalidBoxSize",
    "InvalidOrder",
    "EmptyInput",
    "InvalidBase",
    "InvalidInterval",
    "InvalidDataset",
]
