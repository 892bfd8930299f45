"""Exception taxonomy for the entropy estimators.

Every error derives from `EntropyError`, itself a `ValueError`, so callers that
already guard numeric code with `except ValueError` keep working.
"""

from __future__ import annotations

__all__ = [
    "EntropyError",
    "InvalidBoxSize",
    "InvalidOrder",
    "EmptyInput",
    "InvalidBase",
    "InvalidInterval",
    "InvalidDataset",
]


class EntropyError(ValueError):
    """Base class for invalid-input errors raised by the estimators."""


class InvalidBoxSize(EntropyError):
    """Box size epsilon is not a finite positive number."""


class InvalidOrder(EntropyError):
    """Renyi order alpha is negative/NaN, or permutation order is out of range."""


class EmptyInput(EntropyError):
    """Dataset, sequence or probability array has nothing to work on."""


class InvalidBase(EntropyError):
    """Logarithm base is not finite, not positive, or equal to 1."""


class InvalidInterval(EntropyError):
    """Permutation sampling interval is not a positive integer."""


class InvalidDataset(EntropyError):
    """Input cannot be read as a point cloud / series (shape or non-finite values)."""
