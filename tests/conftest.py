# tests/conftest.py
"""Pytest fixtures for deterministic tests and small reusable datasets."""

from __future__ import annotations

import os
import random

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def deterministic_test_env():
    """
    Make tests deterministic:
      - set PYTHONHASHSEED
      - seed python and numpy
    """
    seed = int(os.environ.get("PYTEST_SEED", "42"))
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)
    yield


@pytest.fixture
def two_cluster_points() -> np.ndarray:
    """Four 1-D points falling into two boxes of size 0.1, two points each."""
    return np.array([[0.0], [0.05], [0.9], [0.95]])


@pytest.fixture
def henon_points() -> np.ndarray:
    """2000 points on the Henon attractor (a=1.4, b=0.3), transient dropped."""
    n, burn = 2000, 100
    x, y = 0.0, 0.0
    out = np.empty((n, 2))
    for i in range(n + burn):
        x, y = 1.0 - 1.4 * x * x + y, 0.3 * x
        if i >= burn:
            out[i - burn] = (x, y)
    return out
