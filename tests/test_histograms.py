"""Tests for the sparse box-counting histogram.

Verifies normalization, the occupied-box counts on small known datasets, and
the alignment of box edges with their probabilities.
"""

from __future__ import annotations
import numpy as np
import pytest

from src.dynentropy.errors import EmptyInput, InvalidBoxSize
from src.dynentropy.histograms import binhist, non0hist

RNG = np.random.default_rng(0)


def test_two_clusters_give_two_equal_boxes(two_cluster_points) -> None:
    p = non0hist(0.1, two_cluster_points)
    assert np.allclose(np.sort(p), [0.5, 0.5])


@pytest.mark.parametrize("eps", [1e-3, 0.05, 0.3, 2.0])
def test_probabilities_sum_to_one(henon_points, eps) -> None:
    p = non0hist(eps, henon_points)
    assert np.isclose(p.sum(), 1.0)
    assert np.all(p > 0)
    assert p.size <= len(henon_points)


def test_identical_points_give_single_box() -> None:
    data = np.tile([1.5, -2.0, 3.0], (50, 1))
    p = non0hist(0.01, data)
    assert p.tolist() == [1.0]


def test_single_point() -> None:
    assert non0hist(0.5, [[3.0, 4.0]]).tolist() == [1.0]


def test_one_dimensional_input_reads_as_scalar_points() -> None:
    p = non0hist(1.0, [0.1, 0.2, 1.5, 2.5, 2.6, 2.7])
    assert np.allclose(np.sort(p), [1 / 6, 2 / 6, 3 / 6])


def test_high_dimension_small_box_stays_sparse() -> None:
    # a dense grid here would have ~1e6 ** 20 cells
    data = RNG.normal(size=(500, 20))
    p = non0hist(1e-6, data)
    assert p.size == 500
    assert np.allclose(p, 1 / 500)


def test_counts_match_unique_rows(henon_points) -> None:
    eps = 0.1
    boxes = np.floor((henon_points - henon_points.min(axis=0)) / eps).astype(int)
    _, counts = np.unique(boxes, axis=0, return_counts=True)
    p = non0hist(eps, henon_points)
    assert np.allclose(np.sort(p), np.sort(counts / len(henon_points)))


def test_binhist_edges_aligned_with_probabilities(henon_points) -> None:
    eps = 0.2
    p, edges = binhist(eps, henon_points)
    assert len(p) == len(edges)
    assert edges.shape[1] == henon_points.shape[1]
    assert np.allclose(p, non0hist(eps, henon_points))
    # every edge is a distinct box corner on the grid anchored at the minimum
    mini = henon_points.min(axis=0)
    steps = (edges - mini) / eps
    assert np.allclose(steps, np.round(steps))
    assert len(np.unique(np.round(steps), axis=0)) == len(edges)


def test_binhist_edges_hold_their_points(two_cluster_points) -> None:
    p, edges = binhist(0.1, two_cluster_points)
    for prob, edge in zip(p, edges):
        inside = np.all((two_cluster_points >= edge - 1e-12) & (two_cluster_points < edge + 0.1), axis=1)
        assert np.isclose(inside.mean(), prob)


@pytest.mark.parametrize("eps", [0, -0.1, float("nan"), float("inf")])
def test_invalid_box_size(two_cluster_points, eps) -> None:
    with pytest.raises(InvalidBoxSize):
        non0hist(eps, two_cluster_points)
    with pytest.raises(InvalidBoxSize):
        binhist(eps, two_cluster_points)


def test_box_indices_beyond_int64_raise() -> None:
    """Box sizes so small that indices overflow int64 must not merge distinct boxes."""
    data = [[0.0], [1.0], [1.5]]
    with pytest.raises(InvalidBoxSize):
        non0hist(1e-19, data)
    with pytest.raises(InvalidBoxSize):
        binhist(1e-19, data)
    # just inside the int64 range still resolves every point
    assert np.allclose(non0hist(1e-18, data), 1 / 3)


def test_empty_dataset() -> None:
    with pytest.raises(EmptyInput):
        non0hist(0.1, np.empty((0, 3)))
