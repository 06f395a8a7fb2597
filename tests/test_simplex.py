import numpy as np
import pytest

from nelmead import ConfigurationError, DimensionMismatchError, NonFiniteScoreError, Simplex, Vertex


def test_centroid_excludes_last_vertex():
    spx = Simplex.from_start([0.0, 0.0, 0.0], 3.0)
    assert np.array_equal(spx.centroid(), np.array([1.0, 1.0, 0.0]))


@pytest.mark.parametrize("dim", [1, 2, 5])
@pytest.mark.parametrize("step", [0.5, -2.0])
def test_from_start_builds_axis_simplex(dim, step, rng):
    start = rng.normal(size=dim)
    spx = Simplex.from_start(start, step)
    assert len(spx) == dim + 1
    assert np.array_equal(spx[0].x, start)
    for i in range(1, dim + 1):
        diff = spx[i].x - spx[0].x
        expected = np.zeros(dim)
        expected[i - 1] = spx[i].x[i - 1] - start[i - 1]
        assert np.array_equal(diff, expected)
        assert spx[i].x[i - 1] == start[i - 1] + step
    assert all(v.score is None for v in spx)


def test_from_start_copies_start():
    start = np.array([1.0, 2.0])
    spx = Simplex.from_start(start, 1.0)
    spx[0].x[0] = 99.0
    assert start[0] == 1.0


def test_negative_step_goes_the_other_way():
    spx = Simplex.from_start([1.0, 2.0], -0.5)
    assert np.allclose(spx.positions(), [[1.0, 2.0], [0.5, 2.0], [1.0, 1.5]])


def test_sort_orders_scores_ascending(rng):
    spx = Simplex.from_start(np.zeros(6), 1.0)
    scores = rng.permutation(len(spx)).astype(float)
    for i, vertex in enumerate(spx):
        spx.set(i, vertex.x, scores[i])
    spx.sort()
    assert np.all(np.diff(spx.scores()) >= 0)
    assert spx.best.score == 0.0
    assert spx.worst.score == float(len(spx) - 1)
    assert spx.second_worst.score == float(len(spx) - 2)


def test_sort_keeps_positions_with_scores():
    spx = Simplex.from_start([0.0, 0.0], 1.0)
    spx.evaluate(lambda x: -float(x[0] + 2 * x[1]))
    spx.sort()
    assert np.array_equal(spx.best.x, [0.0, 1.0])
    assert np.array_equal(spx.worst.x, [0.0, 0.0])


def test_sort_requires_evaluated_vertices():
    spx = Simplex.from_start([0.0, 0.0], 1.0)
    with pytest.raises(ValueError):
        spx.sort()


def test_evaluate_scores_every_vertex(recording_objective):
    spx = Simplex.from_start([1.0, 2.0], 1.0)
    spx.evaluate(recording_objective)
    assert len(recording_objective.calls) == 3
    assert spx.scores().tolist() == [5.0, 8.0, 10.0]


def test_evaluate_rejects_non_finite_score():
    spx = Simplex.from_start([1.0], 1.0)
    with pytest.raises(NonFiniteScoreError) as excinfo:
        spx.evaluate(lambda x: float("nan"))
    assert np.array_equal(excinfo.value.position, [1.0])


def test_set_replaces_vertex():
    spx = Simplex.from_start([0.0, 0.0], 1.0)
    spx.set(2, np.array([4.0, 4.0]), 32.0)
    assert np.array_equal(spx[2].x, [4.0, 4.0])
    assert spx[2].score == 32.0
    assert len(spx) == 3


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_set_out_of_range_fails_fast(index):
    spx = Simplex.from_start([0.0, 0.0], 1.0)
    with pytest.raises(IndexError):
        spx.set(index, np.zeros(2), 0.0)


def test_set_rejects_wrong_length():
    spx = Simplex.from_start([0.0, 0.0], 1.0)
    with pytest.raises(DimensionMismatchError):
        spx.set(0, np.zeros(3), 0.0)


def test_from_start_rejects_empty_start():
    with pytest.raises(ConfigurationError):
        Simplex.from_start([], 1.0)


def test_simplex_needs_two_vertices():
    with pytest.raises(ConfigurationError):
        Simplex([Vertex(np.zeros(0))])
