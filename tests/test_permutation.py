import numpy as np
import pytest

from local_search import InvertSubsequence, SwapElements, perturbate, random_shuffle

from conftest import OutOfPlace


def test_identity_initialization():
    p = OutOfPlace(7)
    assert p.pi.tolist() == list(range(7))
    assert p.size() == 7
    assert p.cost_function() == 0


@pytest.mark.parametrize("i,j", [(0, 1), (1, 0), (0, 4), (2, 3), (4, 1)])
def test_swap_is_an_involution(problem, i, j):
    move = SwapElements(i, j)
    move.apply(problem)
    assert problem.pi[i] == j and problem.pi[j] == i
    move.apply(problem)
    assert problem.pi.tolist() == list(range(5))


def test_invert_reverses_closed_range(problem):
    InvertSubsequence(1, 3).apply(problem)
    assert problem.pi.tolist() == [0, 3, 2, 1, 4]


def test_invert_wraps_around_the_end(problem):
    InvertSubsequence(3, 1).apply(problem)
    # positions 3, 4, 0, 1 reversed
    assert problem.pi.tolist() == [4, 3, 2, 1, 0]


@pytest.mark.parametrize("i,j", [(0, 4), (1, 3), (3, 1), (4, 0), (2, 3), (0, 1)])
def test_invert_is_an_involution(i, j):
    p = OutOfPlace(6)
    perturbate(p, 4, np.random.default_rng(1))
    before = p.pi.tolist()
    move = InvertSubsequence(i, j)
    move.apply(p)
    move.apply(p)
    assert p.pi.tolist() == before


def test_evaluate_does_not_change_the_solution(problem):
    move = SwapElements(0, 3)
    assert move.evaluate(problem) == 2
    assert problem.pi.tolist() == list(range(5))
    move.apply(problem)
    assert problem.cost_function() == 2


def test_invert_evaluate_matches_apply(problem):
    move = InvertSubsequence(0, 4)
    expected = move.evaluate(problem)
    assert problem.cost_function() == 0
    move.apply(problem)
    assert problem.cost_function() == expected == 4


def test_copy_from_is_a_value_copy(problem):
    other = OutOfPlace(5)
    other.swap(0, 1)
    problem.copy_from(other)
    assert problem.pi.tolist() == [1, 0, 2, 3, 4]
    other.swap(0, 1)
    assert problem.pi.tolist() == [1, 0, 2, 3, 4]


def test_copy_from_other_kind_is_rejected(problem):
    from local_search import CopyableSolution

    class Scalar(CopyableSolution):
        def cost_function(self):
            return 0.0

        def copy_from(self, other):
            pass

    with pytest.raises(TypeError):
        problem.copy_from(Scalar())


def test_random_shuffle_keeps_a_permutation(rng):
    p = OutOfPlace(20)
    random_shuffle(p, rng)
    assert sorted(p.pi.tolist()) == list(range(20))


def test_perturbate_keeps_a_permutation(rng):
    p = OutOfPlace(10)
    perturbate(p, 3, rng)
    assert sorted(p.pi.tolist()) == list(range(10))
    assert p.cost_function() <= 6


def test_perturbate_needs_two_elements(rng):
    with pytest.raises(ValueError):
        perturbate(OutOfPlace(1), 1, rng)
