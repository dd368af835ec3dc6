import numpy as np
import pytest

from local_search import AbstractSearch, PermutationProblem, make_rng


class OutOfPlace(PermutationProblem):
    """Number of positions holding a different element than the identity."""

    def cost_function(self) -> float:
        return float(np.count_nonzero(self.pi != np.arange(self.size())))


class GreedyDescent(AbstractSearch):
    """Best-improvement descent, stops at the first local optimum."""

    def __init__(self, working, recorder, move_manager, max_iterations=100, **kwargs):
        super().__init__(working, recorder, move_manager, **kwargs)
        self.max_iterations = max_iterations

    def search(self):
        while self.iteration < self.max_iterations:
            self._refresh_neighborhood()
            current = self.working.cost_function()
            best_index, best_cost = None, current
            for index, move in enumerate(self.move_manager):
                cost = move.evaluate(self.working)
                if cost < best_cost:
                    best_index, best_cost = index, cost
            if best_index is None:
                return
            self._make_move(best_index)
            self._record()


class RepeatFirstMove(AbstractSearch):
    """Applies the first move of the neighborhood a fixed number of times."""

    def __init__(self, working, recorder, move_manager, times, **kwargs):
        super().__init__(working, recorder, move_manager, **kwargs)
        self.times = times
        self.accepted = []

    def search(self):
        for _ in range(self.times):
            self._refresh_neighborhood()
            self._make_move(0)
            self.accepted.append(self._record())


@pytest.fixture
def rng():
    return make_rng(42)


@pytest.fixture
def problem():
    return OutOfPlace(5)
