import numpy as np

from ..core.move_manager import MoveManager
from ..rng import uniform_int
from .moves import InvertSubsequence, SwapElements
from .problem import PermutationProblem


class SwapNeighborhood(MoveManager):
    """
    Stochastic subset of the swap neighborhood.

    Each refresh() draws `moves` random swaps of two distinct positions. The
    SwapElements instances are allocated once and re-parameterized in place.
    """

    def __init__(self, rng: np.random.Generator, moves: int):
        """
        Args:
            rng (np.random.Generator): Random source (see local_search.rng.make_rng).
            moves (int): Number of swaps to explore at each iteration.
        """
        if moves < 0:
            raise ValueError("Number of moves must be non-negative.")
        super().__init__(SwapElements(0, 1) for _ in range(moves))
        self.rng = rng

    def refresh(self, solution: PermutationProblem) -> None:
        size = solution.size()
        if size < 2:
            raise ValueError("Swap neighborhood needs a permutation of at least two elements.")
        for move in self._moves:
            self._randomize_move(move, size)

    def _randomize_move(self, move: SwapElements, size: int) -> None:
        p1 = uniform_int(self.rng, size)
        p2 = uniform_int(self.rng, size)
        while p1 == p2:
            p2 = uniform_int(self.rng, size)
        move.change(p1, p2)


class SwapFullNeighborhood(MoveManager):
    """Constant neighborhood made of every swap (i, j), i < j."""

    def __init__(self, size: int):
        super().__init__(SwapElements(i, j) for i in range(size - 1) for j in range(i + 1, size))


class InvertFullNeighborhood(MoveManager):
    """Constant neighborhood made of every subsequence inversion (i, j), i != j."""

    def __init__(self, size: int):
        super().__init__(InvertSubsequence(i, j) for i in range(size) for j in range(size) if i != j)
