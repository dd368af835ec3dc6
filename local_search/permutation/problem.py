from abc import abstractmethod

import numpy as np

from ..core.solution import Cost, CopyableSolution
from ..rng import uniform_int


class PermutationProblem(CopyableSolution):
    """
    Skeleton for permutation problems (assignment, QAP, TSP, ...).

    The state is a permutation pi of [0..n-1], starting from the identity.
    Concrete problems provide cost_function() and may override the
    evaluate_swap() / evaluate_inversion() hooks for delta evaluation.
    """

    def __init__(self, n: int):
        self.pi = np.arange(n)

    @abstractmethod
    def cost_function(self) -> Cost:
        pass

    def copy_from(self, other: CopyableSolution) -> None:
        """
        Copies the permutation of other.

        Subclasses adding state must override this and call
        PermutationProblem.copy_from.
        """
        if not isinstance(other, PermutationProblem):
            raise TypeError(f"Cannot copy a {type(other).__name__} into a {type(self).__name__}.")
        self.pi = other.pi.copy()

    def size(self) -> int:
        return len(self.pi)

    def swap(self, i: int, j: int) -> None:
        self.pi[i], self.pi[j] = self.pi[j], self.pi[i]

    def invert(self, i: int, j: int) -> None:
        """
        Reverses the elements from position i to position j (both included).

        When i > j the subsequence wraps around the end of the permutation.
        """
        n = self.size()
        length = (j - i) % n + 1
        for k in range(length // 2):
            self.swap((i + k) % n, (j - k) % n)

    def evaluate_swap(self, i: int, j: int) -> Cost:
        """Cost after swap(i, j). Override for an efficient delta evaluation."""
        self.swap(i, j)
        cost = self.cost_function()
        self.swap(i, j)
        return cost

    def evaluate_inversion(self, i: int, j: int) -> Cost:
        """Cost after invert(i, j). Override for an efficient delta evaluation."""
        self.invert(i, j)
        cost = self.cost_function()
        self.invert(i, j)
        return cost

    def __repr__(self):
        return f"{self.__class__.__name__}(pi={self.pi.tolist()})"


def random_shuffle(problem: PermutationProblem, rng: np.random.Generator) -> None:
    """Shuffles the permutation (random starting point)."""
    rng.shuffle(problem.pi)


def perturbate(problem: PermutationProblem, n: int, rng: np.random.Generator) -> None:
    """Perturbates the permutation with n random swaps of distinct positions."""
    size = problem.size()
    if n > 0 and size < 2:
        raise ValueError("Cannot perturbate a permutation with less than two elements.")
    for _ in range(n):
        p1 = uniform_int(rng, size)
        p2 = uniform_int(rng, size)
        while p1 == p2:
            p2 = uniform_int(rng, size)
        problem.swap(p1, p2)
