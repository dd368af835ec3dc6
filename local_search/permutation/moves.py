from ..core.move import ManaMove
from ..core.solution import Cost
from .problem import PermutationProblem


class SwapElements(ManaMove):
    """
    Swaps two elements of a PermutationProblem.

    Swapping (a, b) is the same move as swapping (b, a), so positions are
    stored ordered. The move is its own inverse.
    """

    def __init__(self, i: int, j: int):
        self.p1, self.p2 = min(i, j), max(i, j)

    def change(self, i: int, j: int) -> None:
        self.p1, self.p2 = min(i, j), max(i, j)

    def apply(self, solution: PermutationProblem) -> None:
        solution.swap(self.p1, self.p2)

    def evaluate(self, solution: PermutationProblem) -> Cost:
        return solution.evaluate_swap(self.p1, self.p2)

    def clone(self) -> "SwapElements":
        return SwapElements(self.p1, self.p2)

    def hash(self) -> int:
        return (self.p1 << 16) ^ self.p2

    def equals(self, other: ManaMove) -> bool:
        if not isinstance(other, SwapElements):
            return False
        return self.p1 == other.p1 and self.p2 == other.p2

    def __repr__(self):
        return f"SwapElements({self.p1}, {self.p2})"


class InvertSubsequence(ManaMove):
    """
    Inverts the subsequence from p1 to p2 of a PermutationProblem.

    Positions are ordered: with p1 > p2 the subsequence wraps around the end.
    The move is its own inverse.
    """

    def __init__(self, i: int, j: int):
        self.p1, self.p2 = i, j

    def change(self, i: int, j: int) -> None:
        self.p1, self.p2 = i, j

    def apply(self, solution: PermutationProblem) -> None:
        solution.invert(self.p1, self.p2)

    def evaluate(self, solution: PermutationProblem) -> Cost:
        return solution.evaluate_inversion(self.p1, self.p2)

    def clone(self) -> "InvertSubsequence":
        return InvertSubsequence(self.p1, self.p2)

    def hash(self) -> int:
        return (self.p1 << 16) ^ self.p2

    def equals(self, other: ManaMove) -> bool:
        if not isinstance(other, InvertSubsequence):
            return False
        return self.p1 == other.p1 and self.p2 == other.p2

    def __repr__(self):
        return f"InvertSubsequence({self.p1}, {self.p2})"
