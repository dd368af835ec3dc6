from abc import ABC, abstractmethod

from .solution import Cost, FeasibleSolution


class Move(ABC):
    """
    Transformation to be operated on a solution.

    Concrete moves provide both apply and evaluate. After apply, the
    solution's cost_function() must equal what evaluate returned for the
    same solution.
    """

    @abstractmethod
    def apply(self, solution: FeasibleSolution) -> None:
        """Operates this move on solution (changes it in place)."""
        pass

    @abstractmethod
    def evaluate(self, solution: FeasibleSolution) -> Cost:
        """Cost the solution would have after apply, without changing it."""
        pass


class ManaMove(Move):
    """
    A move that can be stored in a forbidden-move (tabu) structure.

    Identity is given by the parameters of the move, not by its effect on a
    solution: two different moves reaching the same cost are not equal.
    Moves that compare equal must return the same hash().
    """

    @abstractmethod
    def clone(self) -> "ManaMove":
        """Independent copy of this move."""
        pass

    def opposite_of(self) -> "ManaMove":
        """
        Move that undoes this one.

        Defaults to clone(), so that a tabu list forbids repeating the last
        move. Override it to forbid undoing the last move instead.
        """
        return self.clone()

    @abstractmethod
    def hash(self) -> int:
        """Hash signature of this move."""
        pass

    @abstractmethod
    def equals(self, other: "ManaMove") -> bool:
        """Tells whether other is the same move as this one."""
        pass

    def __eq__(self, other):
        if not isinstance(other, ManaMove):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return self.hash()
