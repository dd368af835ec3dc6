from abc import ABC, abstractmethod

Cost = float


class FeasibleSolution(ABC):
    """
    Generic base class for a point of the search space.

    "Feasible" refers to the space the local search explores, not to the
    constraints of the problem: a model may let the search wander into
    infeasible regions and account for it with a penalty in the cost function.
    """

    @abstractmethod
    def cost_function(self) -> Cost:
        """Cost to be minimized. Must not change the state of the solution."""
        pass

    def is_feasible(self) -> bool:
        """Strict feasibility w.r.t. the problem constraints (used by recorders)."""
        return True


class CopyableSolution(FeasibleSolution):
    """A solution that can be value-copied from another of the same kind."""

    @abstractmethod
    def copy_from(self, other: "CopyableSolution") -> None:
        """
        Copies the full state of other into this solution.

        Needed to save the best solution so far. Copying from a solution of a
        different concrete kind is a programming error.
        """
        pass
