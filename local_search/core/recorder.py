"""
Solution recorders.

At the end of each iteration a search hands its working solution to a
recorder, which decides whether it becomes the new reference solution. What
"best" means is left to each recorder (best ever, best feasible, ...), and
several recorders can observe the same search through a chain.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from .solution import CopyableSolution, FeasibleSolution

logger = logging.getLogger(__name__)


class SolutionRecorder(ABC):

    @abstractmethod
    def accept(self, solution: FeasibleSolution) -> bool:
        """Returns True if solution was recorded as the new reference."""
        pass


class BestEverSolution(SolutionRecorder):
    """
    Records the best solution met during its lifetime.

    The record is a slot owned by the caller and overwritten with copy_from()
    only on a strict improvement: ties keep the first solution found.
    """

    def __init__(self, best: CopyableSolution):
        self._best_ever = best

    @property
    def best_ever(self) -> CopyableSolution:
        return self._best_ever

    def accept(self, solution: FeasibleSolution) -> bool:
        cost = solution.cost_function()
        if cost < self._best_ever.cost_function():
            self._best_ever.copy_from(solution)
            logger.debug("%s recorded new best: cost=%s", self.__class__.__name__, cost)
            return True
        return False


class BestFeasibleSolution(BestEverSolution):
    """Records the best solution that is feasible w.r.t. the problem constraints."""

    def accept(self, solution: FeasibleSolution) -> bool:
        if not solution.is_feasible():
            return False
        return super().accept(solution)


class SolutionRecorderChain(SolutionRecorder):
    """
    Chain of recorders observing the same iteration.

    Every recorder is asked in order, whatever the answers of the previous
    ones. accept() is True when at least one of them recorded the solution.
    """

    def __init__(self, recorders: Optional[Iterable[SolutionRecorder]] = None):
        self._recorders: List[SolutionRecorder] = list(recorders) if recorders is not None else []

    def append(self, recorder: SolutionRecorder) -> None:
        self._recorders.append(recorder)

    def accept(self, solution: FeasibleSolution) -> bool:
        accepted = False
        for recorder in self._recorders:
            if recorder.accept(solution):
                accepted = True
        return accepted

    def __iter__(self) -> Iterator[SolutionRecorder]:
        return iter(self._recorders)

    def __len__(self) -> int:
        return len(self._recorders)
