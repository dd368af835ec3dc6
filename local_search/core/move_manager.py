from collections import deque
from typing import Iterable, Iterator, Optional

from .move import Move
from .solution import FeasibleSolution


class MoveManager:
    """
    Neighborhood generator.

    Holds the ordered queue of candidate moves explored by a search at each
    iteration. The order is the iteration order, not a priority.

    A constant neighborhood fills the queue once (e.g. passing the moves to the
    constructor) and keeps the default no-op refresh(). A variable neighborhood
    overrides refresh() to rebuild or re-parameterize the queue from the
    current solution.

    The manager owns its moves: a search that needs a move to outlive the next
    refresh() must clone it.
    """

    def __init__(self, moves: Optional[Iterable[Move]] = None):
        self._moves: deque = deque(moves if moves is not None else [])

    def refresh(self, solution: FeasibleSolution) -> None:
        """Selects the moves to explore from solution. No-op for constant neighborhoods."""
        pass

    @property
    def moves(self) -> tuple:
        return tuple(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]

    def __repr__(self):
        return f"{self.__class__.__name__}(size={len(self._moves)})"
