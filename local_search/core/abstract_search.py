import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .errors import NoMovesError
from .listeners import HistoryRecorder, ProgressLogger
from .move import Move
from .move_manager import MoveManager
from .observer import Subject
from .recorder import SolutionRecorder
from .solution import FeasibleSolution

logger = logging.getLogger(__name__)


@dataclass
class DebugOptions:
    verbose: bool = False
    log_history: bool = False


class SearchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINATED = "terminated"
    NO_MOVES = "no_moves"


class AbstractSearch(Subject, ABC):
    """
    Abstract base class for neighborhood based metaheuristics.

    Binds together the working solution (modified in place during the search),
    a solution recorder deciding what to keep as the best solution, and a move
    manager generating the neighborhood. Concrete algorithms (tabu search,
    simulated annealing, ...) implement search(), which is a minimization.

    The move manager is any object with the MoveManager interface (refresh,
    len, indexing); it is bound at construction and called directly in the
    inner loop.

    Listeners attached to the search are notified after each event, and can
    tell why they were called through step.
    """

    MOVE_MADE = 0
    IMPROVEMENT_MADE = 1

    STEP_NAMES: Dict[int, str] = {
        MOVE_MADE: "move_made",
        IMPROVEMENT_MADE: "improvement_made",
    }

    def __init__(self, working: FeasibleSolution, recorder: SolutionRecorder,
                 move_manager: MoveManager, debug_options: DebugOptions = DebugOptions()):
        """
        Args:
            working (FeasibleSolution): The working solution, modified during search.
            recorder (SolutionRecorder): Records the best solution(s) found.
            move_manager (MoveManager): Problem specific neighborhood generator.
            debug_options (DebugOptions): Attaches a progress logger and/or a history recorder.
        """
        super().__init__()
        self._working = working
        self._solution_recorder = recorder
        self._move_manager = move_manager
        self.debug_options = debug_options

        # Execution state properties
        self._current_move_index: Optional[int] = None
        self._step: Optional[int] = None
        self._iters = 0
        self._start_time = None
        self.execution_time = 0.0
        self.state = SearchState.IDLE

        self.history: Optional[HistoryRecorder] = None
        if debug_options.verbose:
            self.attach(ProgressLogger())
        if debug_options.log_history:
            self.history = HistoryRecorder()
            self.attach(self.history)

    @abstractmethod
    def search(self) -> None:
        """
        The search loop.

        Raises NoMovesError when a move is needed and the neighborhood is empty.
        """
        pass

    def run(self) -> None:
        """Runs search() keeping track of the state of the search."""
        if self.state is SearchState.RUNNING:
            raise RuntimeError(f"{self.__class__.__name__} is already running.")

        self._reset_execution_state()
        self.state = SearchState.RUNNING
        logger.debug("%s started (cost=%s)", self.__class__.__name__, self._working.cost_function())
        try:
            self.search()
        except NoMovesError as e:
            self.state = SearchState.NO_MOVES
            logger.warning("%s stopped after %d moves: %s", self.__class__.__name__, self._iters, e)
            raise
        finally:
            self.execution_time = time.time() - self._start_time
            if self.state is SearchState.RUNNING:
                self.state = SearchState.TERMINATED
        logger.debug("%s terminated after %d moves in %.3fs",
                     self.__class__.__name__, self._iters, self.execution_time)

    @property
    def working(self) -> FeasibleSolution:
        return self._working

    @property
    def solution_recorder(self) -> SolutionRecorder:
        return self._solution_recorder

    @property
    def move_manager(self) -> MoveManager:
        return self._move_manager

    @property
    def current_move_index(self) -> Optional[int]:
        return self._current_move_index

    @property
    def current_move(self) -> Optional[Move]:
        """The last move made (valid until the next refresh of the neighborhood)."""
        if self._current_move_index is None:
            return None
        return self._move_manager[self._current_move_index]

    @property
    def step(self) -> Optional[int]:
        """What just happened: MOVE_MADE, IMPROVEMENT_MADE or an algorithm specific code."""
        return self._step

    def step_name(self) -> str:
        return self.STEP_NAMES.get(self._step, str(self._step))

    @property
    def iteration(self) -> int:
        """Number of moves made since run() started."""
        return self._iters

    def _reset_execution_state(self):
        self._current_move_index = None
        self._step = None
        self._iters = 0
        self._start_time = time.time()
        self.execution_time = 0.0
        if self.history is not None:
            self.history.clear()

    def _refresh_neighborhood(self) -> int:
        """Refreshes the move manager on the working solution and returns the neighborhood size."""
        self._move_manager.refresh(self._working)
        size = len(self._move_manager)
        if size == 0:
            raise NoMovesError()
        return size

    def _make_move(self, index: int) -> None:
        """Applies the index-th move of the neighborhood and notifies the listeners."""
        move = self._move_manager[index]
        move.apply(self._working)
        self._current_move_index = index
        self._iters += 1
        self._notify_step(self.MOVE_MADE)

    def _record(self) -> bool:
        """Offers the working solution to the recorder, notifying the listeners on improvement."""
        if self._solution_recorder.accept(self._working):
            self._notify_step(self.IMPROVEMENT_MADE)
            return True
        return False

    def _notify_step(self, step: int) -> None:
        self._step = step
        self.notify()
