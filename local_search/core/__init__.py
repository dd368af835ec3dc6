from .abstract_search import AbstractSearch, DebugOptions, SearchState
from .errors import NoMovesError
from .listeners import HistoryRecorder, ProgressLogger, SearchListener
from .move import ManaMove, Move
from .move_manager import MoveManager
from .observer import Observer, Subject
from .recorder import BestEverSolution, BestFeasibleSolution, SolutionRecorder, SolutionRecorderChain
from .solution import CopyableSolution, Cost, FeasibleSolution
