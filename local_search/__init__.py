from .core import (AbstractSearch, BestEverSolution, BestFeasibleSolution, CopyableSolution, Cost,
                   DebugOptions, FeasibleSolution, HistoryRecorder, ManaMove, Move, MoveManager,
                   NoMovesError, Observer, ProgressLogger, SearchListener, SearchState, SolutionRecorder,
                   SolutionRecorderChain, Subject)
from .permutation import (InvertFullNeighborhood, InvertSubsequence, PermutationProblem, SwapElements,
                          SwapFullNeighborhood, SwapNeighborhood, perturbate, random_shuffle)
from .rng import make_rng, uniform_int

__version__ = "0.1.0"
