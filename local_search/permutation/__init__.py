from .moves import InvertSubsequence, SwapElements
from .neighborhoods import InvertFullNeighborhood, SwapFullNeighborhood, SwapNeighborhood
from .problem import PermutationProblem, perturbate, random_shuffle
