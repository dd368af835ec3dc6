from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random generator to hand to stochastic neighborhoods and perturbations."""
    return np.random.default_rng(seed)


def uniform_int(rng: np.random.Generator, size: int) -> int:
    """Uniform integer in [0, size)."""
    return int(rng.integers(0, size))
