import random
from contextlib import contextmanager

import numpy as np
import torch

from .config import get_config
from .errors import NullSequenceError

#-------------------------------------------------------------------------------
# Random source
#-------------------------------------------------------------------------------

class RandomSource:
    """
    An explicitly passed source of randomness. Every helper in this module
    takes an optional source; pass your own (e.g. RandomSource(seed=0)) to
    get deterministic results without touching global state.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def integer(self, lower, upper):
        """Random integer in [lower, upper)."""
        if upper <= lower:
            raise ValueError(f"Upper bound {upper!r} must be greater than lower bound {lower!r}")
        return int(self.generator.integers(lower, upper))

    def uniform(self, lower, upper):
        """Random float in [lower, upper)."""
        return float(self.generator.random() * (upper - lower) + lower)

    def color(self, alpha=255):
        """Random opaque-by-default RGBA tuple."""
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha must be in [0, 255], got {alpha!r}")
        red, green, blue = (int(c) for c in self.generator.integers(0, 256, size=3))
        return red, green, blue, alpha

    def binary_outcome(self, probability):
        """True with the given probability, in percent."""
        return probability >= 1 + int(self.generator.integers(0, 100))

    def shuffle(self, sequence):
        """In-place Fisher-Yates shuffle of any indexable mutable sequence."""
        if sequence is None:
            raise NullSequenceError("sequence")

        n = len(sequence)
        while n > 1:
            n -= 1
            k = int(self.generator.integers(0, n + 1))
            if isinstance(sequence, np.ndarray):
                # rows of a multi-dimensional array are views
                sequence[[k, n]] = sequence[[n, k]]
            else:
                sequence[k], sequence[n] = sequence[n], sequence[k]

_default_source = None
_default_source_config_seed = None

def get_default_source():
    """The shared source; recreated whenever the configured seed changes."""
    global _default_source, _default_source_config_seed
    seed = get_config().random.seed

    if _default_source is None or _default_source_config_seed != seed:
        _default_source = RandomSource(seed)
        _default_source_config_seed = seed

    return _default_source

def _source(source):
    return get_default_source() if source is None else source

def random_integer(lower, upper, source=None):
    return _source(source).integer(lower, upper)

def random_float(lower, upper, source=None):
    return _source(source).uniform(lower, upper)

def random_color(alpha=255, source=None):
    return _source(source).color(alpha)

def binary_outcome(probability, source=None):
    return _source(source).binary_outcome(probability)

def shuffle(sequence, source=None):
    _source(source).shuffle(sequence)

#-------------------------------------------------------------------------------
# Global random state management
#-------------------------------------------------------------------------------

def set_seed(seed):
    """Seeds random, numpy, torch and the shared RandomSource."""
    global _default_source, _default_source_config_seed
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)

    _default_source = RandomSource(seed)
    _default_source_config_seed = get_config().random.seed

class RandomState:
    def __init__(self):
        self.save_state()

    def save_state(self):
        self.random_state = random.getstate()
        self.np_random_state = np.random.get_state()
        self.torch_random_state = torch.get_rng_state()

        if torch.cuda.is_available():
            self.torch_cuda_random_state = torch.cuda.get_rng_state()

    def restore_state(self):
        random.setstate(self.random_state)
        np.random.set_state(self.np_random_state)
        torch.set_rng_state(self.torch_random_state)
        if torch.cuda.is_available():
            torch.cuda.set_rng_state(self.torch_cuda_random_state)

@contextmanager
def seeded(seed):
    """
    Seeds every global generator for the duration of the block and puts the
    previous global state back afterwards.

    Example:
        with seeded(0):
            a = random_integer(0, 100)
    """
    global _default_source, _default_source_config_seed
    state = RandomState()
    previous_source = (_default_source, _default_source_config_seed)

    set_seed(seed)
    try:
        yield
    finally:
        state.restore_state()
        _default_source, _default_source_config_seed = previous_source
