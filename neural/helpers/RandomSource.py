import string
import numpy as np
from .Backend import backend

ID_LENGTH = 10
INIT_LOW = -1.0
INIT_HIGH = 1.0

_ALPHABET = np.array(list(string.ascii_letters + string.digits))


class RandomSource:
    """
    Seedable source of layer ids and initial weights.

    Pass one explicitly (e.g. RandomSource(seed=0)) to get reproducible
    layers; otherwise the module-level default_random is used.
    """
    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def seed(self, seed=42):
        """Re-seed for reproducibility."""
        self.rng = np.random.default_rng(seed)

    def rand_string(self, n=ID_LENGTH):
        if n <= 0:
            raise ValueError(f"String length must be positive, got {n}")
        return "".join(self.rng.choice(_ALPHABET, size=n))

    def uniform(self, rows, cols, low=INIT_LOW, high=INIT_HIGH):
        # Draw on CPU, then move to backend
        dtype = backend.default_float
        values = self.rng.uniform(low, high, size=(rows, cols)).astype(dtype)
        # float64 draws next to a bound round onto it; keep the interval open
        lo = np.nextafter(dtype(low), dtype(high))
        hi = np.nextafter(dtype(high), dtype(low))
        return backend.ensure_array(np.clip(values, lo, hi))


default_random = RandomSource()
