import os
from types import SimpleNamespace

# Keep the suite on NumPy even where CuPy is installed
os.environ.setdefault("NEURAL_USE_GPU", "0")

import pytest

from neural import RandomSource


@pytest.fixture
def net():
    """Stand-in for a network: layers only look at its id."""
    return SimpleNamespace(id="testid")


@pytest.fixture
def rng():
    return RandomSource(seed=1234)
