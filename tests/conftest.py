import sys
import os

import numpy as np
import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def rng():
    """Seeded generator so property checks see the same colors every run."""
    return np.random.default_rng(20240611)


@pytest.fixture
def random_channels(rng):
    """Three hundred random RGBA channel tuples."""
    return [tuple(int(v) for v in row) for row in rng.integers(0, 256, size=(300, 4))]
