import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so the random test matrices are reproducible."""
    return np.random.default_rng(20250117)
