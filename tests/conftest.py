import numpy as np
import pytest


@pytest.fixture
def random_rgba() -> np.ndarray:
    """Random 17x13 RGBA image as a flat buffer."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(13, 17, 4), dtype=np.uint8).reshape(-1)
