import pytest

from sgd_course import synthetic_linear_data


@pytest.fixture
def line_data():
    """30 noiseless observations of y = 30 + 2x with x in [0, 100)."""
    return synthetic_linear_data(num_samples=30, bias=30.0, weight=2.0, low=0.0, high=100.0, seed=7)
