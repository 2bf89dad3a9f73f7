"""Tests for observations and synthetic data."""

import dataclasses

import pytest

from sgd_course import InvalidArgument, Observation, Parameters, random_parameters, synthetic_linear_data


def test_observation_is_frozen():
    obs = Observation(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        obs.x = 3.0


def test_parameters_predict():
    assert Parameters(30.0, 2.0).predict(10.0) == 50.0


def test_synthetic_data_lies_on_line():
    data = synthetic_linear_data(num_samples=30, bias=30.0, weight=2.0, seed=0)
    assert len(data) == 30
    for obs in data:
        assert 0.0 <= obs.x < 100.0
        assert obs.y == pytest.approx(30.0 + 2.0 * obs.x)


def test_synthetic_data_seeded():
    assert synthetic_linear_data(seed=11) == synthetic_linear_data(seed=11)
    assert synthetic_linear_data(seed=11) != synthetic_linear_data(seed=12)


def test_synthetic_data_noise():
    clean = synthetic_linear_data(num_samples=50, seed=5)
    noisy = synthetic_linear_data(num_samples=50, noise=1.0, seed=5)
    assert [o.x for o in clean] == [o.x for o in noisy]
    assert [o.y for o in clean] != [o.y for o in noisy]


def test_synthetic_data_custom_range():
    data = synthetic_linear_data(num_samples=100, low=-5.0, high=5.0, seed=1)
    assert all(-5.0 <= o.x < 5.0 for o in data)


@pytest.mark.parametrize("kwargs", [{"num_samples": 0}, {"low": 1.0, "high": 1.0}, {"low": 2.0, "high": 1.0}])
def test_synthetic_data_invalid(kwargs):
    with pytest.raises(InvalidArgument):
        synthetic_linear_data(**kwargs)


def test_random_parameters():
    params = random_parameters(seed=3)
    assert 0.0 <= params.bias < 1.0
    assert 0.0 <= params.weight < 1.0
    assert random_parameters(seed=3) == params
