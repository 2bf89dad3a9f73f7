"""Tests for configuration merging."""

import pytest

from sgd_course import InvalidArgument, TrainingConfig
from sgd_course.training_config import resolve_training_config


def test_config_defaults():
    cfg = TrainingConfig()
    assert cfg.num_epochs is None
    assert cfg.lr is None
    assert cfg.verbose is False
    assert cfg.logger is None


def test_overrides_take_precedence():
    base = TrainingConfig(num_epochs=10, lr=0.1)
    cfg = resolve_training_config(base, num_epochs=3, lr=None)
    assert cfg.num_epochs == 3
    assert cfg.lr == 0.1
    assert base.num_epochs == 10


def test_overrides_without_base():
    cfg = resolve_training_config(None, num_epochs=2, lr=0.5, verbose=True)
    assert cfg == TrainingConfig(num_epochs=2, lr=0.5, verbose=True)


@pytest.mark.parametrize("overrides", [{"lr": 0.1}, {"num_epochs": 5}])
def test_missing_values_raise(overrides):
    with pytest.raises(InvalidArgument):
        resolve_training_config(None, **overrides)


def test_explicit_false_overrides_base():
    cfg = resolve_training_config(TrainingConfig(num_epochs=1, lr=0.1, verbose=True), verbose=False)
    assert cfg.verbose is False


def test_unknown_override_rejected():
    with pytest.raises(TypeError):
        resolve_training_config(None, num_epochs=1, lr=0.1, device="cpu")
