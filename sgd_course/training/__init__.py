"""Stochastic gradient descent trainer and gradient helpers."""

from .gradients import (
    autograd_gradients,
    closed_form_gradients,
    finite_difference_gradients,
    squared_error,
)
from .trainer import EpochRecord, TrainingHistory, sgd_step, train

__all__ = [
    "EpochRecord",
    "TrainingHistory",
    "sgd_step",
    "train",
    "squared_error",
    "closed_form_gradients",
    "finite_difference_gradients",
    "autograd_gradients",
]
