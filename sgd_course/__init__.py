"""Per-row stochastic gradient descent for a single-variable linear model."""

from . import training
from .data import Observation, Parameters, random_parameters, synthetic_linear_data
from .errors import InvalidArgument
from .training import EpochRecord, TrainingHistory, train
from .training_config import TrainingConfig
from .training_logger import TrainingLogger

__all__ = [
    'training',
    'Observation',
    'Parameters',
    'random_parameters',
    'synthetic_linear_data',
    'InvalidArgument',
    'EpochRecord',
    'TrainingHistory',
    'train',
    'TrainingConfig',
    'TrainingLogger',
    ]
