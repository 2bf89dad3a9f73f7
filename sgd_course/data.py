"""Observations, model parameters and synthetic regression data."""

from dataclasses import dataclass
from typing import List, Optional

import torch

from .errors import InvalidArgument


@dataclass(frozen=True)
class Observation:
    """A single labeled row of the dataset."""

    x: float
    y: float


@dataclass(frozen=True)
class Parameters:
    """
    Bias and weight of the linear model ``y_hat = bias + weight * x``.

    Parameters
    ----------
    bias: float
        Intercept of the model.
    weight: float
        Slope of the model.
    """

    bias: float
    weight: float

    def predict(self, x: float) -> float:
        return self.bias + self.weight * x


def _generator(seed: Optional[int]) -> Optional[torch.Generator]:
    if seed is None:
        return None
    gen = torch.Generator()
    gen.manual_seed(seed)
    return gen


def synthetic_linear_data(num_samples: int = 30,
                          bias: float = 30.0,
                          weight: float = 2.0,
                          low: float = 0.0,
                          high: float = 100.0,
                          noise: float = 0.0,
                          seed: Optional[int] = None) -> List[Observation]:
    """
    Synthetic dataset for single-variable linear regression.

    Parameters
    ----------
    num_samples: int
        Number of observations to generate.
    bias: float
        Intercept of the generating line.
    weight: float
        Slope of the generating line.
    low: float
        Lower bound (inclusive) of the uniform range for x.
    high: float
        Upper bound (exclusive) of the uniform range for x.
    noise: float
        Standard deviation of Gaussian noise added to the targets.
    seed: int, optional
        Seed for a private generator. The global RNG is used when None.

    Returns
    -------
    list[Observation]
        Observations in generation order.
    """
    if num_samples < 1:
        raise InvalidArgument(f'num_samples must be at least 1, got {num_samples}')
    if not high > low:
        raise InvalidArgument(f'high must be greater than low, got [{low}, {high})')

    gen = _generator(seed)
    X = low + (high - low) * torch.rand(num_samples, generator=gen, dtype=torch.float64)
    y = bias + weight * X
    if noise:
        y = y + torch.randn(num_samples, generator=gen, dtype=torch.float64) * noise
    return [Observation(x, t) for x, t in zip(X.tolist(), y.tolist())]


def random_parameters(seed: Optional[int] = None) -> Parameters:
    """Draw an initial bias and weight uniformly from [0, 1)."""
    b, w = torch.rand(2, generator=_generator(seed), dtype=torch.float64).tolist()
    return Parameters(b, w)
