"""Squared error and its derivatives with respect to bias and weight.

``closed_form_gradients`` is what the trainer uses. The finite-difference and
autograd versions compute the same quantity a different way and serve as
cross-checks.
"""

from typing import Tuple

import torch

from ..data import Observation, Parameters
from ..errors import InvalidArgument

Gradients = Tuple[float, float]


def squared_error(params: Parameters, obs: Observation) -> float:
    """Squared error of a single prediction.

    Overflows to inf on divergent parameters instead of raising.
    """
    diff = obs.y - params.predict(obs.x)
    return diff * diff


def closed_form_gradients(params: Parameters, obs: Observation) -> Gradients:
    """
    Analytic derivative of the squared error.

    Parameters
    ----------
    params: Parameters
        Parameters the prediction is made with.
    obs: Observation
        The observation being fitted.

    Returns
    -------
    tuple[float, float]
        ``(grad_bias, grad_weight)``.
    """
    grad_bias = 2 * (params.predict(obs.x) - obs.y)
    return grad_bias, grad_bias * obs.x


def finite_difference_gradients(params: Parameters, obs: Observation,
                                epsilon: float = 0.01) -> Gradients:
    """
    Forward-difference estimate of the squared error derivative.

    Each parameter is nudged by ``epsilon`` in turn and the change in error is
    divided by ``epsilon``. The estimate overshoots the analytic value by
    ``epsilon`` for the bias and by ``epsilon * x**2`` for the weight.

    Parameters
    ----------
    params: Parameters
        Point to estimate the derivative at.
    obs: Observation
        The observation being fitted.
    epsilon: float
        Perturbation size, must be positive.
    """
    if not epsilon > 0:
        raise InvalidArgument(f'epsilon must be positive, got {epsilon}')
    base = squared_error(params, obs)
    bumped_bias = Parameters(params.bias + epsilon, params.weight)
    bumped_weight = Parameters(params.bias, params.weight + epsilon)
    return ((squared_error(bumped_bias, obs) - base) / epsilon,
            (squared_error(bumped_weight, obs) - base) / epsilon)


def autograd_gradients(params: Parameters, obs: Observation) -> Gradients:
    """Derivative of the squared error computed by torch autograd."""
    b = torch.tensor(params.bias, dtype=torch.float64, requires_grad=True)
    w = torch.tensor(params.weight, dtype=torch.float64, requires_grad=True)
    y_hat = b + w * obs.x
    loss = (obs.y - y_hat) ** 2
    loss.backward()
    return b.grad.item(), w.grad.item()
