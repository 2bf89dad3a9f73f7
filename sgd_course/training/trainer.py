"""Per-observation stochastic gradient descent for ``y_hat = bias + weight * x``."""

import math
import numbers
import struct
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union, overload

import pandas as pd
from tqdm import tqdm

from ..data import Observation, Parameters
from ..errors import InvalidArgument
from ..training_config import TrainingConfig, resolve_training_config
from ..training_logger import TrainingLogger
from .gradients import closed_form_gradients, squared_error

Row = Union[Observation, Tuple[float, float]]


@dataclass(frozen=True)
class EpochRecord:
    """Parameters and loss of one completed epoch."""

    epoch: int
    start: Parameters
    end: Parameters
    loss: float

    @property
    def start_bias(self) -> float:
        return self.start.bias

    @property
    def start_weight(self) -> float:
        return self.start.weight

    @property
    def end_bias(self) -> float:
        return self.end.bias

    @property
    def end_weight(self) -> float:
        return self.end.weight

    def as_dict(self) -> Dict[str, Any]:
        return {
            'epoch': self.epoch,
            'start_bias': self.start_bias,
            'start_weight': self.start_weight,
            'end_bias': self.end_bias,
            'end_weight': self.end_weight,
            'loss': self.loss,
        }


class TrainingHistory(Sequence):
    """Read-only, chronologically ordered sequence of ``EpochRecord``.

    Example:
        >>> history = train(data, 0.0, 0.0, 1e-4, 100)
        >>> history[-1].epoch, history.final
    """

    def __init__(self, records: Iterable[EpochRecord]):
        self._records: Tuple[EpochRecord, ...] = tuple(records)

    @overload
    def __getitem__(self, index: int) -> EpochRecord: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[EpochRecord, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EpochRecord]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        """Bitwise comparison of every recorded float, so identical NaN runs compare equal."""
        if not isinstance(other, TrainingHistory):
            return NotImplemented
        return [_bits(r) for r in self._records] == [_bits(r) for r in other._records]

    def __repr__(self) -> str:
        return f'TrainingHistory(epochs={len(self)})'

    @property
    def final(self) -> Parameters:
        """Parameters at the end of the last epoch."""
        return self._records[-1].end

    @property
    def losses(self) -> List[float]:
        return [record.loss for record in self._records]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per epoch, indexed by epoch number."""
        columns = ['epoch', 'start_bias', 'start_weight', 'end_bias', 'end_weight', 'loss']
        frame = pd.DataFrame([r.as_dict() for r in self._records], columns=columns)
        return frame.set_index('epoch')


def sgd_step(params: Parameters, obs: Observation,
             learning_rate: float) -> Tuple[Parameters, float]:
    """
    Fit a single observation.

    Parameters
    ----------
    params: Parameters
        Parameters the prediction is made with.
    obs: Observation
        The observation to fit.
    learning_rate: float
        Step size.

    Returns
    -------
    tuple[Parameters, float]
        Updated parameters, and the squared error of the prediction made
        before the update.
    """
    error = squared_error(params, obs)
    grad_bias, grad_weight = closed_form_gradients(params, obs)
    updated = Parameters(params.bias - learning_rate * grad_bias,
                         params.weight - learning_rate * grad_weight)
    return updated, error


def _bits(record: EpochRecord) -> Tuple[int, bytes]:
    values = (record.start_bias, record.start_weight, record.end_bias, record.end_weight, record.loss)
    return record.epoch, struct.pack('<5d', *values)


def _to_observation(index: int, row: Row) -> Observation:
    try:
        x, y = (row.x, row.y) if isinstance(row, Observation) else row
        return Observation(float(x), float(y))
    except (TypeError, ValueError):
        raise InvalidArgument(f'row {index} is not an (x, y) pair of real numbers: {row!r}') from None


def _as_observations(data: Iterable[Row]) -> Tuple[Observation, ...]:
    rows = tuple(_to_observation(i, row) for i, row in enumerate(data))
    if not rows:
        raise InvalidArgument('data must contain at least one observation')
    return rows


def _check_hyperparameters(num_epochs: Any, lr: Any) -> None:
    if isinstance(num_epochs, bool) or not isinstance(num_epochs, numbers.Integral):
        raise InvalidArgument(f'epochs must be an integer, got {num_epochs!r}')
    if num_epochs < 1:
        raise InvalidArgument(f'epochs must be at least 1, got {num_epochs}')
    try:
        finite = math.isfinite(lr)
    except TypeError:
        raise InvalidArgument(f'learning_rate must be a real number, got {lr!r}') from None
    if not finite:
        raise InvalidArgument(f'learning_rate must be finite, got {lr}')


def train(data: Iterable[Row],
          initial_bias: float,
          initial_weight: float,
          learning_rate: Optional[float] = None,
          epochs: Optional[int] = None,
          *,
          config: Optional[TrainingConfig] = None,
          logger: Optional[TrainingLogger] = None,
          verbose: Optional[bool] = None) -> TrainingHistory:
    """Fit ``bias`` and ``weight`` with stochastic gradient descent, batch size 1.

    Parameters are updated after every observation, in the order the data is
    given, so later rows in an epoch see the updates made by earlier ones.
    The epoch loss is the square root of the summed squared errors, each taken
    with the parameters current when that prediction was made.

    Divergence is not detected: with too large a learning rate, inf and NaN
    simply show up in the returned history.

    Args:
        data: Observations, or ``(x, y)`` pairs. Not modified.
        initial_bias: Bias at the start of the first epoch.
        initial_weight: Weight at the start of the first epoch.
        learning_rate: Step size; must be finite. Falls back to ``config.lr``.
        epochs: Number of passes over ``data``, at least 1. Falls back to
            ``config.num_epochs``.
        config: Optional base configuration; explicit arguments win.
        logger: ``TrainingLogger`` that receives every epoch's metrics.
        verbose: Show an epoch progress bar and a final summary line.

    Returns:
        One ``EpochRecord`` per epoch, in epoch order.

    Raises:
        InvalidArgument: ``data`` is empty, ``epochs`` is not a positive
            integer, or ``learning_rate`` is not finite.
    """
    cfg = resolve_training_config(
        config,
        num_epochs=epochs,
        lr=learning_rate,
        logger=logger,
        verbose=verbose,
    )
    rows = _as_observations(data)
    _check_hyperparameters(cfg.num_epochs, cfg.lr)

    num_epochs, lr = int(cfg.num_epochs), float(cfg.lr)
    params = Parameters(float(initial_bias), float(initial_weight))
    records: List[EpochRecord] = []

    epoch_pbar = tqdm(range(1, num_epochs + 1), desc='Training', unit='epoch',
                      disable=not cfg.verbose)
    for epoch in epoch_pbar:
        start = params
        total_error = 0.0
        for obs in rows:
            params, error = sgd_step(params, obs, lr)
            total_error += error
        loss = math.sqrt(total_error)
        records.append(EpochRecord(epoch, start, params, loss))

        if cfg.verbose:
            epoch_pbar.set_postfix(loss=f'{loss:.4f}')

        if cfg.logger is not None:
            cfg.logger.log_epoch(epoch, train_loss=loss, bias=params.bias, weight=params.weight)

    if cfg.verbose:
        tqdm.write(f'Epoch {num_epochs}/{num_epochs} — Loss: {records[-1].loss:.4f}, '
                   f'bias: {params.bias:.4f}, weight: {params.weight:.4f}')

    return TrainingHistory(records)
