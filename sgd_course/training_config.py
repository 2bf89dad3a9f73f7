"""Shared training configuration utilities."""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .errors import InvalidArgument

if TYPE_CHECKING:
    from .training_logger import TrainingLogger


@dataclass
class TrainingConfig:
    """Container for the trainer's hyperparameters.

    Explicit function arguments will override these values when both are set.
    """

    num_epochs: Optional[int] = None
    lr: Optional[float] = None
    verbose: bool = False
    logger: Optional["TrainingLogger"] = None


def resolve_training_config(config: Optional[TrainingConfig],
                            *,
                            num_epochs: Optional[int] = None,
                            lr: Optional[float] = None,
                            verbose: Optional[bool] = None,
                            logger: Optional["TrainingLogger"] = None) -> TrainingConfig:
    """Fill the trainer's hyperparameters from explicit arguments, then ``config``.

    Args:
        config: Base configuration (optional).
        num_epochs, lr, verbose, logger: Explicit values; ``None`` defers to ``config``.

    Returns:
        A new ``TrainingConfig``; ``config`` is left untouched.
    """
    base = config or TrainingConfig()
    resolved = TrainingConfig(
        num_epochs=base.num_epochs if num_epochs is None else num_epochs,
        lr=base.lr if lr is None else lr,
        verbose=base.verbose if verbose is None else verbose,
        logger=base.logger if logger is None else logger,
    )
    if resolved.num_epochs is None:
        raise InvalidArgument("num_epochs must be provided either directly or via TrainingConfig")
    if resolved.lr is None:
        raise InvalidArgument("lr must be provided either directly or via TrainingConfig")
    return resolved
