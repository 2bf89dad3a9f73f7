"""Training metrics logger (kept separate from stdlib logging)."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

History = MutableMapping[str, List[float]]


class TrainingLogger:
    """Records per-epoch loss and parameter values of a training run.

    Args:
        log_path: Path to save the log file (default: None, no file saved)
        hparams: Dictionary of hyperparameters to record
    """

    def __init__(self, log_path: Optional[str | Path] = None, hparams: Optional[Dict[str, Any]] = None):
        self.log_path = Path(log_path) if log_path else None
        self.hparams: Dict[str, Any] = hparams or {}
        self.start_time = datetime.now()
        self.epochs: List[int] = []
        self.history: History = {
            'train_loss': [],
            'bias': [],
            'weight': [],
        }
        self.metadata: Dict[str, Any] = {
            'timestamp': self.start_time.isoformat(),
            'hparams': self.hparams,
        }

    def log_epoch(self, epoch: int, train_loss: Optional[float] = None,
                  bias: Optional[float] = None, weight: Optional[float] = None,
                  **kwargs: float) -> None:
        """Log metrics for a single epoch.

        Args:
            epoch: Epoch number (1-based)
            train_loss: Epoch loss
            bias: Bias at the end of the epoch
            weight: Weight at the end of the epoch
            **kwargs: Additional metrics to log
        """
        self.epochs.append(epoch)
        if train_loss is not None:
            self.history['train_loss'].append(train_loss)
        if bias is not None:
            self.history['bias'].append(bias)
        if weight is not None:
            self.history['weight'].append(weight)

        for key, value in kwargs.items():
            self.history.setdefault(key, []).append(value)

    def save(self, path: Optional[str | Path] = None) -> None:
        """Save the log to a JSON file, appending to existing runs.

        Args:
            path: Path to save (uses log_path from init if not provided)
        """
        save_path = Path(path) if path else self.log_path
        if save_path is None:
            raise ValueError('No log path specified')

        save_path.parent.mkdir(parents=True, exist_ok=True)

        log_data: Dict[str, Any] = {
            **self.metadata,
            'duration_seconds': (datetime.now() - self.start_time).total_seconds(),
            'epochs': self.epochs,
            'history': self.history,
        }

        runs: List[Dict[str, Any]] = []
        if save_path.exists():
            with open(save_path, 'r') as f:
                existing = json.load(f)
                runs = existing if isinstance(existing, list) else [existing]

        runs.append(log_data)

        # NaN/inf from a diverged run are written as JSON's NaN/Infinity literals
        with open(save_path, 'w') as f:
            json.dump(runs, f, indent=2)
        print(f'Log saved to {save_path} (run {len(runs)})')

    def summary(self) -> None:
        """Print a summary of the training run."""
        duration = datetime.now() - self.start_time
        print(f'\n{"="*50}')
        print('Training Summary')
        print(f'{"="*50}')
        print(f'Duration: {duration}')
        print(f'Epochs:   {len(self.epochs)}')
        if self.hparams:
            print(f'Hyperparameters: {self.hparams}')
        if self.history['train_loss']:
            print(f'Final loss:   {self.history["train_loss"][-1]:.6f}')
        if self.history['bias']:
            print(f'Final bias:   {self.history["bias"][-1]:.6f}')
        if self.history['weight']:
            print(f'Final weight: {self.history["weight"][-1]:.6f}')
        print(f'{"="*50}\n')
