"""Error types raised by the trainer."""


class InvalidArgument(ValueError):
    """Raised when a training call is given inputs it cannot run with.

    Reported before any epoch executes, so no partial history is produced.
    """
