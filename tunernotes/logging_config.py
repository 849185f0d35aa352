"""Logging setup for the command-line entry point."""

import logging
import sys
from typing import TextIO

_HANDLER_TAG = "_tunernotes_handler"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CurrentStderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever ``sys.stderr`` is when a record is emitted."""

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        # Fixed to sys.stderr; StreamHandler.__init__ assigns here.
        pass


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the ``tunernotes`` logger.

    Repeated calls only adjust the level; the handler is added once.
    """
    logger = logging.getLogger("tunernotes")
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not any(getattr(handler, _HANDLER_TAG, False) for handler in logger.handlers):
        handler = CurrentStderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
    return logger
