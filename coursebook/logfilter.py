"""Loggers, including one that passes on only the messages a predicate accepts."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable


class Logger(ABC):
    """Something that records messages at a verbosity level."""

    @abstractmethod
    def log(self, verbosity: int, message: str) -> None:
        """Log a message at the given verbosity level."""


class StderrLogger(Logger):
    """Writes every message to standard error."""

    def log(self, verbosity: int, message: str) -> None:
        print(f"verbosity={verbosity}: {message}", file=sys.stderr)


class Filter(Logger):
    """Passes on to ``inner`` only the messages ``predicate`` accepts."""

    def __init__(self, inner: Logger, predicate: Callable[[int, str], bool]) -> None:
        self.inner = inner
        self.predicate = predicate

    def log(self, verbosity: int, message: str) -> None:
        if self.predicate(verbosity, message):
            self.inner.log(verbosity, message)


def main(argv: list[str] | None = None) -> int:
    """Log a few messages, keeping only those that mention "yikes"."""
    logger = Filter(StderrLogger(), lambda _verbosity, msg: "yikes" in msg)
    logger.log(5, "FYI")
    logger.log(1, "yikes, something went wrong")
    logger.log(2, "uhoh")
    return 0