"""Loggers that can be stacked, including a verbosity filter."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence, TextIO


class Logger(ABC):
    """Something that logs messages at a verbosity level."""

    @abstractmethod
    def log(self, verbosity: int, message: Any) -> None:
        """Log a message at the given verbosity level."""


@dataclass
class StderrLogger(Logger):
    """Write every message to standard error (or to a given stream)."""

    stream: TextIO | None = None

    def log(self, verbosity: int, message: Any) -> None:
        out = self.stream if self.stream is not None else sys.stderr
        out.write(f"verbosity={verbosity}: {message}\n")


@dataclass
class VerbosityFilter(Logger):
    """Only pass on messages up to the given verbosity level."""

    max_verbosity: int
    inner: Logger

    def log(self, verbosity: int, message: Any) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)


def do_things(logger: Logger) -> None:
    """Log a couple of messages at different verbosity levels."""
    logger.log(5, "FYI")
    logger.log(2, "Uhoh")


def main(argv: Sequence[str] | None = None) -> None:
    """Log through a filter that drops anything above verbosity 3."""
    do_things(VerbosityFilter(max_verbosity=3, inner=StderrLogger()))


if __name__ == "__main__":
    main()