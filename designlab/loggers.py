"""Loggers and the factories that create them."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TextIO


class Logger(ABC):
    """Writes messages as lines, each starting with the logger's prefix."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    @abstractmethod
    def prefix(self) -> str:
        """Text written before every message."""

    def log(self, message: str) -> str:
        """Write the message and return the line written."""
        line = f"{self.prefix}: {message}"
        print(line, file=self._stream if self._stream is not None else sys.stdout)
        return line


class ConsoleLogger(Logger):
    prefix = "Console Log"


class DebugLogger(Logger):
    prefix = "Debug Logger"


class ErrorLogger(Logger):
    prefix = "Error Logger"


class InfoLogger(Logger):
    prefix = "Info Logger"


class LoggerFactory(ABC):
    """Creates loggers of one kind."""

    @abstractmethod
    def create_logger(self) -> Logger:
        """Return a new logger."""


class ConsoleLoggerFactory(LoggerFactory):
    def create_logger(self) -> Logger:
        return ConsoleLogger()


class DebugLoggerFactory(LoggerFactory):
    def create_logger(self) -> Logger:
        return DebugLogger()


class ErrorLoggerFactory(LoggerFactory):
    def create_logger(self) -> Logger:
        return ErrorLogger()


class InfoLoggerFactory(LoggerFactory):
    def create_logger(self) -> Logger:
        return InfoLogger()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create one logger of each kind through its factory and log with it."""
    parser = argparse.ArgumentParser(description="Factory method demo")
    parser.parse_args(argv)

    print("Factory Method Design Pattern...")
    runs = [
        (ConsoleLoggerFactory(), "application started on port"),
        (InfoLoggerFactory(), "application processing requests"),
        (DebugLoggerFactory(), "taking longer to process db requests for transactions"),
        (ErrorLoggerFactory(), "error in processing request, entry not found in dbs"),
    ]
    for factory, message in runs:
        factory.create_logger().log(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())