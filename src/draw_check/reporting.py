"""Failure reporters used when mismatches should not raise immediately."""

from __future__ import annotations

import logging
from typing import Protocol

import pytest

logger = logging.getLogger(__name__)


class FailureReporter(Protocol):
    def report_failure(self, message: str) -> None: ...


class RecordingReporter:
    """Collects failure messages instead of raising.

    The owning test is expected to call :meth:`raise_if_failed` (the
    ``pixel_asserter`` fixture does this at teardown).
    """

    def __init__(self) -> None:
        self.failures: list[str] = []

    def report_failure(self, message: str) -> None:
        logger.error("Pixel assertion failed: %s", message)
        self.failures.append(message)

    def raise_if_failed(self) -> None:
        if self.failures:
            raise AssertionError("\n".join(self.failures))

    def clear(self) -> None:
        self.failures.clear()


class PytestFailReporter:
    """Fails the running pytest test straight away."""

    def report_failure(self, message: str) -> None:
        pytest.fail(message, pytrace=False)
