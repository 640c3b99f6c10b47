"""pytest plugin exposing a soft-failing pixel asserter."""

from __future__ import annotations

from typing import Iterator

import pytest

from .asserts import PixelColorAsserter
from .reporting import RecordingReporter


@pytest.fixture
def pixel_failures() -> RecordingReporter:
    """Reporter collecting mismatch messages for the current test."""

    return RecordingReporter()


@pytest.fixture
def pixel_asserter(pixel_failures: RecordingReporter) -> Iterator[PixelColorAsserter]:
    """Asserter whose recorded mismatches fail the test during teardown."""

    yield PixelColorAsserter(reporter=pixel_failures)
    if pixel_failures.failures:
        pytest.fail("\n".join(pixel_failures.failures), pytrace=False)
