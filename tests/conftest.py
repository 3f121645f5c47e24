"""Shared fixtures for result-printer tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog

from result_printer.core.config import AppSettings, ObservabilityConfig, OutputConfig


@pytest.fixture
def settings() -> AppSettings:
    """Settings with no stdout delay so tests stay fast."""
    return AppSettings(
        output=OutputConfig(stdout_delay=0.0),
        observability=ObservabilityConfig(log_level="DEBUG"),
    )


@pytest.fixture
def sample_results() -> dict[str, Any]:
    """Nested result covering every JSON value type."""
    return {
        "url": "https://example.com/",
        "score": 0.87,
        "runs": 3,
        "passed": True,
        "error": None,
        "audits": {
            "first-paint": {"score": 1, "displayValue": "0.8 s"},
            "speed-index": {"score": 0.5, "details": {"items": [1, 2.5, "three", False, None]}},
        },
        "warnings": ["slow network", "käse <b>"],
    }


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any root-logger and structlog changes made by setup_logging()."""
    root = logging.getLogger()
    level = root.level
    pkg_level = logging.getLogger("result_printer").level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("result_printer").setLevel(pkg_level)
    structlog.reset_defaults()
