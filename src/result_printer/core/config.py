"""Nested pydantic-settings configuration for the printer.

Each section reads its own env prefix::

    export RESULT_PRINTER_OUTPUT_STDOUT_DELAY=0.1
    export RESULT_PRINTER_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class OutputConfig(BaseSettings):
    """Artifact delivery configuration.

    Env vars use ``RESULT_PRINTER_OUTPUT_`` prefix.
    """

    model_config = {"env_prefix": "RESULT_PRINTER_OUTPUT_"}

    # Seconds to hold the stdout write open so queued log lines land first.
    stdout_delay: float = Field(default=0.05, ge=0.0)
    encoding: str = "utf-8"
    report_title_key: str = "url"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``RESULT_PRINTER_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "RESULT_PRINTER_OBSERVABILITY_"}

    log_level: str = "INFO"
    # "auto" renders for humans on a TTY and JSON lines otherwise.
    log_format: Literal["auto", "console", "json"] = "auto"


class AppSettings(BaseSettings):
    """Top-level settings aggregating every section."""

    model_config = {"env_prefix": "RESULT_PRINTER_"}

    output: OutputConfig = Field(default_factory=OutputConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
