"""Render analysis results and deliver them to stdout or a file.

Usage::

    from result_printer import write

    results = await write(results, "json", "report.json")
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Any, Union

from result_printer.core.config import AppSettings
from result_printer.formatters.html_report import ReportGenerator
from result_printer.formatters.json_formatter import format_json
from result_printer.formatters.protocols import IReportRenderer
from result_printer.modes import OutputMode, as_mode, id_of, name_of

log = logging.getLogger(__name__)

STDOUT = "stdout"

# Component tag attached to every record this module emits.
_COMPONENT = {"component": "Printer"}

PathArg = Union[str, os.PathLike, None]


def check_output_path(path: PathArg) -> str | os.PathLike[str]:
    """Return the destination to use: *path*, or ``"stdout"`` when unset."""
    if not path:
        log.warning("No output path set; using stdout", extra=_COMPONENT)
        return STDOUT
    return path


def create_output(
    results: Any,
    output_mode: int,
    renderer: IReportRenderer | None = None,
) -> str:
    """Render *results* in the format selected by *output_mode*.

    ``html`` and ``domhtml`` both go to the report renderer; its output and
    its exceptions pass through untouched.
    """
    mode = as_mode(output_mode)
    if mode in (OutputMode.html, OutputMode.domhtml):
        return (renderer or ReportGenerator()).render_html(results)
    return format_json(results)


async def write_to_stdout(output: str, delay: float) -> None:
    """Print *output* and hold completion for *delay* seconds.

    The delay keeps log lines queued by concurrent tasks from interleaving
    with the artifact on a shared terminal.
    """
    sys.stdout.write(f"{output}\n")
    sys.stdout.flush()
    await asyncio.sleep(delay)


async def write_file(
    file_path: str | os.PathLike[str],
    output: str,
    output_mode: int,
    encoding: str = "utf-8",
) -> None:
    """Write *output* to *file_path*, replacing any existing content.

    Missing parent directories are not created; the ``OSError`` propagates.
    """
    mode_name = name_of(output_mode)
    # TODO: mkdir the parent directory of file_path.
    path = Path(file_path)
    await asyncio.to_thread(path.write_text, output, encoding=encoding, newline="")
    log.info("%s output written to %s", mode_name, file_path, extra=_COMPONENT)


async def write(
    results: Any,
    mode: str,
    path: PathArg = None,
    *,
    renderer: IReportRenderer | None = None,
    settings: AppSettings | None = None,
) -> Any:
    """Render *results* as *mode* and deliver them to *path* (or stdout).

    Returns the original *results* object so callers can keep processing the
    structured data.

    Raises:
        InvalidModeError: *mode* is not one of the registered output modes.
        OSError: the file write failed.
    """
    output_mode = id_of(mode)
    if settings is None:
        settings = AppSettings()
    output_path = check_output_path(path)

    if renderer is None:
        renderer = ReportGenerator(title_key=settings.output.report_title_key)
    output = create_output(results, output_mode, renderer)

    if output_path == STDOUT:
        await write_to_stdout(output, settings.output.stdout_delay)
        return results

    await write_file(output_path, output, output_mode, settings.output.encoding)
    return results


__all__ = [
    "STDOUT",
    "check_output_path",
    "create_output",
    "write",
    "write_file",
    "write_to_stdout",
]
