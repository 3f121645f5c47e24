"""result-printer: render analysis results as JSON or HTML and deliver them.

Usage::

    from result_printer import write, get_valid_output_options

    results = await write(results, "html", "report.html")
"""

from __future__ import annotations

from result_printer.core.config import AppSettings
from result_printer.exceptions import InvalidModeError, PrinterError, RenderError
from result_printer.formatters import IReportRenderer, ReportGenerator, format_json
from result_printer.logging_config import setup_logging
from result_printer.modes import OutputMode, as_mode, get_valid_output_options, id_of, name_of
from result_printer.printer import (
    STDOUT,
    check_output_path,
    create_output,
    write,
    write_file,
    write_to_stdout,
)

__all__ = [
    # Modes
    "OutputMode",
    "id_of",
    "as_mode",
    "name_of",
    "get_valid_output_options",
    # Rendering
    "IReportRenderer",
    "ReportGenerator",
    "format_json",
    "create_output",
    # Delivery
    "STDOUT",
    "check_output_path",
    "write",
    "write_file",
    "write_to_stdout",
    # Ambient
    "AppSettings",
    "setup_logging",
    "PrinterError",
    "InvalidModeError",
    "RenderError",
]
