"""Renderers that turn analysis results into output artifacts.

Usage::

    from result_printer.formatters import ReportGenerator, format_json

    page = ReportGenerator().render_html(results)
    text = format_json(results)
"""

from __future__ import annotations

from result_printer.formatters.html_report import ReportGenerator
from result_printer.formatters.json_formatter import format_json
from result_printer.formatters.protocols import IReportRenderer

__all__ = [
    "IReportRenderer",
    "ReportGenerator",
    "format_json",
]
