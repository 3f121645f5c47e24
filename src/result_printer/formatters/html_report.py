"""Standalone HTML report for analysis results.

The page carries the full result as a JSON data island so client-side
scripts (or a later re-parse) can recover it, plus a static overview table of
the top-level scalar fields for readers without scripting.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from string import Template
from typing import Any

from result_printer.formatters.json_formatter import LONE_SURROGATE, format_json

_PAGE = Template(
    """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>$title</title>
<style>
body { font-family: system-ui, sans-serif; margin: 2rem; color: #212121; }
table { border-collapse: collapse; }
th, td { border-bottom: 1px solid #e0e0e0; padding: 0.25rem 0.75rem; text-align: left; }
th { font-weight: 600; }
</style>
</head>
<body>
<h1>$title</h1>
$overview
<script type="application/json" id="report-data">$payload</script>
</body>
</html>
"""
)

_SCALARS = (str, int, float, bool, type(None))


class ReportGenerator:
    """Renders results as a self-contained HTML document.

    Args:
        title_key: Top-level key whose value becomes the page title.
        default_title: Title used when *title_key* is missing or not a string.
    """

    def __init__(self, title_key: str = "url", default_title: str = "Report") -> None:
        self._title_key = title_key
        self._default_title = default_title

    def render_html(self, results: Any) -> str:
        return _PAGE.substitute(
            title=_text(self._title(results)),
            overview=self._overview(results),
            payload=format_json(results).replace("<", "\\u003c"),
        )

    def _title(self, results: Any) -> str:
        if isinstance(results, Mapping):
            title = results.get(self._title_key)
            if isinstance(title, str) and title:
                return title
        return self._default_title

    @staticmethod
    def _overview(results: Any) -> str:
        if not isinstance(results, Mapping):
            return ""
        rows = [
            f"<tr><th>{_text(str(key))}</th><td>{_text(_display(value))}</td></tr>"
            for key, value in results.items()
            if isinstance(value, _SCALARS)
        ]
        if not rows:
            return ""
        return "<table>\n" + "\n".join(rows) + "\n</table>"


def _text(value: str) -> str:
    """HTML-escape *value*, replacing lone surrogates so the page always encodes."""
    return LONE_SURROGATE.sub("\ufffd", html.escape(value))


def _display(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["ReportGenerator"]
