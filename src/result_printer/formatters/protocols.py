"""Report renderer protocol: the contract HTML report generators implement.

The ``results`` parameter accepts ``Any``; the printer treats it as an opaque
payload and hands it to the renderer untouched.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IReportRenderer(Protocol):
    """Protocol for HTML report renderers."""

    def render_html(self, results: Any) -> str:
        """Render *results* into a complete HTML document.

        Implementations may raise on malformed input. The printer does not
        catch or wrap those errors.
        """
        ...


__all__ = ["IReportRenderer"]
