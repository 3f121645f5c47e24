"""Exception hierarchy for result-printer."""


class PrinterError(Exception):
    """Base exception for all result-printer errors."""


class InvalidModeError(PrinterError, ValueError):
    """Raised when an output mode name or id is outside the known set."""

    def __init__(self, message: str, mode: object = None) -> None:
        super().__init__(message)
        self.mode = mode


class RenderError(PrinterError):
    """Raised by report renderers that cannot render the given results."""
