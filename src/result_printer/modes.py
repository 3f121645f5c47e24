"""Output modes accepted by the printer.

* ``json``: JSON formatted results
* ``html``: an HTML report
* ``domhtml``: alias for the ``html`` report
"""

from __future__ import annotations

from enum import IntEnum

from result_printer.exceptions import InvalidModeError


class OutputMode(IntEnum):
    json = 0
    html = 1
    domhtml = 2


def id_of(name: str) -> OutputMode:
    """Look up the mode registered under *name*."""
    try:
        return OutputMode[name]
    except (KeyError, TypeError):
        raise InvalidModeError(f"Invalid output mode: {name}", mode=name) from None


def as_mode(mode_id: int) -> OutputMode:
    """Return the mode with id *mode_id*.

    Only real ints are accepted; ``True`` or ``1.0`` compare equal to a
    member but are not mode ids.
    """
    if isinstance(mode_id, bool) or not isinstance(mode_id, int):
        raise InvalidModeError(f"Invalid output mode: {mode_id}", mode=mode_id)
    try:
        return OutputMode(mode_id)
    except ValueError:
        raise InvalidModeError(f"Invalid output mode: {mode_id}", mode=mode_id) from None


def name_of(mode_id: int) -> str:
    """Return the registered name of *mode_id*."""
    return as_mode(mode_id).name


def get_valid_output_options() -> list[str]:
    return [mode.name for mode in OutputMode]


__all__ = ["OutputMode", "as_mode", "id_of", "name_of", "get_valid_output_options"]
