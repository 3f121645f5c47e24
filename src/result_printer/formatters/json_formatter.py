"""JSON serialization of analysis results."""

from __future__ import annotations

import dataclasses
import json
import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _to_plain(value: Any) -> Any:
    """Convert models and dataclasses at any depth; non-finite floats become ``None``."""
    if isinstance(value, BaseModel):
        return _to_plain(value.model_dump())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def format_json(results: Any) -> str:
    """Serialize *results* to pretty-printed JSON with a 2-space indent.

    Non-ASCII text is kept as-is; the encoding is applied when the artifact
    is written. Lone surrogates are written as ``\\uXXXX`` escapes so the
    artifact always encodes. ``NaN`` and infinities are written as ``null``.
    Values JSON has no type for (datetimes, paths) fall back to ``str``.
    """
    text = json.dumps(
        _to_plain(results), indent=2, ensure_ascii=False, allow_nan=False, default=str
    )
    return LONE_SURROGATE.sub(_escape_surrogate, text)


__all__ = ["format_json"]
