from __future__ import annotations

import os
import sys
from typing import TextIO

# Set only by force_color(); None means detect per stream.
_FORCED: bool | None = None


def supports_color(stream: TextIO | None = None) -> bool:
    if _FORCED is not None:
        return _FORCED
    out = stream if stream is not None else sys.stdout
    if os.environ.get("NO_COLOR", "") != "" or os.environ.get("TERM", "") == "dumb":
        return False
    return hasattr(out, "isatty") and bool(out.isatty())


def force_color(enabled: bool | None) -> None:
    """Pin colour on or off for every stream; ``None`` restores detection."""
    global _FORCED
    _FORCED = enabled


def style(text: str, *codes: int, stream: TextIO | None = None) -> str:
    if not codes or not supports_color(stream):
        return text
    seq = ";".join(str(c) for c in codes)
    return f"\033[{seq}m{text}\033[0m"


def dim(text: str, *, stream: TextIO | None = None) -> str:
    return style(text, 2, stream=stream)


def truth(value: bool, *, stream: TextIO | None = None) -> str:
    """``true`` in green or ``false`` in red."""
    if value:
        return style("true", 32, stream=stream)
    return style("false", 31, stream=stream)
