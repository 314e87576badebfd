"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys
from pathlib import Path

PROGRAM = "barstatus"

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*\+?(\d+)")


def warn(message: str) -> None:
    """Write a diagnostic line to standard error.

    The program name is prepended unless the message is a usage line. A
    message ending in ':' is followed by the description of the exception
    currently being handled, if any.
    """
    text = message if message.startswith("usage") else f"{PROGRAM}: {message}"
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        if isinstance(exc, OSError) and exc.strerror:
            reason = exc.strerror
        elif exc is not None:
            reason = str(exc)
        else:
            reason = "Unknown error"
        text = f"{text} {reason}"
    print(text, file=sys.stderr)


def die(message: str) -> None:
    """Report ``message`` and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def fmt_human(num: float, base: int) -> str:
    """Format ``num`` scaled by powers of ``base`` (1000 or 1024) with one decimal."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_file(path: str | Path) -> str | None:
    """Return the text of ``path``, or None (after a warning) if it cannot be read."""
    try:
        return Path(path).read_text()
    except OSError:
        warn(f"open '{path}':")
        return None


def read_uint(path: str | Path) -> int | None:
    """Return the unsigned integer at the start of ``path``, or None."""
    text = read_file(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None