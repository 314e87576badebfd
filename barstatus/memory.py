"""Memory and swap figures from /proc/meminfo."""

from __future__ import annotations

from pathlib import Path

from .util import fmt_human, read_file

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each meminfo field name to its value in kB."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        words = rest.split()
        if not sep or not words:
            continue
        try:
            fields[name.strip()] = int(words[0])
        except ValueError:
            continue
    return fields


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _fields(path: str | Path, *names: str) -> tuple[int, ...] | None:
    text = read_file(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(path: str | Path = MEMINFO) -> str | None:
    """Return available memory."""
    values = _fields(path, "MemAvailable")
    return None if values is None else fmt_human(values[0] * 1024, 1024)


def ram_perc(path: str | Path = MEMINFO) -> str | None:
    """Return memory in use, excluding buffers and cache, in percent."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(path: str | Path = MEMINFO) -> str | None:
    """Return total memory."""
    values = _fields(path, "MemTotal")
    return None if values is None else fmt_human(values[0] * 1024, 1024)


def ram_used(path: str | Path = MEMINFO) -> str | None:
    """Return memory in use, excluding buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(path: str | Path = MEMINFO) -> str | None:
    """Return free swap."""
    values = _fields(path, "SwapFree")
    return None if values is None else fmt_human(values[0] * 1024, 1024)


def swap_perc(path: str | Path = MEMINFO) -> str | None:
    """Return swap in use, excluding swap cache, in percent."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(path: str | Path = MEMINFO) -> str | None:
    """Return total swap."""
    values = _fields(path, "SwapTotal")
    return None if values is None else fmt_human(values[0] * 1024, 1024)


def swap_used(path: str | Path = MEMINFO) -> str | None:
    """Return swap in use, excluding swap cache."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)