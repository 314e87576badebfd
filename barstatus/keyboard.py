"""Keyboard indicator formatting and XKB layout extraction."""

from __future__ import annotations

import re
import string

# Symbols from the xkb rules configuration that are never layouts.
_INVALID = ("evdev", "inet", "pc", "base")


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock state according to ``fmt``.

    Only the first four characters of ``fmt`` are used. A letter followed by
    '?' appears, case preserved, only when its indicator is on; otherwise the
    letter always appears, upper case when on and lower case when off.
    """
    fmt = fmt[:4]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether ``sym`` names a layout rather than a rules component."""
    return not sym.startswith(_INVALID)


def layout_from_symbols(symbols: str, group: int) -> str | None:
    """Return the layout of XKB group ``group`` from a symbols name.

    If there are fewer groups, the last layout found is returned.
    """
    layout = None
    found = 0
    for token in filter(None, re.split(r"[+:]", symbols)):
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token in string.digits:
            continue
        layout = token
        found += 1
    return layout