"""Battery status read from the power-supply class in sysfs."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .util import read_file, read_uint

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "ﮣ",
    "Discharging": "*",
}

_INT = re.compile(r"\s*([+-]?\d+)")


def _read_state(bat: str, root: str | Path) -> str | None:
    text = read_file(Path(root) / bat / "status")
    if text is None:
        return None
    words = text.split()
    return words[0][:12] if words else None


def _pick(bat: str, root: str | Path, *names: str) -> Path | None:
    for name in names:
        candidate = Path(root) / bat / name
        if os.access(candidate, os.R_OK):
            return candidate
    return None


def battery_perc(bat: str, root: str | Path = POWER_SUPPLY) -> str | None:
    """Return the battery capacity in percent."""
    text = read_file(Path(root) / bat / "capacity")
    if text is None:
        return None
    match = _INT.match(text)
    return str(int(match.group(1))) if match else None


def battery_state(bat: str, root: str | Path = POWER_SUPPLY) -> str | None:
    """Return a symbol for the charging state, '?' if the state is unknown."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str | Path = POWER_SUPPLY) -> str | None:
    """Return the time left while discharging as 'Hh Mm', '' otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"