"""Master volume read from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct
from pathlib import Path

from .util import warn

MIXER = "/dev/mixer"

_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

_IOC_READ = 2


def _ior(nr: int) -> int:
    return (_IOC_READ << 30) | (struct.calcsize("i") << 16) | (ord("M") << 8) | nr


_SOUND_MIXER_READ_DEVMASK = _ior(0xFE)


def _read_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str | Path = MIXER) -> str | None:
    """Return the master volume of mixer ``card`` (0..100)."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None

    level = None
    try:
        try:
            devmask = _read_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        for dev, name in enumerate(_DEVICE_NAMES):
            if devmask & (1 << dev) and name == "vol":
                try:
                    level = _read_int(fd, _ior(dev))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({dev})':")
                    return None
    finally:
        os.close(fd)

    return None if level is None else str(level & 0xFF)