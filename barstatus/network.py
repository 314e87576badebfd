"""Network addresses, interface throughput and wireless link status."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct
from pathlib import Path

import psutil

from .util import fmt_human, read_file, read_uint, warn

NET_CLASS = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"

_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_INT = re.compile(r"[+-]?\d+")


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for addr in addresses.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Measures the byte rate of an interface between consecutive samples."""

    def __init__(
        self, direction: str, interval: int = 1000, root: str | Path = NET_CLASS
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = Path(root)
        self._bytes = 0

    def sample(self, interface: str) -> str | None:
        """Read the byte counter and return the rate per second since the last sample."""
        previous = self._bytes
        path = self.root / interface / "statistics" / f"{self.direction}_bytes"
        current = read_uint(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        return fmt_human((current - previous) * 1000 // self.interval, 1024)


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(
    interface: str,
    root: str | Path = NET_CLASS,
    wireless_path: str | Path = PROC_WIRELESS,
) -> str | None:
    """Return the link quality of a wireless interface in percent."""
    operstate = read_file(Path(root) / interface / "operstate")
    if operstate is None or not operstate.startswith("up\n"):
        return None

    text = read_file(wireless_path)
    if text is None:
        return None
    lines = text.splitlines(keepends=True)[:3]
    if len(lines) < 3:
        return None
    line = lines[2]

    start = line.find(interface)
    if start < 0:
        return None
    fields = line[start + len(interface) + 2 :].split()
    if len(fields) < 2 or not _INT.match(fields[0]):
        return None
    quality = _INT.match(fields[1])
    if quality is None:
        return None
    # 70 is the maximum link quality reported in /proc/net/wireless.
    return str(int(int(quality.group()) / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID a wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address = essid.buffer_info()[0]
    request = struct.pack("16sPHH", name, address, _IW_ESSID_MAX_SIZE + 1, 0)
    request = bytearray(request.ljust(max(_IWREQ_SIZE, len(request)), b"\0"))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode(errors="replace") or None