"""General system figures: time, disks, host, load, users and sensors."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import time
from pathlib import Path

from .util import fmt_human, read_uint, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_BUFSIZE = 1024
_UPTIME_CLOCK = getattr(
    time, "CLOCK_BOOTTIME", getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
)


def datetime(fmt: str) -> str | None:
    """Return the local time formatted with ``fmt`` (strftime syntax)."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode()) >= _BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str | Path) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path: str | Path) -> str | None:
    """Return the space available to unprivileged users on ``path``."""
    fs = _statvfs(path)
    return None if fs is None else fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str | Path) -> str | None:
    """Return the disk usage of ``path`` in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1.0 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str | Path) -> str | None:
    """Return the total size of the filesystem holding ``path``."""
    fs = _statvfs(path)
    return None if fs is None else fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str | Path) -> str | None:
    """Return the used space of the filesystem holding ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(path: str | Path = ENTROPY_AVAIL) -> str | None:
    """Return the available kernel entropy."""
    value = read_uint(path)
    return None if value is None else str(value)


def hostname() -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostname:")
        return None


def kernel_release() -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg() -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str | Path) -> str | None:
    """Return the number of entries in directory ``path``."""
    try:
        with os.scandir(path) as entries:
            return str(sum(1 for _ in entries))
    except OSError:
        warn(f"opendir '{path}':")
        return None


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` through the shell and return the first line of its output."""
    try:
        with subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        ) as proc:
            assert proc.stdout is not None
            line = proc.stdout.readline(_BUFSIZE - 2)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    newline = line.rfind("\n")
    if newline >= 0:
        line = line[:newline]
    return line or None


def uptime() -> str | None:
    """Return the system uptime as 'Hh Mm'."""
    try:
        seconds = int(time.clock_gettime(_UPTIME_CLOCK))
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid() -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid() -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username() -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None


def temp(file: str | Path) -> str | None:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = read_uint(file)
    return None if value is None else str(value // 1000)