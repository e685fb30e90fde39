"""Small helpers for reading values out of sysfs/procfs style files."""

from __future__ import annotations

import itertools
import os
import re
from dataclasses import dataclass
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def exists(path: str | os.PathLike[str]) -> bool:
    """Return True if something can be stat'ed at ``path``."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the names inside a directory, or an empty list if it cannot be read."""
    try:
        return [name for name in os.listdir(path) if name not in (".", "..")]
    except OSError:
        return []


def read_first_line(path: str | os.PathLike[str]) -> str | None:
    """Return the first line of a file without its newline, or None if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            return stream.readline().rstrip("\n")
    except OSError:
        return None


def read_int(path: str | os.PathLike[str]) -> int:
    """Read the leading integer of a file's first line; -1 if missing or not a number."""
    line = read_first_line(path)
    if line is None:
        return -1
    match = _LEADING_INT.match(line)
    if match is None:
        return -1
    return int(match.group(1))


@dataclass(frozen=True)
class Jiffies:
    """CPU time counters taken from one line of /proc/stat."""

    all: int = 0
    working: int = 0


def parse_jiffies(line: str) -> Jiffies:
    """Parse a ``cpu`` line of /proc/stat into total and busy jiffies."""
    fields = line.split()
    if len(fields) < 11:
        raise ValueError(f"expected at least 10 counters in stat line: {line!r}")
    counters = [int(value) for value in fields[1:11]]
    return Jiffies(all=sum(counters), working=sum(counters[:3]))


def get_jiffies(index: int = 0, stat_path: str | os.PathLike[str] = "/proc/stat") -> Jiffies:
    """Return the jiffies of line ``index`` of the stat file (0 is the aggregate line)."""
    try:
        with open(stat_path, encoding="utf-8", errors="replace") as stream:
            line = next(itertools.islice(stream, index, index + 1), "")
    except OSError:
        return Jiffies()
    return parse_jiffies(line)


__all__ = [
    "Jiffies",
    "directory_entries",
    "exists",
    "get_jiffies",
    "parse_jiffies",
    "read_first_line",
    "read_int",
]

# Path is re-exported for callers that build sysfs paths alongside these helpers.
_ = Path