"""System memory information read from /proc/meminfo."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_FIELDS = {"MemTotal": "total", "MemFree": "free", "MemAvailable": "available"}


@dataclass
class MemInfo:
    """Total, free and available memory in bytes; -1 where unknown."""

    total: int = -1
    free: int = -1
    available: int = -1

    def _complete(self) -> bool:
        return -1 not in (self.total, self.free, self.available)


def _kib_value(line: str) -> int | None:
    parts = line.split(":")
    if len(parts) != 2:
        return None
    value = parts[1].strip()
    number, space, _unit = value.partition(" ")
    if not space:
        return None
    return int(number) * 1024


def parse_meminfo(text: str) -> MemInfo:
    """Parse meminfo text, stopping once total, free and available are all known."""
    info = MemInfo()
    for line in text.split("\n"):
        if info._complete():
            break
        for prefix, attribute in _FIELDS.items():
            if line.startswith(prefix):
                value = _kib_value(line)
                if value is not None:
                    setattr(info, attribute, value)
                break
    return info


def _fill_from_sysconf(info: MemInfo) -> None:
    try:
        pages = os.sysconf("SC_PHYS_PAGES")
        available_pages = os.sysconf("SC_AVPHYS_PAGES")
        page_size = os.sysconf("SC_PAGE_SIZE")
    except (AttributeError, ValueError, OSError):
        return
    if pages > 0 and page_size > 0:
        info.total = pages * page_size
    if available_pages > 0 and page_size > 0:
        info.available = available_pages * page_size


def read_meminfo(path: str | os.PathLike[str] = "/proc/meminfo") -> MemInfo:
    """Read memory figures, falling back to sysconf for missing total/available."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        info = MemInfo()
        _fill_from_sysconf(info)
        return info
    info = parse_meminfo(text)
    if info.total == -1 or info.available == -1:
        _fill_from_sysconf(info)
    return info


@dataclass
class Module:
    """One memory module."""

    id: int = 0
    vendor: str = "<unknown>"
    name: str = "<unknown>"
    serial_number: str = "<unknown>"
    model: str = "<unknown>"
    total_bytes: int = -1
    frequency_hz: int = -1


@dataclass(init=False)
class Memory:
    """System memory with its (single, synthesised) module."""

    modules: list[Module] = field(default_factory=list)

    def __init__(self, meminfo_path: str | os.PathLike[str] = "/proc/meminfo") -> None:
        self._meminfo_path = meminfo_path
        self.modules = [Module(id=0, total_bytes=read_meminfo(meminfo_path).total)]

    def total_bytes(self) -> int:
        """Total physical memory in bytes."""
        return read_meminfo(self._meminfo_path).total

    def free_bytes(self) -> int:
        """Free memory in bytes, read now."""
        return read_meminfo(self._meminfo_path).free

    def available_bytes(self) -> int:
        """Available memory in bytes, read now."""
        return read_meminfo(self._meminfo_path).available