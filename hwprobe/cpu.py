"""CPU description and load/frequency sampling from procfs and sysfs."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path

from hwprobe.sysfs import Jiffies, get_jiffies, read_int

CPU_ROOT = "/sys/devices/system/cpu"
STAT_PATH = "/proc/stat"
CPUINFO_PATH = "/proc/cpuinfo"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _frequency_mhz(core_id: int, root: str | os.PathLike[str], name: str) -> int:
    value = read_int(Path(root) / f"cpu{core_id}" / "cpufreq" / name)
    return value // 1000 if value > -1 else -1


def max_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = CPU_ROOT) -> int:
    """Maximum scaling frequency of a core in MHz, or -1."""
    return _frequency_mhz(core_id, root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = CPU_ROOT) -> int:
    """Base frequency of a core in MHz, or -1."""
    return _frequency_mhz(core_id, root, "base_frequency")


def min_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = CPU_ROOT) -> int:
    """Minimum scaling frequency of a core in MHz, or -1."""
    return _frequency_mhz(core_id, root, "scaling_min_freq")


@dataclass
class CPU:
    """One CPU socket with its static properties and live samplers."""

    id: int = -1
    vendor: str = "<unknown>"
    model_name: str = "<unknown>"
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    flags: list[str] = field(default_factory=list)
    cpu_root: str = field(default=CPU_ROOT, repr=False, compare=False)
    stat_path: str = field(default=STAT_PATH, repr=False, compare=False)
    warmup_seconds: float = field(default=1.0, repr=False, compare=False)
    _jiffies_initialized: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: list[Jiffies] = field(default_factory=list, init=False, repr=False, compare=False)

    def current_clock_speed_mhz(self) -> list[int]:
        """Current frequency of every logical core in MHz, in core order."""
        speeds: list[int] = []
        core_id = 0
        while True:
            value = read_int(Path(self.cpu_root) / f"cpu{core_id}" / "cpufreq" / "scaling_cur_freq")
            if value == -1:
                return speeds
            speeds.append(value // 1000)
            core_id += 1

    def _init_jiffies(self) -> None:
        # The first delta needs some time to pass between two samples.
        if not self._jiffies_initialized:
            time.sleep(self.warmup_seconds)
            self._jiffies_initialized = True

    def current_utilisation(self) -> float:
        """Share of busy time since the previous call (0..1), or -1.0."""
        self._init_jiffies()
        current = get_jiffies(0, self.stat_path)
        total = current.all - self._last_total.all
        work = current.working - self._last_total.working
        self._last_total = current
        if total == 0:
            return -1.0
        utilisation = work / total
        if utilisation < 0 or utilisation > 1:
            return -1.0
        return utilisation

    def thread_utilisation(self, thread_index: int) -> float:
        """Share of busy time of one logical core since its previous sample, or -1.0."""
        self._init_jiffies()
        if not self._last_threads:
            self._last_threads = [Jiffies() for _ in range(max(0, self.num_logical_cores))]
        current = get_jiffies(thread_index + 1, self.stat_path)
        last = self._last_threads[thread_index]
        total = current.all - last.all
        work = current.working - last.working
        self._last_threads[thread_index] = current
        if total == 0:
            return -1.0
        percentage = work / total
        if percentage < 0 or percentage > 100:
            return -1.0
        return percentage

    def threads_utilisation(self) -> list[float]:
        """Utilisation of every logical core, in core order."""
        return [self.thread_utilisation(index) for index in range(max(0, self.num_logical_cores))]


def parse_cpuinfo(text: str) -> list[CPU]:
    """Build one CPU per physical socket from /proc/cpuinfo text."""
    cpus: list[CPU] = []
    physical_id = -1
    for block in text.split("\n\n"):
        cpu = CPU()
        add = False
        for line in block.split("\n"):
            parts = line.split(":")
            if len(parts) < 2:
                continue
            name = parts[0].strip()
            value = parts[1].strip()
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _leading_int(value.split(" ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _leading_int(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _leading_int(value)
            elif name == "flags":
                cpu.flags = [flag for flag in value.split(" ") if flag]
            elif name == "physical id":
                socket = _leading_int(value)
                if socket == physical_id:
                    continue
                cpu.id = socket
                add = True
        if add:
            physical_id += 1
            cpus.append(cpu)
    return cpus


def get_all_cpus(cpuinfo_path: str | os.PathLike[str] = CPUINFO_PATH) -> list[CPU]:
    """Return the CPU sockets of this machine with their clock speeds."""
    try:
        with open(cpuinfo_path, encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return []
    cpus = parse_cpuinfo(text)
    for cpu in cpus:
        cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, cpu.cpu_root)
        cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, cpu.cpu_root)
    return cpus