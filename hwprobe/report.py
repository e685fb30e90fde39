"""Plain-text hardware report covering every probed component."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from hwprobe.battery import Battery, get_all_batteries
from hwprobe.cpu import CPU, get_all_cpus
from hwprobe.disk import Disk, get_all_disks
from hwprobe.gpu import GPU, get_all_gpus
from hwprobe.mainboard import MainBoard, read_mainboard
from hwprobe.network import Network, get_all_networks
from hwprobe.os_info import OS
from hwprobe.ram import Memory

_LABEL_WIDTH = 20
_MIB = 1024 * 1024

_HEADERS = {
    "cpu": "----------------------------------- CPU ------------------------------------",
    "os": "----------------------------------- OS ------------------------------------",
    "gpu": "----------------------------------- GPU -----------------------------------",
    "ram": "----------------------------------- RAM -----------------------------------",
    "mainboard": "------------------------------- Main Board --------------------------------",
    "batteries": "------------------------------- Batteries ---------------------------------",
    "disks": "--------------------------------- Disks -----------------------------------",
    "networks": "--------------------------------- Networks -----------------------------------",
}


def _format_number(value: float | int) -> str:
    """Render a number the shortest way, dropping a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def _field(label: str, value: object) -> str:
    if isinstance(value, float):
        value = _format_number(value)
    return f"{label:<{_LABEL_WIDTH}} {value}"


def _to_mib(size_bytes: int) -> int:
    return size_bytes // _MIB


def _cpu_section(cpus: Iterable[CPU]) -> str:
    lines = [_HEADERS["cpu"]]
    for cpu in cpus:
        lines += [
            f"Socket {cpu.id}:",
            _field("vendor:", cpu.vendor),
            _field("model:", cpu.model_name),
            _field("physical cores:", cpu.num_physical_cores),
            _field("logical cores:", cpu.num_logical_cores),
            _field("max frequency:", cpu.max_clock_speed_mhz),
            _field("regular frequency:", cpu.regular_clock_speed_mhz),
            _field(
                "cache size:",
                f"L1: {cpu.l1_cache_size_bytes}, L2: {cpu.l2_cache_size_bytes}, "
                f"L3: {cpu.l3_cache_size_bytes}",
            ),
        ]
        utilisation = cpu.threads_utilisation()
        speeds = cpu.current_clock_speed_mhz()
        for thread, share in enumerate(utilisation):
            speed = speeds[thread] if thread < len(speeds) else -1
            lines.append(
                _field(" ", f"Thread {thread}: {speed} MHz ({_format_number(share * 100)}%)")
            )
    return "\n".join(lines) + "\n"


def _os_section(system: OS) -> str:
    lines = [
        _HEADERS["os"],
        _field("Operating System:", system.name),
        _field("version:", system.version),
        _field("kernel:", system.kernel),
        _field("architecture:", "32 bit" if system.is_32bit else "64 bit"),
        _field("endianess:", "little endian" if system.is_little_endian else "big endian"),
    ]
    return "\n".join(lines) + "\n"


def _gpu_section(gpus: Iterable[GPU]) -> str:
    lines = [_HEADERS["gpu"]]
    for gpu in gpus:
        lines += [
            f"GPU {gpu.id}:",
            _field("vendor:", gpu.vendor),
            _field("model:", gpu.name),
            _field("driverVersion:", gpu.driver_version),
            _field("memory [MiB]:", _to_mib(gpu.memory_bytes)),
            _field("frequency:", gpu.frequency_mhz),
            _field("cores:", gpu.num_cores),
            _field("vendor_id:", gpu.vendor_id),
            _field("device_id:", gpu.device_id),
        ]
    return "\n".join(lines) + "\n"


def _ram_section(memory: Memory) -> str:
    lines = [
        _HEADERS["ram"],
        _field("size [MiB]:", _to_mib(memory.total_bytes())),
        _field("free [MiB]:", _to_mib(memory.free_bytes())),
        _field("available [MiB]:", _to_mib(memory.available_bytes())),
    ]
    for module in memory.modules:
        frequency = -1 if module.frequency_hz == -1 else module.frequency_hz / 1e6
        lines += [
            f"RAM {module.id}:",
            _field("vendor:", module.vendor),
            _field("model:", module.model),
            _field("name:", module.name),
            _field("serial-number:", module.serial_number),
            _field("Frequency [MHz]:", frequency),
        ]
    return "\n".join(lines) + "\n"


def _mainboard_section(board: MainBoard) -> str:
    lines = [
        _HEADERS["mainboard"],
        _field("vendor:", board.vendor),
        _field("name:", board.name),
        _field("version:", board.version),
        _field("serial-number:", board.serial_number),
    ]
    return "\n".join(lines) + "\n"


def _battery_section(batteries: Sequence[Battery]) -> str:
    lines = [_HEADERS["batteries"]]
    if not batteries:
        lines.append("No Batteries installed or detected")
    for number, battery in enumerate(batteries):
        lines += [
            f"Battery {number}:",
            _field("vendor:", battery.vendor()),
            _field("model:", battery.model()),
            _field("serial-number:", battery.serial_number()),
            _field("charging:", "yes" if battery.charging() else "no"),
            _field("capacity:", battery.capacity()),
        ]
    return "\n".join(lines) + "\n"


def _disk_section(disks: Sequence[Disk]) -> str:
    lines = [_HEADERS["disks"]]
    if not disks:
        lines.append("No Disks installed or detected")
    for number, disk in enumerate(disks):
        lines += [
            f"Disk {number}:",
            _field("vendor:", disk.vendor),
            _field("model:", disk.model),
            _field("serial-number:", disk.serial_number),
            _field("size:", disk.size_bytes),
            _field("free:", disk.free_size_bytes),
            _field("volumes:", ", ".join(disk.volumes)),
        ]
    return "\n".join(lines) + "\n"


def _network_section(networks: Sequence[Network]) -> str:
    lines = [_HEADERS["networks"]]
    if not networks:
        lines.append("No Networks installed or detected")
    shown = (network for network in networks if network.ip4 or network.ip6)
    for number, network in enumerate(shown):
        lines += [
            f"Network {number}:",
            _field("description:", network.description),
            _field("interface index:", network.index),
            _field("mac:", network.mac),
            _field("ipv4:", network.ip4),
            _field("ipv6:", network.ip6),
        ]
    return "\n".join(lines) + "\n"


def build_report() -> str:
    """Probe every component of this machine and return the full text report."""
    parts = [
        "Hardware Report:\n\n",
        _cpu_section(get_all_cpus()),
        _os_section(OS()),
        _gpu_section(get_all_gpus()),
        _ram_section(Memory()),
        _mainboard_section(read_mainboard()),
        _battery_section(get_all_batteries()),
        _disk_section(get_all_disks()),
        _network_section(get_all_networks()),
    ]
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the hardware report of this machine."""
    parser = argparse.ArgumentParser(
        prog="hwprobe", description="Print a report of this machine's hardware."
    )
    parser.parse_args(argv)
    sys.stdout.write(build_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())