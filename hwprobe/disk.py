"""Block devices described from sysfs, with their mount points and free space."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from hwprobe.sysfs import directory_entries, exists, read_first_line, read_int

BLOCK_PATH = "/sys/class/block/"
MOUNTS_PATH = "/proc/mounts"
BLOCK_SIZE = 512
UNKNOWN = "<unknown>"

_PARTITION = re.compile(r"(sd[a-z]|nvme\d+n\d+)p?\d+$")


@dataclass
class Disk:
    """A whole disk with its identification, size and mounted volumes."""

    id: int = -1
    vendor: str = UNKNOWN
    model: str = UNKNOWN
    serial_number: str = UNKNOWN
    size_bytes: int = -1
    free_size_bytes: int = -1
    volumes: list[str] = field(default_factory=list)


def is_partition(path: str | os.PathLike[str]) -> bool:
    """True if the device path names a partition such as ``sda1`` or ``nvme0n1p2``."""
    return _PARTITION.search(os.fspath(path)) is not None


def _read_value(path: str) -> str | None:
    value = read_first_line(path)
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_mount_point(device: str, mounts_path: str | os.PathLike[str] = MOUNTS_PATH) -> str:
    """Return where ``device`` is mounted according to the mounts table; "/" if not found."""
    try:
        with open(mounts_path, encoding="utf-8", errors="replace") as stream:
            for line in stream:
                fields = line.split()
                if len(fields) >= 2 and fields[0] == device:
                    return fields[1]
    except OSError:
        pass
    return "/"


def disk_vendor(path: str | os.PathLike[str]) -> str:
    """Vendor of the disk at a sysfs block path.

    NVMe namespaces keep their vendor under the controller in the ``nvme`` class,
    so ``.../block/nvme0n1`` is looked up as ``.../nvme/nvme0``.
    """
    path = os.fspath(path)
    vendor_path = path
    position = path.find("nvme")
    if position != -1:
        controller = path[position : position + 5]
        prefix = path[: position - 6] if position >= 6 else path
        vendor_path = prefix + "nvme/" + controller
    value = _read_value(vendor_path + "/device/vendor")
    return UNKNOWN if value is None else value


def disk_model(path: str | os.PathLike[str]) -> str:
    """Model name of the disk at a sysfs block path."""
    value = _read_value(os.fspath(path) + "/device/model")
    return UNKNOWN if value is None else value


def disk_serial_number(path: str | os.PathLike[str]) -> str:
    """Serial number of the disk at a sysfs block path."""
    value = _read_value(os.fspath(path) + "/device/serial")
    return UNKNOWN if value is None else value


def disk_size_bytes(path: str | os.PathLike[str]) -> int:
    """Size of the disk in bytes from its sector count; -1 if unknown."""
    sectors = read_int(os.fspath(path) + "/size")
    if sectors == -1:
        return -1
    return sectors * BLOCK_SIZE


def disk_free_bytes(path: str | os.PathLike[str]) -> int:
    """Bytes available to unprivileged users on the filesystem at ``path``; -1 on error."""
    try:
        stats = os.statvfs(path)
    except (OSError, ValueError):
        return -1
    return stats.f_bsize * stats.f_bavail


def get_all_disks(
    base_path: str | os.PathLike[str] = BLOCK_PATH,
    mounts_path: str | os.PathLike[str] = MOUNTS_PATH,
) -> list[Disk]:
    """Return every whole disk that reports a vendor, model or serial number."""
    disks: list[Disk] = []
    base = os.fspath(base_path)
    for entry in directory_entries(base):
        path = os.path.join(base, entry)
        if not exists(path) or is_partition(path):
            continue
        disk = Disk(
            vendor=disk_vendor(path),
            model=disk_model(path),
            serial_number=disk_serial_number(path),
        )
        # Every block device has a size file, so identification decides what is a disk.
        if disk.vendor == UNKNOWN and disk.model == UNKNOWN and disk.serial_number == UNKNOWN:
            continue
        disk.size_bytes = disk_size_bytes(path)
        mount_point = get_mount_point("/dev/" + entry, mounts_path)
        disk.free_size_bytes = disk_free_bytes(mount_point)
        disk.volumes.append(mount_point)
        disks.append(disk)
    return disks