"""Graphics adapters found through DRM cards in sysfs."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from hwprobe.pci import PCIMapper, load_mapper
from hwprobe.sysfs import exists, read_first_line

DRM_ROOT = "/sys/class/drm"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GPU:
    """One graphics card."""

    id: int = -1
    vendor: str = UNKNOWN
    name: str = UNKNOWN
    driver_version: str = UNKNOWN
    memory_bytes: int = -1
    frequency_mhz: int = -1
    num_cores: int = -1
    vendor_id: str = ""
    device_id: str = ""


def _read_drm(path: Path) -> str:
    value = read_first_line(path)
    return "" if value is None else value


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def get_frequencies(drm_path: str | os.PathLike[str]) -> tuple[int, int, int]:
    """Return (min, current, max) GPU frequency in MHz from a DRM card directory.

    Any value that cannot be read marks the minimum as -1; an unreadable current
    or maximum value itself stays 0.
    """
    root = Path(drm_path)
    freqs = [0, 0, 0]
    for index, name in enumerate(("gt_min_freq_mhz", "gt_cur_freq_mhz", "gt_max_freq_mhz")):
        value = _parse_int(_read_drm(root / name))
        if value is None:
            freqs[0] = -1
        else:
            freqs[index] = value
    return freqs[0], freqs[1], freqs[2]


def get_all_gpus(
    mapper: PCIMapper | None = None, drm_root: str | os.PathLike[str] = DRM_ROOT
) -> list[GPU]:
    """Return the GPUs behind ``card0``, ``card1``, ... with names from the PCI database.

    Gaps among the first three card numbers are tolerated; scanning stops at the
    first missing card after that.
    """
    if mapper is None:
        mapper = load_mapper()
    root = Path(drm_root)
    gpus: list[GPU] = []
    card = 0
    while True:
        path = root / f"card{card}"
        if not exists(path):
            if card > 2:
                break
            card += 1
            continue
        vendor_id = _read_drm(path / "device" / "vendor")
        device_id = _read_drm(path / "device" / "device")
        if vendor_id and device_id:
            vendor = mapper[vendor_id]
            gpus.append(
                GPU(
                    id=card,
                    vendor=vendor.vendor_name,
                    name=vendor[device_id].device_name,
                    frequency_mhz=get_frequencies(path)[2],
                    vendor_id=vendor_id,
                    device_id=device_id,
                )
            )
        card += 1
    return gpus