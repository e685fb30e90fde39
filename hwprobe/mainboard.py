"""Mainboard identification read from DMI files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from hwprobe.sysfs import read_first_line

DMI_ROOTS = ("/sys/devices/virtual/dmi/", "/sys/class/dmi/")


def get_dmi_by_name(
    name: str, roots: Iterable[str | os.PathLike[str]] = DMI_ROOTS
) -> str:
    """Return the first non-empty ``id/<name>`` value under the DMI roots, else "<unknown>"."""
    for root in roots:
        value = read_first_line(Path(root) / "id" / name)
        if value:
            return value
    return "<unknown>"


@dataclass(frozen=True)
class MainBoard:
    """Vendor, name, version and serial number of the mainboard."""

    vendor: str = "<unknown>"
    name: str = "<unknown>"
    version: str = "<unknown>"
    serial_number: str = "<unknown>"


def read_mainboard(roots: Iterable[str | os.PathLike[str]] = DMI_ROOTS) -> MainBoard:
    """Read the mainboard description from DMI."""
    roots = tuple(roots)
    return MainBoard(
        vendor=get_dmi_by_name("board_vendor", roots),
        name=get_dmi_by_name("board_name", roots),
        version=get_dmi_by_name("board_version", roots),
        serial_number=get_dmi_by_name("board_serial", roots),
    )