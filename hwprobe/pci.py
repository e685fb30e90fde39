"""Lookup of PCI vendor and device names from a pci.ids database."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from pathlib import Path

_PCI_IDS_CANDIDATES = (
    "/usr/share/hwdata/pci.ids",
    "/usr/share/misc/pci.ids",
    "/usr/share/pci.ids",
    "/usr/local/share/pci.ids",
)


def _strip_hex_prefix(identifier: str) -> str:
    return identifier[2:] if identifier.startswith("0x") else identifier


@dataclass
class PCIDevice:
    """A PCI device entry with its subsystem names."""

    device_id: str = ""
    device_name: str = ""
    subsystems: dict[str, str] = field(default_factory=dict)


@dataclass
class PCIVendor:
    """A PCI vendor entry with the devices it makes."""

    vendor_id: str = ""
    vendor_name: str = ""
    devices: dict[str, PCIDevice] = field(default_factory=dict)

    def __getitem__(self, device_id: str) -> PCIDevice:
        """Return the device for ``device_id``; an empty device if unknown."""
        return self.devices.get(_strip_hex_prefix(device_id), PCIDevice())


def _split_entry(line: str) -> list[str] | None:
    parts = line.strip().split("  ")
    return parts if len(parts) == 2 else None


class PCIMapper:
    """Vendor/device name lookup built from the text of a pci.ids file."""

    def __init__(self, text: str) -> None:
        self._vendors: dict[str, PCIVendor] = {}
        vendor: PCIVendor | None = None
        device: PCIDevice | None = None
        for line in text.split("\n"):
            if not line or line.startswith("#"):
                continue
            parts = _split_entry(line)
            if line.startswith("\t\t"):
                if parts is None or device is None:
                    continue
                device.subsystems.setdefault(parts[0], parts[1])
            elif line.startswith("\t"):
                if parts is None or vendor is None:
                    continue
                device = vendor.devices.setdefault(parts[0], PCIDevice(parts[0], parts[1]))
            else:
                if parts is None:
                    continue
                vendor = self._vendors.setdefault(parts[0], PCIVendor(parts[0], parts[1]))

    def vendor_from_id(self, vendor_id: str) -> PCIVendor:
        """Return the vendor for ``vendor_id``; an empty vendor if unknown."""
        return self._vendors.get(_strip_hex_prefix(vendor_id), PCIVendor())

    def __getitem__(self, vendor_id: str) -> PCIVendor:
        return self.vendor_from_id(vendor_id)

    def __len__(self) -> int:
        return len(self._vendors)


@functools.lru_cache(maxsize=None)
def _load_cached(path: str) -> PCIMapper:
    with open(path, encoding="utf-8", errors="replace") as stream:
        return PCIMapper(stream.read())


def load_mapper(path: str | os.PathLike[str] | None = None) -> PCIMapper:
    """Load (once) a mapper from ``path`` or from the system's pci.ids file.

    Without a path and without a system database an empty mapper is returned.
    """
    if path is None:
        path = next((c for c in _PCI_IDS_CANDIDATES if Path(c).is_file()), None)
        if path is None:
            return PCIMapper("")
    return _load_cached(os.fspath(path))