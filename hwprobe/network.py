"""Network interfaces with their index, MAC and IP addresses."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass
from pathlib import Path

import psutil

from hwprobe.sysfs import read_first_line

NET_ROOT = "/sys/class/net"
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class Network:
    """One network interface."""

    index: str = UNKNOWN
    description: str = UNKNOWN
    mac: str = UNKNOWN
    ip4: str = UNKNOWN
    ip6: str = UNKNOWN


def interface_index(name: str) -> str:
    """The kernel's index of the interface as text, or "<unknown>"."""
    try:
        index = socket.if_nametoindex(name)
    except (OSError, ValueError):
        return UNKNOWN
    return str(index) if index > 0 else UNKNOWN


def mac_address(name: str, net_root: str | os.PathLike[str] = NET_ROOT) -> str:
    """Hardware address of the interface from sysfs, or "<unknown>"."""
    value = read_first_line(Path(net_root) / name / "address")
    return value or UNKNOWN


def _addresses(name: str, family: int) -> list[str]:
    return [
        addr.address.split("%", 1)[0]
        for addr in psutil.net_if_addrs().get(name, [])
        if addr.family == family
    ]


def ipv4_address(name: str) -> str:
    """First IPv4 address of the interface, or "<unknown>"."""
    return next(iter(_addresses(name, socket.AF_INET)), UNKNOWN)


def ipv6_address(name: str) -> str:
    """First link-local (fe80) IPv6 address of the interface, or "<unknown>"."""
    return next(
        (address for address in _addresses(name, socket.AF_INET6) if address.startswith("fe80")),
        UNKNOWN,
    )


def get_all_networks() -> list[Network]:
    """Return every interface that has a link-layer address."""
    return [
        Network(
            index=interface_index(name),
            description=name,
            mac=mac_address(name),
            ip4=ipv4_address(name),
            ip6=ipv6_address(name),
        )
        for name, addrs in psutil.net_if_addrs().items()
        if any(addr.family == psutil.AF_LINK for addr in addrs)
    ]