"""Operating system name, version, kernel, word size and byte order."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass, field

_LD64_PATH = "/lib64/ld-linux-x86-64.so.2"


def parse_os_release(text: str) -> tuple[str, str]:
    """Return (pretty name, version) from os-release text; empty where absent.

    The surrounding quotes of each value are dropped.
    """
    name = ""
    version = ""
    for line in text.split("\n"):
        if line.startswith("PRETTY_NAME"):
            name = line[line.find("=") + 1 :][1:-1]
        if line.startswith("VERSION="):
            version = line[line.find("=") + 1 :][1:-1]
    return name, version


def _kernel_release() -> str:
    return platform.release() or "<unknown>"


@dataclass(init=False)
class OS:
    """Description of the running operating system."""

    name: str = ""
    version: str = ""
    kernel: str = ""
    is_64bit: bool = False
    is_32bit: bool = True
    is_big_endian: bool = False
    is_little_endian: bool = False
    _release_path: str = field(default="", repr=False)

    def __init__(self, os_release_path: str | os.PathLike[str] = "/etc/os-release") -> None:
        try:
            with open(os_release_path, encoding="utf-8", errors="replace") as stream:
                self.name, self.version = parse_os_release(stream.read())
        except OSError:
            self.name, self.version = "Linux", "<unknown>"
        self._release_path = os.fspath(os_release_path)
        self.kernel = _kernel_release()
        self.is_64bit = os.path.exists(_LD64_PATH)
        self.is_32bit = not self.is_64bit
        self.is_big_endian = sys.byteorder == "big"
        self.is_little_endian = sys.byteorder == "little"