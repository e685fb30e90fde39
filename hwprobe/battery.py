"""Battery information read from the power-supply class in sysfs."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

from hwprobe.sysfs import exists, read_first_line

POWER_SUPPLY_PATH = "/sys/class/power_supply/"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Battery:
    """One battery, identified by the number in its ``BAT<n>`` directory."""

    def __init__(self, id: int, base_path: str | os.PathLike[str] = POWER_SUPPLY_PATH) -> None:
        self.id = id
        self._base_path = Path(base_path)
        self._vendor = ""
        self._model = ""
        self._serial_number = ""
        self._technology = ""
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(id={self.id!r}, base_path={str(self._base_path)!r})"

    def _read(self, name: str) -> str | None:
        if self.id < 0:
            return None
        return read_first_line(self._base_path / f"BAT{self.id}" / name)

    def _read_text(self, name: str) -> str:
        value = self._read(name)
        return "<unknown>" if value is None else value

    def _read_number(self, name: str) -> int:
        value = self._read(name)
        if value is None:
            return 0
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    def vendor(self) -> str:
        """Manufacturer name."""
        if not self._vendor:
            self._vendor = self._read_text("manufacturer")
        return self._vendor

    def model(self) -> str:
        """Model name."""
        if not self._model:
            self._model = self._read_text("model_name")
        return self._model

    def serial_number(self) -> str:
        """Serial number."""
        if not self._serial_number:
            self._serial_number = self._read_text("serial_number")
        return self._serial_number

    def technology(self) -> str:
        """Cell technology, such as Li-ion."""
        if not self._technology:
            self._technology = self._read_text("technology")
        return self._technology

    def energy_full(self) -> int:
        """Energy when fully charged; 0 if unknown."""
        if self._energy_full == 0:
            self._energy_full = self._read_number("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        """Energy stored right now; 0 if unknown."""
        return self._read_number("energy_now")

    def charging(self) -> bool:
        """True while the battery reports that it is charging."""
        return self._read("status") == "Charging"

    def discharging(self) -> bool:
        """True whenever the battery is not charging."""
        return not self.charging()

    def capacity(self) -> float:
        """Current charge as a fraction of full energy."""
        now = self.energy_now()
        full = self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.inf
        return now / full


def get_all_batteries(base_path: str | os.PathLike[str] = POWER_SUPPLY_PATH) -> list[Battery]:
    """Return the batteries BAT0, BAT1, ... up to the first missing one."""
    batteries: list[Battery] = []
    while exists(Path(base_path) / f"BAT{len(batteries)}"):
        batteries.append(Battery(len(batteries), base_path))
    return batteries