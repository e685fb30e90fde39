# hwprobe

Hardware and system information for Linux, read from `/proc`, `/sys`,
`/etc/os-release` and the network interface list (through `psutil`).

## What it reports

- **CPU** (`hwprobe.cpu`): one `CPU` per physical socket with vendor, model
  name, physical and logical core counts, L3 cache size, flags, maximum and
  base clock speed; per-core current clock speed and utilisation
- **Memory** (`hwprobe.ram`): total, free and available bytes
- **Operating system** (`hwprobe.os_info`): pretty name, version, kernel
  release, word size and byte order
- **Mainboard** (`hwprobe.mainboard`): vendor, name, version and serial number
  from DMI
- **Batteries** (`hwprobe.battery`): vendor, model, serial number, technology,
  charging state, energy and capacity of each `BAT<n>` power supply
- **Disks** (`hwprobe.disk`): vendor, model, serial number, size, mount point
  and free space of each whole disk
- **GPUs** (`hwprobe.gpu`): vendor and device names of each DRM card, looked up
  in a `pci.ids` table (`hwprobe.pci`), and its maximum frequency
- **Networks** (`hwprobe.network`): interface index, MAC address, first IPv4
  address and link-local IPv6 address

## Installation

```
pip install hwprobe
```

## Command line

Print a full hardware report:

```
hwprobe
```

The report samples CPU utilisation, so it waits about one second before the
first sample is taken.

## Library use

```python
from hwprobe.cpu import get_all_cpus
from hwprobe.ram import Memory
from hwprobe.os_info import OS
from hwprobe.mainboard import read_mainboard
from hwprobe.battery import get_all_batteries
from hwprobe.disk import get_all_disks
from hwprobe.network import get_all_networks

for cpu in get_all_cpus():
    print(cpu.vendor, cpu.model_name, cpu.num_logical_cores)
    print(cpu.current_clock_speed_mhz(), cpu.threads_utilisation())

memory = Memory()
print(memory.total_bytes(), memory.free_bytes(), memory.available_bytes())

system = OS()
print(system.name, system.version, system.kernel)

print(read_mainboard().vendor)

for battery in get_all_batteries():
    print(battery.model(), battery.charging(), battery.capacity())

for disk in get_all_disks():
    print(disk.model, disk.size_bytes, disk.free_size_bytes, disk.volumes)

for network in get_all_networks():
    print(network.description, network.mac, network.ip4, network.ip6)
```

GPU names come from a PCI id table. `hwprobe.pci.load_mapper()` loads the
system's `pci.ids` (or a file you name) and `hwprobe.gpu.get_all_gpus()` uses
it by default; you can also pass your own `PCIMapper`.

Most readers take the path they read from as an argument (for example
`get_all_cpus(cpuinfo_path)`, `get_all_disks(base_path, mounts_path)`,
`Memory(meminfo_path)`), so they can be pointed at copies of `/proc` and
`/sys` files. Parsers such as `parse_cpuinfo`, `parse_meminfo`,
`parse_os_release` and `parse_jiffies` work on text directly.

The report the command prints is also available as a string from
`hwprobe.report.build_report()`.

Values that cannot be read are generally reported as `<unknown>` for text and
`-1` for numbers; battery energy figures are `0` when unknown.

## Limitations

- Only Linux is supported; everything is read from Linux-specific files.
- GPU driver version, memory size and core count are not detected and stay
  `<unknown>` / `-1`.
- Memory is described as a single module holding the total size; individual
  DIMMs are not identified.
- Only the L3 cache size is read; L1 and L2 stay `-1`.
- CPU temperature is not reported.

## Running the tests

```
pip install -e ".[test]"
pytest
```