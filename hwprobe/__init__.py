"""Hardware and system information for Linux: CPU, memory, OS, mainboard, batteries, disks, GPUs and networks."""

__version__ = "1.0.0"