[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwprobe"
version = "1.0.0"
description = "Hardware and system information for Linux: CPU, memory, OS, mainboard, batteries, disks, GPUs and network interfaces."
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["hardware", "system information", "cpu", "gpu", "memory", "disk", "battery", "sysfs", "procfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hwprobe = "hwprobe.report:main"

[tool.hatch.build.targets.wheel]
packages = ["hwprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
