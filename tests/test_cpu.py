from pathlib import Path

import pytest

from hwprobe.cpu import (
    CPU,
    get_all_cpus,
    max_clock_speed_mhz,
    min_clock_speed_mhz,
    parse_cpuinfo,
    regular_clock_speed_mhz,
)

CPUINFO = (
    "processor\t: 0\n"
    "vendor_id\t: GenuineIntel\n"
    "model name\t: Example Processor 3000\n"
    "physical id\t: 0\n"
    "siblings\t: 8\n"
    "cpu cores\t: 4\n"
    "cache size\t: 8192 KB\n"
    "flags\t\t: fpu vme sse\n"
    "\n"
    "processor\t: 1\n"
    "vendor_id\t: GenuineIntel\n"
    "model name\t: Example Processor 3000\n"
    "physical id\t: 0\n"
    "siblings\t: 8\n"
    "cpu cores\t: 4\n"
)


def _write_freq(root: Path, core: int, name: str, value: str) -> None:
    directory = root / f"cpu{core}" / "cpufreq"
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(value + "\n")


def test_parse_cpuinfo_single_socket():
    cpus = parse_cpuinfo(CPUINFO)
    assert len(cpus) == 1
    cpu = cpus[0]
    assert cpu.id == 0
    assert cpu.vendor == "GenuineIntel"
    assert cpu.model_name == "Example Processor 3000"
    assert cpu.num_logical_cores == 8
    assert cpu.num_physical_cores == 4
    assert cpu.flags == ["fpu", "vme", "sse"]
    assert cpu.l3_cache_size_bytes == 8192 * 1024


def test_parse_cpuinfo_two_sockets():
    text = "physical id\t: 0\nvendor_id\t: A\n\nphysical id\t: 1\nvendor_id\t: B\n"
    cpus = parse_cpuinfo(text)
    assert [cpu.id for cpu in cpus] == [0, 1]
    assert [cpu.vendor for cpu in cpus] == ["A", "B"]


def test_parse_cpuinfo_without_physical_id_is_empty():
    assert parse_cpuinfo("vendor_id\t: A\n") == []
    assert parse_cpuinfo("") == []


def test_get_all_cpus_missing_file(tmp_path):
    assert get_all_cpus(tmp_path / "missing") == []


def test_get_all_cpus_reads_file(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text(CPUINFO)
    cpus = get_all_cpus(path)
    assert [cpu.vendor for cpu in cpus] == ["GenuineIntel"]


def test_clock_speeds_missing_are_minus_one(tmp_path):
    assert max_clock_speed_mhz(0, tmp_path) == -1
    assert regular_clock_speed_mhz(0, tmp_path) == -1
    assert min_clock_speed_mhz(0, tmp_path) == -1


def test_clock_speeds_from_files(tmp_path):
    _write_freq(tmp_path, 0, "scaling_max_freq", "3000000")
    _write_freq(tmp_path, 0, "scaling_min_freq", "800000")
    _write_freq(tmp_path, 0, "base_frequency", "garbage")
    assert max_clock_speed_mhz(0, tmp_path) == 3000
    assert 0 < min_clock_speed_mhz(0, tmp_path) < max_clock_speed_mhz(0, tmp_path)
    assert regular_clock_speed_mhz(0, tmp_path) == -1


def test_current_clock_speed_stops_at_missing_core(tmp_path):
    _write_freq(tmp_path, 0, "scaling_cur_freq", "1000000")
    _write_freq(tmp_path, 1, "scaling_cur_freq", "2000000")
    _write_freq(tmp_path, 3, "scaling_cur_freq", "2000000")
    cpu = CPU(cpu_root=str(tmp_path))
    assert cpu.current_clock_speed_mhz() == [1000, 2000]


def test_current_clock_speed_empty(tmp_path):
    assert CPU(cpu_root=str(tmp_path)).current_clock_speed_mhz() == []


def _stat(path: Path, lines: list[str]) -> None:
    path.write_text("\n".join(lines) + "\n")


def test_current_utilisation_all_busy_then_unchanged(tmp_path):
    stat = tmp_path / "stat"
    _stat(stat, ["cpu 5 0 0 0 0 0 0 0 0 0"])
    cpu = CPU(stat_path=str(stat), warmup_seconds=0)
    assert cpu.current_utilisation() == pytest.approx(1.0)
    assert cpu.current_utilisation() == -1.0


def test_current_utilisation_is_fraction(tmp_path):
    stat = tmp_path / "stat"
    _stat(stat, ["cpu 3 1 2 40 1 0 0 0 0 0"])
    cpu = CPU(stat_path=str(stat), warmup_seconds=0)
    value = cpu.current_utilisation()
    assert 0.0 < value < 1.0


def test_threads_utilisation_per_line(tmp_path):
    stat = tmp_path / "stat"
    _stat(
        stat,
        [
            "cpu 10 0 0 10 0 0 0 0 0 0",
            "cpu0 4 0 0 0 0 0 0 0 0 0",
            "cpu1 0 0 0 0 0 0 0 0 0 0",
        ],
    )
    cpu = CPU(num_logical_cores=2, stat_path=str(stat), warmup_seconds=0)
    values = cpu.threads_utilisation()
    assert len(values) == cpu.num_logical_cores
    assert values[0] == pytest.approx(1.0)
    assert values[1] == -1.0


def test_thread_utilisation_second_sample_unchanged(tmp_path):
    stat = tmp_path / "stat"
    _stat(stat, ["cpu 1 0 0 1 0 0 0 0 0 0", "cpu0 1 0 0 1 0 0 0 0 0 0"])
    cpu = CPU(num_logical_cores=1, stat_path=str(stat), warmup_seconds=0)
    first = cpu.thread_utilisation(0)
    assert 0.0 < first < 1.0
    assert cpu.thread_utilisation(0) == -1.0


def test_thread_utilisation_out_of_range(tmp_path):
    stat = tmp_path / "stat"
    _stat(stat, ["cpu 1 0 0 1 0 0 0 0 0 0", "cpu0 1 0 0 1 0 0 0 0 0 0"])
    cpu = CPU(num_logical_cores=1, stat_path=str(stat), warmup_seconds=0)
    with pytest.raises(IndexError):
        cpu.thread_utilisation(5)