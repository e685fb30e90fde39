import sys

from hwprobe.os_info import OS, parse_os_release

SAMPLE = (
    'NAME="Ubuntu"\n'
    'VERSION="22.04.3 LTS (Jammy Jellyfish)"\n'
    'VERSION_ID="22.04"\n'
    'PRETTY_NAME="Ubuntu 22.04.3 LTS"\n'
)


def test_parse_os_release():
    assert parse_os_release(SAMPLE) == ("Ubuntu 22.04.3 LTS", "22.04.3 LTS (Jammy Jellyfish)")


def test_parse_os_release_ignores_version_id():
    name, version = parse_os_release('VERSION_ID="1"\nVERSION="2"\n')
    assert version == "2"
    assert name == ""


def test_parse_os_release_empty():
    assert parse_os_release("") == ("", "")


def test_os_reads_release_file(tmp_path):
    path = tmp_path / "os-release"
    path.write_text(SAMPLE)
    info = OS(path)
    assert info.name == "Ubuntu 22.04.3 LTS"
    assert info.version == "22.04.3 LTS (Jammy Jellyfish)"


def test_os_missing_release_file(tmp_path):
    info = OS(tmp_path / "missing")
    assert info.name == "Linux"
    assert info.version == "<unknown>"


def test_os_architecture_and_endianness_invariants(tmp_path):
    info = OS(tmp_path / "missing")
    assert info.is_32bit is (not info.is_64bit)
    assert info.is_little_endian is (sys.byteorder == "little")
    assert info.is_big_endian is (not info.is_little_endian)
    assert len(info.kernel) > 0