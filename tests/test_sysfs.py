import pytest

from hwprobe.sysfs import (
    Jiffies,
    directory_entries,
    exists,
    get_jiffies,
    parse_jiffies,
    read_first_line,
    read_int,
)


def test_exists(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert exists(target) is True
    assert exists(tmp_path) is True
    assert exists(tmp_path / "missing") is False


def test_directory_entries(tmp_path):
    (tmp_path / "a").write_text("")
    (tmp_path / "b").mkdir()
    assert sorted(directory_entries(tmp_path)) == ["a", "b"]


def test_directory_entries_missing(tmp_path):
    assert directory_entries(tmp_path / "nope") == []


def test_read_first_line(tmp_path):
    target = tmp_path / "value"
    target.write_text("first line\nsecond line\n")
    assert read_first_line(target) == "first line"


def test_read_first_line_missing(tmp_path):
    assert read_first_line(tmp_path / "missing") is None


@pytest.mark.parametrize(
    "content, expected",
    [
        ("4200000\n", 4200000),
        ("  17\n", 17),
        ("-5", -5),
        ("123abc", 123),
        ("abc", -1),
        ("", -1),
    ],
)
def test_read_int(tmp_path, content, expected):
    target = tmp_path / "value"
    target.write_text(content)
    assert read_int(target) == expected


def test_read_int_missing(tmp_path):
    assert read_int(tmp_path / "missing") == -1


def test_parse_jiffies():
    result = parse_jiffies("cpu  1 2 3 4 5 6 7 8 9 10")
    assert result == Jiffies(all=55, working=6)


def test_parse_jiffies_ignores_extra_fields():
    assert parse_jiffies("cpu0 7 0 0 0 0 0 0 0 0 0 99 99") == Jiffies(7, 7)


def test_parse_jiffies_too_short():
    with pytest.raises(ValueError):
        parse_jiffies("cpu 1 2 3")


def test_get_jiffies_selects_line(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(
        "cpu  9 9 9 9 9 9 9 9 9 9\n"
        "cpu0 5 0 0 0 0 0 0 0 0 0\n"
        "cpu1 0 0 0 4 0 0 0 0 0 0\n"
    )
    assert get_jiffies(1, stat) == Jiffies(all=5, working=5)
    assert get_jiffies(2, stat) == Jiffies(all=4, working=0)


def test_get_jiffies_missing_file(tmp_path):
    assert get_jiffies(0, tmp_path / "missing") == Jiffies(0, 0)


def test_get_jiffies_past_end(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu  1 1 1 1 1 1 1 1 1 1\n")
    with pytest.raises(ValueError):
        get_jiffies(3, stat)