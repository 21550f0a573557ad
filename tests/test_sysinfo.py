import pytest

from miniredis.sysinfo import (
    SystemMemory,
    format_system_memory,
    main,
    parse_system_memory,
    read_system_memory,
)

SAMPLE = [
    "MemTotal:       1024 kB",
    "MemFree:         512 kB",
    "Cached:          100 kB",
    "SwapTotal:       256 kB",
    "SwapFree:        128 kB",
]


def test_parse_converts_kilobytes_to_bytes():
    info = parse_system_memory(["MemTotal: 1024 kB"])
    assert info.total_ram == 1048576


def test_parse_keeps_proportions():
    info = parse_system_memory(SAMPLE)
    assert info.free_ram * 2 == info.total_ram
    assert info.free_swap * 2 == info.total_swap
    assert info.total_swap * 4 == info.total_ram


def test_parse_empty_is_zero():
    assert parse_system_memory([]) == SystemMemory()


def test_parse_malformed_rejected():
    with pytest.raises(ValueError):
        parse_system_memory(["SwapTotal: lots kB"])


def test_read_matches_parse(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("\n".join(SAMPLE) + "\n")
    assert read_system_memory(path) == parse_system_memory(SAMPLE)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_system_memory(tmp_path / "absent")


def test_format_system_memory():
    mib = 1024 * 1024
    info = SystemMemory(total_ram=2 * mib, free_ram=mib // 2, total_swap=0, free_swap=0)
    lines = format_system_memory(info).splitlines()
    assert lines[0] == "Total RAM: 2 MB"
    assert lines[1] == "Free RAM : 0.5MB"
    assert lines[2] == "Total SWAP : 0MB"
    assert lines[3] == "Free SWAP : 0MB"


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "meminfo"
    path.write_text("\n".join(SAMPLE) + "\n")
    assert main(["--meminfo", str(path)]) == 0
    out = capsys.readouterr().out
    assert out == format_system_memory(parse_system_memory(SAMPLE))


def test_main_missing_file_prints_nothing(tmp_path, capsys):
    assert main(["--meminfo", str(tmp_path / "absent")]) == 1
    assert capsys.readouterr().out == ""