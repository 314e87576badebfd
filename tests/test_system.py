import datetime as dt
import os
import pwd
import re
import socket
from unittest import mock

import pytest

from barstatus import system

_HUMAN = re.compile(r"\d+\.\d (|Ki|Mi|Gi|Ti|Pi|Ei|Zi|Yi)")


def test_datetime_plain_text_passes_through():
    assert system.datetime("plain text") == "plain text"


def test_datetime_year_matches_current_year():
    result = system.datetime("%Y")
    assert len(result) == 4
    assert result == str(dt.date.today().year)


def test_datetime_empty_result_is_none():
    assert system.datetime("") is None


@pytest.mark.parametrize(
    "func", [system.disk_free, system.disk_total, system.disk_used]
)
def test_disk_sizes_are_human_formatted(func, tmp_path):
    result = func(tmp_path)
    match = _HUMAN.fullmatch(result)
    assert match is not None
    assert match.group(0) == result
    assert float(result.split(" ")[0]) >= 0.0


def test_disk_perc_is_a_percentage(tmp_path):
    assert 0 <= int(system.disk_perc(tmp_path)) <= 100


@pytest.mark.parametrize(
    "func",
    [system.disk_free, system.disk_perc, system.disk_total, system.disk_used],
)
def test_disk_missing_path_is_none(func, tmp_path):
    assert func(tmp_path / "missing") is None


def test_entropy_reads_number(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert system.entropy(path) == "256"


def test_entropy_missing_file_is_none(tmp_path, capsys):
    assert system.entropy(tmp_path / "missing") is None
    assert "open" in capsys.readouterr().err


def test_hostname_matches_socket():
    assert system.hostname() == socket.gethostname()


def test_kernel_release_matches_uname():
    assert system.kernel_release() == os.uname().release


def test_load_avg_has_three_fields():
    fields = system.load_avg().split(" ")
    assert len(fields) == 3
    assert all(re.fullmatch(r"\d+\.\d\d", field) for field in fields)


def test_load_avg_formatting():
    with mock.patch("os.getloadavg", return_value=(0.5, 1.25, 2.0)):
        assert system.load_avg() == "0.50 1.25 2.00"


def test_load_avg_failure_is_none():
    with mock.patch("os.getloadavg", side_effect=OSError):
        assert system.load_avg() is None


def test_num_files_counts_entries(tmp_path):
    names = ["a", "b", "c"]
    for name in names:
        (tmp_path / name).write_text("")
    (tmp_path / "sub").mkdir()
    assert system.num_files(tmp_path) == str(len(names) + 1)


def test_num_files_missing_dir_is_none(tmp_path):
    assert system.num_files(tmp_path / "missing") is None


def test_run_command_returns_output():
    assert system.run_command("echo hello") == "hello"


def test_run_command_returns_first_line_only():
    assert system.run_command("printf 'first\\nsecond\\n'") == "first"


def test_run_command_without_output_is_none():
    assert system.run_command("true") is None


def test_uptime_format():
    result = system.uptime()
    hours, minutes = result.split(" ")
    assert hours.endswith("h")
    assert minutes.endswith("m")
    assert int(hours[:-1]) >= 0
    assert 0 <= int(minutes[:-1]) < 60


def test_uptime_from_clock():
    with mock.patch("time.clock_gettime", return_value=7260.0):
        assert system.uptime() == "2h 1m"


def test_user_ids_match_process():
    assert system.gid() == str(os.getgid())
    assert system.uid() == str(os.geteuid())


def test_username_matches_passwd():
    assert system.username() == pwd.getpwuid(os.geteuid()).pw_name


@pytest.mark.parametrize("degrees", [0, 45, 101])
def test_temp_converts_millidegrees(tmp_path, degrees):
    path = tmp_path / "temp"
    path.write_text(f"{degrees * 1000 + 999}\n")
    assert system.temp(path) == str(degrees)


def test_temp_missing_file_is_none(tmp_path):
    assert system.temp(tmp_path / "missing") is None