import subprocess
from unittest import mock

import pytest

from sysbro.boot_time import NOTIFY_TITLE, boot_time_message, main, parse_boot_time

SAMPLE = (
    "Startup finished in 3.5s (kernel) + 10.2s (userspace) = 13.7s\n"
    "graphical.target reached after 10.1s in userspace\n"
)


def test_parse_boot_time_reads_total_from_first_line():
    assert parse_boot_time(SAMPLE) == "13.7s"


def test_parse_boot_time_without_total_raises():
    with pytest.raises(ValueError):
        parse_boot_time("nothing useful here\n")


def test_parse_boot_time_empty_output_raises():
    with pytest.raises(ValueError):
        parse_boot_time("")


def test_message_contains_time():
    assert boot_time_message("13.7s") == "本次开机时间为: 13.7s"


def test_main_sends_notification():
    def fake_run(cmd, **kwargs):
        if cmd[0] == "systemd-analyze":
            return subprocess.CompletedProcess(cmd, 0, stdout=SAMPLE, stderr="")
        return subprocess.CompletedProcess(cmd, 0)

    with mock.patch("subprocess.run", side_effect=fake_run) as run:
        assert main([]) == 0
    notify = run.call_args_list[-1].args[0]
    assert notify == ["notify-send", "-i", "sysbro", NOTIFY_TITLE, boot_time_message("13.7s")]


def test_main_fails_on_unparsable_output():
    result = subprocess.CompletedProcess(["systemd-analyze"], 1, stdout="", stderr="")
    with mock.patch("subprocess.run", return_value=result) as run:
        assert main([]) == 1
    assert run.call_count == 1