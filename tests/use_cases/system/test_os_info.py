"""
Tests for the OsInfoUseCase.
"""

import json
import os
from unittest.mock import mock_open, patch

import pytest

from file_manager.exceptions import InvalidFlagError
from file_manager.use_cases.system.os_info import OsInfoUseCase

CPUINFO = """processor\t: 0
model name\t: Example CPU @ 2.40GHz
cpu MHz\t\t: 2400.000

processor\t: 1
model name\t: Example CPU @ 2.40GHz
cpu MHz\t\t: 1800.500

"""


class TestOsInfoUseCase:
    """Test cases for the OsInfoUseCase."""

    def test_eol_is_json_quoted(self, mock_logger):
        lines = OsInfoUseCase(mock_logger).execute("--EOL")

        assert lines == [json.dumps(os.linesep)]

    def test_homedir(self, mock_logger):
        assert OsInfoUseCase(mock_logger).execute("--homedir") == [
            os.path.expanduser("~")
        ]

    @patch("getpass.getuser", return_value="alice")
    def test_username(self, _mock_getuser, mock_logger):
        assert OsInfoUseCase(mock_logger).execute("--username") == ["alice"]

    @pytest.mark.parametrize(
        "machine, expected",
        [("x86_64", "x64"), ("AMD64", "x64"), ("aarch64", "arm64"), ("riscv64", "riscv64")],
    )
    def test_architecture_uses_node_style_names(self, machine, expected, mock_logger):
        with patch("platform.machine", return_value=machine):
            assert OsInfoUseCase(mock_logger).execute("--architecture") == [expected]

    def test_cpus_from_cpuinfo(self, mock_logger):
        with patch("os.path.exists", return_value=True), patch(
            "builtins.open", mock_open(read_data=CPUINFO)
        ):
            lines = OsInfoUseCase(mock_logger).execute("--cpus")

        assert lines == [
            "Total CPUs: 2",
            "CPU 1: Example CPU @ 2.40GHz, 2.4 GHz",
            "CPU 2: Example CPU @ 2.40GHz, 1.8005 GHz",
        ]

    def test_cpus_fallback_without_cpuinfo(self, mock_logger):
        with patch("os.path.exists", return_value=False), patch(
            "os.cpu_count", return_value=3
        ), patch("platform.processor", return_value="fallback-cpu"):
            lines = OsInfoUseCase(mock_logger).execute("--cpus")

        assert lines == [
            "Total CPUs: 3",
            "CPU 1: fallback-cpu",
            "CPU 2: fallback-cpu",
            "CPU 3: fallback-cpu",
        ]

    @pytest.mark.parametrize("flag", [None, "", "--eol", "--memory"])
    def test_unknown_flag(self, flag, mock_logger):
        with pytest.raises(InvalidFlagError):
            OsInfoUseCase(mock_logger).execute(flag)

    def test_available_flags(self):
        assert OsInfoUseCase().available_flags() == [
            "--EOL",
            "--cpus",
            "--homedir",
            "--username",
            "--architecture",
        ]
