"""
Use case reporting host operating system information for the `os` command.
"""

import getpass
import json
import logging
import os
import platform
from typing import Callable, Optional

from file_manager.exceptions import InvalidFlagError

_ARCHITECTURES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv7l": "arm",
    "ppc64le": "ppc64",
}

CPUINFO_PATH = "/proc/cpuinfo"


class OsInfoUseCase:
    """Use case answering `os --EOL | --cpus | --homedir | --username | --architecture`."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[], list[str]]] = {
            "--EOL": self._eol,
            "--cpus": self._cpus,
            "--homedir": self._homedir,
            "--username": self._username,
            "--architecture": self._architecture,
        }

    def available_flags(self) -> list[str]:
        return list(self._handlers)

    def execute(self, flag: Optional[str]) -> list[str]:
        """
        Produce the lines to print for ``flag``.

        Raises:
            InvalidFlagError: If the flag is missing or unknown
        """
        handler = self._handlers.get(flag or "")
        if handler is None:
            raise InvalidFlagError(f"Unknown os flag: {flag}")
        self._logger.info(f"Reporting OS info for {flag}")
        return handler()

    def _eol(self) -> list[str]:
        return [json.dumps(os.linesep)]

    def _cpus(self) -> list[str]:
        cpus = self._read_cpu_models()
        lines = [f"Total CPUs: {len(cpus)}"]
        for index, (model, mhz) in enumerate(cpus, start=1):
            if mhz:
                lines.append(f"CPU {index}: {model}, {mhz / 1000:g} GHz")
            else:
                lines.append(f"CPU {index}: {model}")
        return lines

    def _read_cpu_models(self) -> list[tuple[str, Optional[float]]]:
        """One (model, MHz) pair per logical CPU; MHz is None when unknown."""
        cpus: list[tuple[str, Optional[float]]] = []
        if os.path.exists(CPUINFO_PATH):
            try:
                model: Optional[str] = None
                with open(CPUINFO_PATH, "r", encoding="utf-8", errors="replace") as f:
                    for line in f:
                        key, _, value = line.partition(":")
                        key, value = key.strip(), value.strip()
                        if key == "model name":
                            model = value
                        elif key == "cpu MHz" and model is not None:
                            cpus.append((model, float(value)))
                            model = None
                        elif not key and model is not None:
                            # end of a processor block without a clock reading
                            cpus.append((model, None))
                            model = None
                if model is not None:
                    cpus.append((model, None))
            except (OSError, ValueError) as e:
                self._logger.warning(f"Could not parse {CPUINFO_PATH}: {e}")
                cpus = []
        if not cpus:
            model = platform.processor() or platform.machine() or "unknown"
            cpus = [(model, None)] * (os.cpu_count() or 1)
        return cpus

    def _homedir(self) -> list[str]:
        return [os.path.expanduser("~")]

    def _username(self) -> list[str]:
        return [getpass.getuser()]

    def _architecture(self) -> list[str]:
        machine = platform.machine()
        return [_ARCHITECTURES.get(machine.lower(), machine)]
