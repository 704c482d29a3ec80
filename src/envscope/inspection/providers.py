"""Data providers: the seam between the report and the live process.

The report code never touches ``os``, ``sys`` or ``psutil`` directly; it
asks a provider. ``ProcessDataProvider`` answers from the running process
and host, ``StaticDataProvider`` answers from plain values so the
grouping and formatting logic can be exercised with synthetic inputs.
"""

import os
import platform
import socket
import subprocess
import sys
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import psutil

_UNAVAILABLE = "N/A"


@runtime_checkable
class DataProvider(Protocol):
    """Supplies environment pairs and runtime metadata."""

    def environ(self) -> Mapping[str, str | None]: ...

    def runtime_version(self) -> str: ...

    def platform_id(self) -> str: ...

    def architecture(self) -> str: ...

    def cwd(self) -> str: ...

    def process_ids(self) -> dict[str, int | str]:
        """Return pid, ppid, uid and gid (``"N/A"`` where unsupported)."""
        ...

    def memory_usage(self) -> dict[str, Any]: ...

    def cpu_usage(self) -> dict[str, Any]: ...

    def uptime(self) -> float: ...

    def argv(self) -> list[str]: ...

    def executable(self) -> str: ...

    def exec_args(self) -> list[str]: ...

    def os_info(self) -> dict[str, Any]:
        """Return host OS facts; may raise when the host refuses to answer."""
        ...


class ProcessDataProvider:
    """Reads everything from the current process and host."""

    def __init__(self) -> None:
        self._process = psutil.Process()

    def environ(self) -> Mapping[str, str | None]:
        return dict(os.environ)

    def runtime_version(self) -> str:
        return f"{platform.python_implementation()} {platform.python_version()}"

    def platform_id(self) -> str:
        return sys.platform

    def architecture(self) -> str:
        return platform.machine() or _UNAVAILABLE

    def cwd(self) -> str:
        return os.getcwd()

    def process_ids(self) -> dict[str, int | str]:
        geteuid = getattr(os, "geteuid", None)
        getegid = getattr(os, "getegid", None)
        return {
            "pid": os.getpid(),
            "ppid": os.getppid(),
            "uid": geteuid() if geteuid else _UNAVAILABLE,
            "gid": getegid() if getegid else _UNAVAILABLE,
        }

    def memory_usage(self) -> dict[str, Any]:
        return self._process.memory_info()._asdict()

    def cpu_usage(self) -> dict[str, Any]:
        return self._process.cpu_times()._asdict()

    def uptime(self) -> float:
        return time.time() - self._process.create_time()

    def argv(self) -> list[str]:
        return list(sys.argv)

    def executable(self) -> str:
        return sys.executable

    def exec_args(self) -> list[str]:
        return interpreter_options(sys.orig_argv, sys.argv)

    def os_info(self) -> dict[str, Any]:
        memory = psutil.virtual_memory()
        return {
            "type": platform.system(),
            "release": platform.release(),
            "hostname": socket.gethostname(),
            "total_memory": memory.total,
            "free_memory": memory.available,
            "load_average": list(os.getloadavg()),
            "cpu_count": psutil.cpu_count(logical=True) or 0,
            "cpu_models": _cpu_models(sys.platform),
        }


def interpreter_options(orig_argv: list[str], argv: list[str]) -> list[str]:
    """Options given to the interpreter itself, such as ``-X dev`` or ``-O``.

    ``orig_argv`` ends with what became ``argv[1:]``; just before that sits
    the script path, ``-m <module>`` or ``-c <command>``, which is dropped.
    An empty ``argv[0]`` means an interactive session with no script.
    """
    head = list(orig_argv[1 : len(orig_argv) - max(len(argv) - 1, 0)])
    if argv and argv[0] == "":
        return head
    if len(head) >= 2 and head[-2] in ("-m", "-c"):
        return head[:-2]
    if head:
        return head[:-1]
    return head


def _cpu_models(platform_id: str) -> list[str]:
    """Model names of the logical CPUs; empty when the host won't say."""
    if platform_id.startswith("linux"):
        cpuinfo = Path("/proc/cpuinfo")
        if not cpuinfo.exists():
            return []
        return [
            line.split(":", 1)[1].strip()
            for line in cpuinfo.read_text(encoding="utf-8", errors="replace").splitlines()
            if line.startswith("model name") and ":" in line
        ]
    if platform_id == "darwin":
        try:
            result = subprocess.run(
                ["sysctl", "-n", "machdep.cpu.brand_string"],
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError):
            return []
        brand = result.stdout.strip()
        return [brand] if brand else []
    return []



@dataclass
class StaticDataProvider:
    """Provider backed by plain values, for tests and dry runs.

    Assigning an exception to ``os_error`` makes ``os_info`` raise it.
    """

    env: dict[str, str | None] = field(default_factory=dict)
    version: str = "CPython 3.12.0"
    platform_name: str = "linux"
    arch: str = "x86_64"
    working_dir: str = "/work"
    ids: dict[str, int | str] = field(
        default_factory=lambda: {"pid": 100, "ppid": 1, "uid": 1001, "gid": 1001}
    )
    memory: dict[str, Any] = field(default_factory=lambda: {"rss": 1024, "vms": 4096})
    cpu: dict[str, Any] = field(default_factory=lambda: {"user": 0.5, "system": 0.25})
    uptime_seconds: float = 1.5
    arguments: list[str] = field(default_factory=lambda: ["envscope"])
    executable_path: str = "/usr/bin/python3"
    interpreter_args: list[str] = field(default_factory=list)
    os_facts: dict[str, Any] = field(
        default_factory=lambda: {
            "type": "Linux",
            "release": "6.1.0",
            "hostname": "runner",
            "total_memory": 8 * 1024**3,
            "free_memory": 2 * 1024**3,
            "load_average": [0.5, 0.25, 0.125],
            "cpu_count": 2,
            "cpu_models": ["Test CPU @ 2.00GHz", "Test CPU @ 2.00GHz"],
        }
    )
    os_error: Exception | None = None

    def environ(self) -> Mapping[str, str | None]:
        return self.env

    def runtime_version(self) -> str:
        return self.version

    def platform_id(self) -> str:
        return self.platform_name

    def architecture(self) -> str:
        return self.arch

    def cwd(self) -> str:
        return self.working_dir

    def process_ids(self) -> dict[str, int | str]:
        return self.ids

    def memory_usage(self) -> dict[str, Any]:
        return self.memory

    def cpu_usage(self) -> dict[str, Any]:
        return self.cpu

    def uptime(self) -> float:
        return self.uptime_seconds

    def argv(self) -> list[str]:
        return self.arguments

    def executable(self) -> str:
        return self.executable_path

    def exec_args(self) -> list[str]:
        return self.interpreter_args

    def os_info(self) -> dict[str, Any]:
        if self.os_error is not None:
            raise self.os_error
        return self.os_facts
