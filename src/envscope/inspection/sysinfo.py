"""Runner and system information reports.

Both reports are fixed, curated field lists. They are rendered as plain
sections and never go through prefix grouping.
"""

import json
import logging
from typing import Any

from envscope.inspection.providers import DataProvider
from envscope.inspection.types import KeyValuePair

logger = logging.getLogger(__name__)

RUNNER_TITLE = "Runner Information"
SYSTEM_TITLE = "System Information"
OS_ERROR_KEY = "OS Info Error"

_BYTES_PER_GB = 1024 * 1024 * 1024


def _pretty(value: Any) -> str:
    """Indented JSON for structured snapshots."""
    return json.dumps(value, indent=2, default=str)


def _compact(value: Any) -> str:
    """Single-line JSON for arrays."""
    return json.dumps(value, separators=(",", ":"), default=str)


def _gigabytes(num_bytes: float) -> str:
    return f"{num_bytes / _BYTES_PER_GB:.2f} GB"


def _is_windows(platform_id: str) -> bool:
    """True for the Windows family, where OS extension fields are skipped."""
    return platform_id == "win32"


def runner_info(provider: DataProvider) -> list[KeyValuePair]:
    """Interpreter version, platform, architecture and working directory."""
    return [
        KeyValuePair("Python version", provider.runtime_version()),
        KeyValuePair("Platform", provider.platform_id()),
        KeyValuePair("Architecture", provider.architecture()),
        KeyValuePair("Working Directory", provider.cwd()),
    ]


def _os_info(provider: DataProvider) -> list[KeyValuePair]:
    """Host OS fields. Raises whatever the provider raises."""
    facts = provider.os_info()
    models = facts.get("cpu_models") or []
    return [
        KeyValuePair("OS Type", str(facts["type"])),
        KeyValuePair("OS Release", str(facts["release"])),
        KeyValuePair("OS Hostname", str(facts["hostname"])),
        KeyValuePair("OS Total Memory", _gigabytes(facts["total_memory"])),
        KeyValuePair("OS Free Memory", _gigabytes(facts["free_memory"])),
        KeyValuePair("OS Load Average", _compact(facts["load_average"])),
        KeyValuePair("OS CPU Count", str(facts["cpu_count"])),
        KeyValuePair("OS CPU Model", models[0] if models and models[0] else "Unknown"),
    ]


def system_info(provider: DataProvider) -> list[KeyValuePair]:
    """Process identity and resource usage, plus OS facts off Windows.

    A failure while gathering the OS facts is reported inline as a single
    ``OS Info Error`` entry; every other field is still returned.
    """
    ids = provider.process_ids()
    pairs = [
        KeyValuePair("Process ID", str(ids.get("pid", "N/A"))),
        KeyValuePair("Parent Process ID", str(ids.get("ppid", "N/A"))),
        KeyValuePair("User ID", str(ids.get("uid", "N/A"))),
        KeyValuePair("Group ID", str(ids.get("gid", "N/A"))),
        KeyValuePair("Memory Usage", _pretty(provider.memory_usage())),
        KeyValuePair("CPU Usage", _pretty(provider.cpu_usage())),
        KeyValuePair("Uptime", f"{round(provider.uptime(), 3)} seconds"),
        KeyValuePair("Command Line Args", _compact(provider.argv())),
        KeyValuePair("Python Executable Path", provider.executable()),
        KeyValuePair("Python Execute Arguments", _compact(provider.exec_args())),
    ]

    if _is_windows(provider.platform_id()):
        return pairs

    try:
        pairs.extend(_os_info(provider))
    except Exception as e:
        logger.warning("Could not gather OS information: %s", e)
        pairs.append(KeyValuePair(OS_ERROR_KEY, f"{type(e).__name__}: {e}"))

    return pairs
