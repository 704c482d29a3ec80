"""Run the full report: runner info, grouped environment, system info.

Stages run in a fixed order with no retries. Any exception escapes to
the caller, which owns the single top-level failure boundary.
"""

import logging
from collections.abc import Mapping

from envscope.foundation.config import EnvscopeConfig
from envscope.inspection.collector import collect_environment
from envscope.inspection.grouping import group_variables
from envscope.inspection.providers import DataProvider
from envscope.inspection.render import print_grouped_variables, print_variables_to_screen
from envscope.inspection.sysinfo import RUNNER_TITLE, SYSTEM_TITLE, runner_info, system_info
from envscope.output.sinks import OutputSink

logger = logging.getLogger(__name__)


def get_input(name: str, environ: Mapping[str, str | None]) -> str:
    """Read an action input the way the Actions runner exposes it.

    ``with: { my name: x }`` arrives as ``INPUT_MY_NAME=x``.
    """
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return (environ.get(key) or "").strip()


def run(
    provider: DataProvider,
    sink: OutputSink,
    config: EnvscopeConfig | None = None,
    name: str | None = None,
) -> None:
    """Render every enabled section to *sink*.

    Args:
        provider: Source of environment and process metadata.
        sink: Destination for rendered lines.
        config: Settings; defaults apply when omitted.
        name: Optional greeting name, printed before the report.
    """
    config = config or EnvscopeConfig()

    if name and config.greeting:
        sink.info(f"Hello, {name}!")
        sink.info("")

    if config.show_runner:
        logger.debug("Rendering runner information")
        print_variables_to_screen(sink, RUNNER_TITLE, runner_info(provider))

    logger.debug("Rendering environment variables")
    grouped = group_variables(collect_environment(provider), config.delimiter)
    logger.debug(
        "Grouped %d variables: %d single, %d sections",
        len(grouped),
        len(grouped.singles),
        len(grouped.groups),
    )
    print_grouped_variables(sink, grouped)

    if config.show_system:
        logger.debug("Rendering system information")
        print_variables_to_screen(sink, SYSTEM_TITLE, system_info(provider))
