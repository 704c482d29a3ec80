"""Output sinks: where report lines go.

A sink writes plain lines and brackets them into foldable sections.
``GitHubActionsSink`` uses the ``::group::`` workflow commands so the
Actions log viewer can collapse each section; ``ConsoleSink`` degrades to
a bold title above a plain block for local terminals.

Report lines and workflow markers go straight to the console's file:
no markup, wrapping, tab expansion or control-character stripping, so
values are printed exactly as found. Rich only styles the plain title.
"""

import logging
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)


def _write_line(console: Console, line: str) -> None:
    """Write *line* to the console's stream untouched."""
    console.file.write(line + "\n")


@runtime_checkable
class OutputSink(Protocol):
    """Log-style sink with foldable sections."""

    def info(self, line: str) -> None: ...

    def start_group(self, title: str) -> None: ...

    def end_group(self) -> None: ...


class GitHubActionsSink:
    """Writes GitHub Actions ``::group::`` / ``::endgroup::`` markers."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)

    def info(self, line: str) -> None:
        _write_line(self.console, line)

    def start_group(self, title: str) -> None:
        _write_line(self.console, f"::group::{title}")

    def end_group(self) -> None:
        _write_line(self.console, "::endgroup::")


class ConsoleSink:
    """Plain titled blocks for terminals without foldable regions."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)

    def info(self, line: str) -> None:
        _write_line(self.console, line)

    def start_group(self, title: str) -> None:
        self.console.print(Text(title, style="bold"))

    def end_group(self) -> None:
        pass


def running_in_github_actions(environ: Mapping[str, str]) -> bool:
    """Actions sets GITHUB_ACTIONS=true for every step."""
    return environ.get("GITHUB_ACTIONS", "").lower() == "true"


def select_sink(
    mode: str,
    environ: Mapping[str, str],
    console: Console | None = None,
) -> OutputSink:
    """Pick a sink for ``"github"``, ``"plain"`` or ``"auto"``."""
    if mode == "auto":
        mode = "github" if running_in_github_actions(environ) else "plain"
    logger.debug("Using %s output sink", mode)
    if mode == "github":
        return GitHubActionsSink(console)
    if mode == "plain":
        return ConsoleSink(console)
    raise ValueError(f"Unknown output mode: {mode!r}")
