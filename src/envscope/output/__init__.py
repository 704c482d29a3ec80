"""Output sinks for rendered reports."""

from envscope.output.sinks import (
    ConsoleSink,
    GitHubActionsSink,
    OutputSink,
    running_in_github_actions,
    select_sink,
)

__all__ = [
    "ConsoleSink",
    "GitHubActionsSink",
    "OutputSink",
    "running_in_github_actions",
    "select_sink",
]
