"""Render key/value sections as aligned, foldable text blocks.

Each row is ``<key padded to the widest key> = <value>``. Multi-line
values (pretty-printed JSON, certificates) keep their shape: continuation
lines are indented to start under the first line's value column.
"""

from collections.abc import Sequence

from envscope.inspection.types import GroupedVariables, KeyValuePair
from envscope.output.sinks import OutputSink

SEPARATOR = " = "


def format_variables(pairs: Sequence[KeyValuePair]) -> list[str]:
    """Format *pairs* as aligned rows, without the section terminator.

    Returns an empty list for an empty sequence.
    """
    if not pairs:
        return []

    width = max(len(pair.key) for pair in pairs)
    indent = " " * (width + len(SEPARATOR))

    lines: list[str] = []
    for pair in pairs:
        first, *rest = pair.value.split("\n")
        lines.append(f"{pair.key.ljust(width)}{SEPARATOR}{first}")
        lines.extend(indent + line for line in rest)
    return lines


def print_variables_to_screen(
    sink: OutputSink,
    title: str,
    pairs: Sequence[KeyValuePair],
) -> None:
    """Write one foldable section; empty sections are skipped entirely."""
    if not pairs:
        return

    sink.start_group(title)
    for line in format_variables(pairs):
        sink.info(line)
    sink.info("")
    sink.end_group()


def print_grouped_variables(sink: OutputSink, grouped: GroupedVariables) -> None:
    """Write the single-variables section, then one section per prefix."""
    print_variables_to_screen(sink, f"Variables ({len(grouped.singles)})", grouped.singles)
    for prefix, members in grouped.groups.items():
        print_variables_to_screen(sink, f"{prefix} Variables ({len(members)})", members)
