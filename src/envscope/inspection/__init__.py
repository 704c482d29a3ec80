"""Inspection pipeline: collect, group, format.

Data flows one way: environment -> sorted pairs -> grouped pairs ->
formatted lines -> output sink.
"""

from envscope.inspection.collector import collect_environment
from envscope.inspection.grouping import DEFAULT_DELIMITER, group_variables, prefix_of
from envscope.inspection.providers import DataProvider, ProcessDataProvider, StaticDataProvider
from envscope.inspection.render import (
    format_variables,
    print_grouped_variables,
    print_variables_to_screen,
)
from envscope.inspection.sysinfo import (
    OS_ERROR_KEY,
    RUNNER_TITLE,
    SYSTEM_TITLE,
    runner_info,
    system_info,
)
from envscope.inspection.types import GroupedVariables, KeyValuePair

__all__ = [
    "collect_environment",
    "DEFAULT_DELIMITER",
    "group_variables",
    "prefix_of",
    "DataProvider",
    "ProcessDataProvider",
    "StaticDataProvider",
    "format_variables",
    "print_grouped_variables",
    "print_variables_to_screen",
    "OS_ERROR_KEY",
    "RUNNER_TITLE",
    "SYSTEM_TITLE",
    "runner_info",
    "system_info",
    "GroupedVariables",
    "KeyValuePair",
]
