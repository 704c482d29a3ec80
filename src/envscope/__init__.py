"""envscope - CI environment inspection.

Prints a job's environment variables grouped by prefix, alongside runner
and system information, as foldable sections in the CI log.
"""

__version__ = "0.1.0"

from envscope.foundation.errors import EnvscopeError, ErrorCode
from envscope.inspection.types import GroupedVariables, KeyValuePair
from envscope.orchestrator import run

__all__ = [
    "__version__",
    "EnvscopeError",
    "ErrorCode",
    "GroupedVariables",
    "KeyValuePair",
    "run",
]
