"""CLI Error Handler.

The single top-level failure boundary: whatever escapes a report stage
is printed to stderr behind a fixed prefix and the process exits 1, so
the CI step shows up as failed.

Supports human-readable output (default) and JSON for log scrapers.
"""

import json
import logging
import sys
from typing import NoReturn

from rich.console import Console
from rich.text import Text

from envscope.foundation.errors import EnvscopeError, ErrorCode

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error running action:"


def _wrap(error: EnvscopeError | Exception) -> EnvscopeError:
    """Wrap generic exceptions in EnvscopeError."""
    if isinstance(error, EnvscopeError):
        return error
    return EnvscopeError(
        code=ErrorCode.RUNTIME_STAGE_FAILED,
        context={"detail": f"{type(error).__name__}: {error}"},
        cause=error,
    )


def format_error_for_json(error: EnvscopeError | Exception) -> str:
    """Format an error as a JSON string."""
    wrapped = _wrap(error)
    error_dict = wrapped.to_dict()
    if wrapped.cause:
        error_dict["cause"] = str(wrapped.cause)
    return json.dumps(error_dict)


def handle_error(
    error: EnvscopeError | Exception,
    json_output: bool = False,
) -> NoReturn:
    """Report an error on stderr and exit.

    Args:
        error: The error to handle (EnvscopeError or generic Exception)
        json_output: If True, output JSON to stderr instead of text

    Raises:
        SystemExit: Always exits with code 1
    """
    wrapped = _wrap(error)
    logger.debug("Fatal error", exc_info=wrapped.cause or wrapped)

    if json_output:
        print(format_error_for_json(wrapped), file=sys.stderr)
        sys.exit(1)

    _print_human_error(wrapped)
    sys.exit(1)


def _print_human_error(error: EnvscopeError) -> None:
    """Print error in human-readable format."""
    console = Console(stderr=True, highlight=False, soft_wrap=True)

    line = Text()
    line.append(ERROR_PREFIX, style="bold red")
    line.append(f" {error.message} ")
    line.append(f"({error.error_id})", style="dim")
    console.print(line)
