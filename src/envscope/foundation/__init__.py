"""Foundation domain - base errors, config and logging.

Everything else in envscope imports from here; nothing here imports
from the rest of the package.
"""

from envscope.foundation.config import EnvscopeConfig, load_config
from envscope.foundation.errors import ErrorCode, EnvscopeError, config_error
from envscope.foundation.logging import configure_logging

__all__ = [
    "EnvscopeConfig",
    "load_config",
    "ErrorCode",
    "EnvscopeError",
    "config_error",
    "configure_logging",
]
