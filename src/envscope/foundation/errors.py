"""envscope Error System.

Provides structured error handling with:
- Numeric error codes for programmatic handling
- User-friendly messages
- Context for debugging
"""


from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes organized by category.

    Format: XYYY where X = category, YYY = specific error

    Categories:
        5xxx - Configuration errors
        6xxx - Runtime errors
    """

    # 5xxx - Configuration Errors
    CONFIG_INVALID = 5001
    CONFIG_UNREADABLE = 5002

    # 6xxx - Runtime Errors
    RUNTIME_STAGE_FAILED = 6001

    @property
    def category(self) -> str:
        """Get the error category name."""
        prefix = self.value // 1000
        return {
            5: "config",
            6: "runtime",
        }.get(prefix, "unknown")


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CONFIG_INVALID: "Invalid configuration for '{key}': {detail}",
    ErrorCode.CONFIG_UNREADABLE: "Cannot read configuration file '{path}': {detail}",
    ErrorCode.RUNTIME_STAGE_FAILED: "{detail}",
}


class EnvscopeError(Exception):
    """Base error type for all envscope errors.

    Example:
        >>> err = EnvscopeError(
        ...     code=ErrorCode.CONFIG_INVALID,
        ...     context={"key": "output", "detail": "expected auto, github or plain"},
        ... )
        >>> print(err)
        [ES-5001] Invalid configuration for 'output': expected auto, github or plain
    """

    def __init__(
        self,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.context = context or {}
        self.cause = cause
        super().__init__(str(self))

    @property
    def message(self) -> str:
        """Get the formatted user-friendly message."""
        template = ERROR_MESSAGES.get(self.code, "An error occurred: {detail}")
        try:
            return template.format(**self.context)
        except KeyError:
            return template

    @property
    def category(self) -> str:
        """Get the error category."""
        return self.code.category

    @property
    def error_id(self) -> str:
        """Get the error ID string (e.g., 'ES-5001')."""
        return f"ES-{self.code.value}"

    def __str__(self) -> str:
        return f"[{self.error_id}] {self.message}"

    def __repr__(self) -> str:
        return f"EnvscopeError(code={self.code!r}, context={self.context!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for logging/JSON output."""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category,
            "message": self.message,
            "context": self.context,
        }


def config_error(key: str, detail: str, cause: Exception | None = None) -> EnvscopeError:
    """Create a CONFIG_INVALID error."""
    return EnvscopeError(
        code=ErrorCode.CONFIG_INVALID,
        context={"key": key, "detail": detail},
        cause=cause,
    )
