"""Tests for the error system."""

from envscope.foundation.errors import EnvscopeError, ErrorCode, config_error


class TestErrorCode:
    """Tests for ErrorCode."""

    def test_categories(self) -> None:
        """Category follows the thousands digit."""
        assert ErrorCode.CONFIG_INVALID.category == "config"
        assert ErrorCode.RUNTIME_STAGE_FAILED.category == "runtime"


class TestEnvscopeError:
    """Tests for EnvscopeError."""

    def test_message_formatting(self) -> None:
        """Context fills the message template."""
        err = config_error("output", "bad value")
        assert err.message == "Invalid configuration for 'output': bad value"
        assert str(err) == "[ES-5001] Invalid configuration for 'output': bad value"

    def test_missing_context_falls_back_to_template(self) -> None:
        """Missing context keys leave the raw template."""
        err = EnvscopeError(code=ErrorCode.CONFIG_INVALID)
        assert err.message == "Invalid configuration for '{key}': {detail}"

    def test_to_dict(self) -> None:
        """Serialized form carries id, code and context."""
        err = EnvscopeError(code=ErrorCode.RUNTIME_STAGE_FAILED, context={"detail": "boom"})
        data = err.to_dict()

        assert data["error_id"] == "ES-6001"
        assert data["code"] == 6001
        assert data["category"] == "runtime"
        assert data["message"] == "boom"
        assert data["context"] == {"detail": "boom"}

    def test_cause_kept(self) -> None:
        """The underlying exception is available for debugging."""
        cause = ValueError("inner")
        err = config_error("delimiter", "bad", cause=cause)
        assert err.cause is cause
