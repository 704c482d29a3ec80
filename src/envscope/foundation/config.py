"""envscope configuration management.

Settings come from built-in defaults, an optional YAML file passed with
``--config``, ``ENVSCOPE_*`` environment variables, and finally CLI flags.

Priority (highest to lowest):
1. Explicit overrides (CLI flags)
2. Environment variables (ENVSCOPE_*)
3. Explicit config file path, if provided
4. Built-in defaults

No config file is searched for implicitly: the tool reads nothing from
disk unless asked to.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from envscope.foundation.errors import EnvscopeError, ErrorCode, config_error

logger = logging.getLogger(__name__)

ENV_PREFIX = "ENVSCOPE_"

OUTPUT_MODES = ("auto", "github", "plain")


@dataclass(frozen=True, slots=True)
class EnvscopeConfig:
    """Root configuration for envscope."""

    output: str = "auto"
    """Output sink: "auto" picks GitHub Actions groups when running in Actions."""

    delimiter: str = "_"
    """Single character splitting a variable name into prefix and rest."""

    show_runner: bool = True
    """Render the Runner Information section."""

    show_system: bool = True
    """Render the System Information section."""

    greeting: bool = True
    """Print a greeting line when a name input is supplied."""


def _coerce(value: str) -> bool | str:
    """Coerce an environment string the same way for every setting."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    return value


def _apply_env_overrides(config_dict: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Apply ENVSCOPE_<FIELD> environment overrides.

    Examples:
        ENVSCOPE_OUTPUT=plain
        ENVSCOPE_SHOW_SYSTEM=false
    """
    known = {f.name for f in fields(EnvscopeConfig)}

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):].lower()
        if name not in known:
            continue
        # String settings are taken verbatim
        config_dict[name] = value if name in ("output", "delimiter") else _coerce(value)
        logger.debug("Config override from %s", key)

    return config_dict


def _load_file(path: Path) -> dict[str, Any]:
    """Read a YAML config file into a dict."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise EnvscopeError(
            code=ErrorCode.CONFIG_UNREADABLE,
            context={"path": str(path), "detail": str(e)},
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise EnvscopeError(
            code=ErrorCode.CONFIG_UNREADABLE,
            context={"path": str(path), "detail": "top level must be a mapping"},
        )
    return data


def _dict_to_config(data: dict[str, Any]) -> EnvscopeConfig:
    """Validate a merged dict and convert it to EnvscopeConfig."""
    known = {f.name for f in fields(EnvscopeConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise config_error(unknown[0], "unknown setting")

    output = data["output"]
    if output not in OUTPUT_MODES:
        raise config_error("output", f"expected one of {', '.join(OUTPUT_MODES)}, got {output!r}")

    delimiter = data["delimiter"]
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise config_error("delimiter", f"expected a single character, got {delimiter!r}")

    for name in ("show_runner", "show_system", "greeting"):
        if not isinstance(data[name], bool):
            raise config_error(name, f"expected true or false, got {data[name]!r}")

    return EnvscopeConfig(**data)


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> EnvscopeConfig:
    """Load configuration with defaults, file, env and flag overrides.

    Args:
        path: Optional explicit YAML config file path.
        overrides: Values from CLI flags. ``None`` entries are ignored.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        Merged, validated EnvscopeConfig instance.

    Raises:
        EnvscopeError: If the file cannot be read or a value is invalid.
    """
    config_dict: dict[str, Any] = asdict(EnvscopeConfig())

    if path is not None:
        config_dict.update(_load_file(Path(path)))
        logger.debug("Loaded config file %s", path)

    config_dict = _apply_env_overrides(config_dict, os.environ if environ is None else environ)

    for key, value in (overrides or {}).items():
        if value is not None:
            config_dict[key] = value

    return _dict_to_config(config_dict)
