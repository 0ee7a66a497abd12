"""Config file I/O operations.

This module provides functions for loading and saving link checker configs
in TOML format with validation using Pydantic models. The options may live
at the top level of a file or in a nested table, such as the
``[output.linkcheck]`` table of a book's ``book.toml``.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from linkcheck.core.paths import get_config_path
from linkcheck.models.config import LinkCheckConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for config file errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the config content is invalid."""


def _select_table(data: dict[str, Any], table: str | None) -> dict[str, Any]:
    """Walk a dotted table path (e.g. ``output.linkcheck``).

    A missing table yields an empty dict so that all defaults apply.

    Raises:
        ConfigValidationError: If a path component is not a table.
    """
    if not table:
        return data

    current: Any = data
    for part in table.split("."):
        if not isinstance(current, dict):
            raise ConfigValidationError(f"`{table}` is not a table")
        if part not in current:
            logger.debug("Table %s not found, using defaults", table)
            return {}
        current = current[part]

    if not isinstance(current, dict):
        raise ConfigValidationError(f"`{table}` is not a table")
    return current


def loads_config(
    text: str,
    table: str | None = None,
    environ: dict[str, str] | None = None,
) -> LinkCheckConfig:
    """Parse and validate a config from TOML text.

    Args:
        text: TOML document.
        table: Optional dotted path of the table holding the options.
        environ: Variable lookup for header values. Defaults to ``os.environ``.

    Returns:
        Validated LinkCheckConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema or a
            header cannot be parsed.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e

    section = _select_table(data, table)

    try:
        return LinkCheckConfig.from_toml_dict(section, environ=environ)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def load_config(
    path: Path | None = None,
    table: str | None = None,
    environ: dict[str, str] | None = None,
) -> LinkCheckConfig:
    """Load and validate a config from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.
        table: Optional dotted path of the table holding the options.
        environ: Variable lookup for header values. Defaults to ``os.environ``.

    Returns:
        Validated LinkCheckConfig.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    logger.debug("Loading config from %s", config_path)
    return loads_config(text, table=table, environ=environ)


def _format_key(key: str) -> str:
    """Format a TOML key, quoting it when it is not a bare key."""
    line = tomli_w.dumps({key: 0})
    return line[: -len(" = 0\n")]


def _format_value(value: Any) -> str:
    """Format a TOML value; arrays are kept on a single line."""
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(item) for item in value) + "]"
    line = tomli_w.dumps({"v": value})
    return line[len("v = ") : -1]


def dumps_config(config: LinkCheckConfig) -> str:
    """Serialize a config to canonical TOML text.

    Scalars and arrays come first, one per line with arrays written inline,
    followed by each sub-table (``[http-headers]``) after a blank line.
    Header values are written in their literal, uninterpolated form.
    """
    data = config.to_toml_dict()
    lines: list[str] = []
    tables: list[tuple[str, dict[str, Any]]] = []

    for key, value in data.items():
        if isinstance(value, dict):
            tables.append((key, value))
        else:
            lines.append(f"{_format_key(key)} = {_format_value(value)}")

    for key, table in tables:
        lines.append("")
        lines.append(f"[{_format_key(key)}]")
        lines.extend(f"{_format_key(k)} = {_format_value(v)}" for k, v in table.items())

    return "\n".join(lines) + "\n"


def save_config(config: LinkCheckConfig, path: Path | None = None) -> Path:
    """Save a config to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.
    The temporary file is cleaned up on failure.

    Args:
        config: The LinkCheckConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(dumps_config(config).encode("utf-8"))
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    logger.debug("Saved config to %s", config_path)
    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a config file exists.

    Args:
        path: Path to check. If None, uses the default config path.

    Returns:
        True if the config file exists, False otherwise.
    """
    config_path = path or get_config_path()
    return config_path.exists()


def require_config(config_path: Path | None = None, table: str | None = None) -> LinkCheckConfig:
    """Load config or exit with helpful error message.

    This is a convenience wrapper around load_config() for CLI commands.

    Args:
        config_path: Optional custom config path.
        table: Optional dotted path of the table holding the options.

    Returns:
        Loaded and validated LinkCheckConfig.

    Raises:
        typer.Exit: If the config cannot be loaded.
    """
    import typer

    from linkcheck.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_config(path, table=table)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {path}")
        print_info("Run 'linkcheck config init' to create a default config.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e
