# topmark:header:start
#
#   project      : Copygen
#   file         : io.py
#   file_relpath : src/copygen/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate and load Copygen configuration from TOML or YAML.

Configuration sources, in order of precedence:

1. an explicit file (``--config FILE``): a Copygen TOML or YAML file with top-level
   keys, or a ``pyproject.toml`` with a ``[tool.copygen]`` table;
2. ``.copygen.toml`` in the working directory;
3. ``.copygen.yaml`` or ``.copygen.yml`` in the working directory;
4. the ``[tool.copygen]`` table of ``pyproject.toml`` in the working directory.

TOML is parsed with `tomlkit` and unwrapped into plain Python values before it
reaches the model. YAML is parsed with PyYAML's ``safe_load``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
import yaml
from tomlkit.exceptions import ParseError as TomlkitParseError

from copygen.config.logging import get_logger
from copygen.config.model import Config, ConfigError
from copygen.constants import (
    DEFAULT_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    YAML_CONFIG_NAMES,
)

if TYPE_CHECKING:
    from copygen.config.logging import CopygenLogger

logger: CopygenLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    data: TomlTable = doc.unwrap()
    logger.debug("Loaded TOML from %s: %d top-level key(s)", path, len(data))
    return data


def load_yaml_dict(path: Path) -> TomlTable:
    """Load and parse a YAML configuration file from the filesystem.

    An empty document loads as an empty mapping.

    Args:
        path (Path): Path to a YAML document.

    Returns:
        TomlTable: The parsed top-level mapping.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does not hold
            a mapping at the top level.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    logger.debug("Loaded YAML from %s: %d top-level key(s)", path, len(data))
    return data


def is_yaml_path(path: Path) -> bool:
    """Return True when ``path`` names a YAML document (``.yaml`` or ``.yml``)."""
    return path.suffix.lower() in (".yaml", ".yml")


def get_tool_table(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.copygen]`` table of a pyproject document, if present.

    Args:
        data (TomlTable): Parsed ``pyproject.toml``.

    Returns:
        TomlTable | None: The table, or None when missing or not a table.
    """
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = tool.get(PYPROJECT_TOOL_SECTION)
    return table if isinstance(table, dict) else None


def discover_config(cwd: Path | None = None) -> Path | None:
    """Find the configuration file for a run started in ``cwd``.

    Args:
        cwd (Path | None): Directory to look in (defaults to the working directory).

    Returns:
        Path | None: ``.copygen.toml`` when present, else ``.copygen.yaml`` or
            ``.copygen.yml``, else ``pyproject.toml`` when it holds a
            ``[tool.copygen]`` table, else None.
    """
    base: Path = cwd or Path.cwd()

    candidate: Path = base / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return candidate

    for name in YAML_CONFIG_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate

    pyproject: Path = base / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        try:
            if get_tool_table(load_toml_dict(pyproject)) is not None:
                return pyproject
        except ConfigError as exc:
            logger.warning("Ignoring unreadable %s: %s", pyproject, exc)

    logger.debug("No configuration found in %s", base)
    return None


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Load the configuration for a run.

    Args:
        path (Path | None): Explicit configuration file; discovered when None.
        cwd (Path | None): Directory used for discovery.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If no configuration is found, or it cannot be read or validated.
    """
    if path is None:
        path = discover_config(cwd)
        if path is None:
            raise ConfigError(
                f"no configuration found: create {DEFAULT_CONFIG_NAME} or "
                f"{YAML_CONFIG_NAMES[0]}, or add a "
                f"[tool.{PYPROJECT_TOOL_SECTION}] table to {PYPROJECT_TOML_NAME}"
            )

    if is_yaml_path(path):
        return _build_config(load_yaml_dict(path), path)

    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        table: TomlTable | None = get_tool_table(data)
        if table is None:
            raise ConfigError(f"{path}: missing [tool.{PYPROJECT_TOOL_SECTION}] table")
        data = table
    return _build_config(data, path)


def _build_config(data: TomlTable, path: Path) -> Config:
    config: Config = Config.from_table(data, source=path)
    logger.debug(
        "Using configuration from %s: %d header char(s), %d exclude pattern(s)",
        path,
        len(config.header),
        len(config.exclude),
    )
    return config
