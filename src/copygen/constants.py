# topmark:header:start
#
#   project      : Copygen
#   file         : constants.py
#   file_relpath : src/copygen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Copygen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

COPYGEN_VERSION: str = get_version("copygen")

# Project-local configuration file, looked up in the current working directory:
DEFAULT_CONFIG_NAME: str = ".copygen.toml"
# YAML alternatives, tried in this order after DEFAULT_CONFIG_NAME:
YAML_CONFIG_NAMES: tuple[str, ...] = (".copygen.yaml", ".copygen.yml")
PYPROJECT_TOML_NAME: str = "pyproject.toml"
# Table holding the configuration inside pyproject.toml (``[tool.copygen]``):
PYPROJECT_TOOL_SECTION: str = "copygen"

# Templates shorter than this are built for every known comment prefix up front.
WARM_CACHE_MAX_TEMPLATE_SIZE: int = 4096

# Suffix of the temporary file written next to a target during atomic replacement.
TEMP_FILE_SUFFIX: str = ".tmp"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "COPYGEN_LOG_LEVEL"
