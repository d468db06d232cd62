# topmark:header:start
#
#   project      : Copygen
#   file         : __init__.py
#   file_relpath : src/copygen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Copygen: runtime model, TOML and YAML loading, and logging setup."""

from __future__ import annotations

from copygen.config.io import discover_config, load_config, load_toml_dict, load_yaml_dict
from copygen.config.model import Config, ConfigError

__all__ = [
    "Config",
    "ConfigError",
    "discover_config",
    "load_config",
    "load_toml_dict",
    "load_yaml_dict",
]
