# topmark:header:start
#
#   project      : Copygen
#   file         : model.py
#   file_relpath : src/copygen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration for Copygen.

The engine only needs two values: the raw header template and the ordered list of
exclusion patterns. Both are fixed for the duration of a run, so the model is a
frozen dataclass with tuple-typed collections.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from copygen.config.logging import get_logger
from copygen.pipeline.errors import CopygenError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from copygen.config.logging import CopygenLogger

logger: CopygenLogger = get_logger(__name__)

KEY_HEADER = "header"
KEY_EXCLUDE = "exclude"
# Capitalized spellings used by YAML configuration files.
KEY_ALIASES: dict[str, str] = {"Header": KEY_HEADER, "Exclude": KEY_EXCLUDE}
KNOWN_KEYS: frozenset[str] = frozenset({KEY_HEADER, KEY_EXCLUDE, *KEY_ALIASES})


class ConfigError(CopygenError):
    """Configuration is missing, unreadable, or malformed."""


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        header (str): Raw multi-line header template, without comment markers.
            An empty template turns the run into a no-op.
        exclude (tuple[str, ...]): Exclusion glob / directory patterns, in order.
        source (Path | None): File the configuration was read from, if any.
    """

    header: str = ""
    exclude: tuple[str, ...] = ()
    source: Path | None = field(default=None, compare=False)

    @classmethod
    def from_table(cls, table: Mapping[str, Any], source: Path | None = None) -> Config:
        """Build a Config from a parsed TOML table or YAML mapping.

        ``Header`` and ``Exclude`` are accepted as aliases of ``header`` and
        ``exclude``; the lowercase key wins when both are present.

        Args:
            table (Mapping[str, Any]): Mapping holding the ``header`` and ``exclude`` keys.
            source (Path | None): File the table was read from (for messages).

        Returns:
            Config: The frozen configuration.

        Raises:
            ConfigError: If a key has the wrong type.
        """
        where: str = str(source) if source else "<config>"

        for key in table:
            if key not in KNOWN_KEYS:
                logger.warning("%s: ignoring unknown configuration key '%s'", where, key)

        # A YAML key with no value loads as None and counts as missing.
        values: dict[str, Any] = {
            KEY_ALIASES[k]: v for k, v in table.items() if k in KEY_ALIASES and v is not None
        }
        values.update(
            (k, v) for k, v in table.items() if k in (KEY_HEADER, KEY_EXCLUDE) and v is not None
        )

        header: Any = values.get(KEY_HEADER, "")
        if not isinstance(header, str):
            raise ConfigError(f"{where}: '{KEY_HEADER}' must be a string")

        exclude: Any = values.get(KEY_EXCLUDE, [])
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            raise ConfigError(f"{where}: '{KEY_EXCLUDE}' must be an array of strings")

        # tomlkit returns String/Array wrappers; store plain builtins.
        return cls(
            header=str(header),
            exclude=tuple(str(p) for p in exclude),
            source=source,
        )
