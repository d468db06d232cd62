# topmark:header:start
#
#   project      : Copygen
#   file         : __init__.py
#   file_relpath : src/copygen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Copygen: add a configured copyright header to source files.

Typical library use:

```python
from pathlib import Path

from copygen import Config, Processor
from copygen.rendering import make_reporter

config = Config(header="Copyright (c) Example Corp.\\nSPDX-License-Identifier: MIT")
Processor(config, Path("src"), make_reporter("human"), dry_run=True).process()
```
"""

from __future__ import annotations

from copygen.config import Config, ConfigError, load_config
from copygen.pipeline import CopygenError, Processor, ProcessSummary

__all__ = [
    "Config",
    "ConfigError",
    "CopygenError",
    "ProcessSummary",
    "Processor",
    "load_config",
]
