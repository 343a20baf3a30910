# topmark:header:start
#
#   project      : AraReport
#   file         : __init__.py
#   file_relpath : src/arareport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Configuration for AraReport rendering.

Modules:
    - `arareport.config.model`: option enums and the frozen `RenderConfig`.
    - `arareport.config.io`: TOML loading (``arareport.toml`` / ``[tool.arareport]``).
    - `arareport.config.logging`: TRACE-aware logging setup.
"""

from __future__ import annotations

from arareport.config.io import discover_config_file, load_render_config, load_toml_dict
from arareport.config.model import CharSet, ColorChoice, DisplayStyle, RenderConfig

__all__ = [
    "CharSet",
    "ColorChoice",
    "DisplayStyle",
    "RenderConfig",
    "discover_config_file",
    "load_render_config",
    "load_toml_dict",
]
