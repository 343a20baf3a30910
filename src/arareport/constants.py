# topmark:header:start
#
#   project      : AraReport
#   file         : constants.py
#   file_relpath : src/arareport/constants.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""AraReport Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ARAREPORT_VERSION: str = get_version("arareport")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    ARAREPORT_VERSION = "0.0.0"

# Name used by single-file convenience constructors (`Source.inline()` etc.)
INLINE_SOURCE_NAME: str = "<inline>"

# Environment variables
LOG_LEVEL_ENV: str = "ARAREPORT_LOG_LEVEL"
FORCE_COLOR_ENV: str = "FORCE_COLOR"
NO_COLOR_ENV: str = "NO_COLOR"

# Configuration files
DEFAULT_TOML_CONFIG_NAME: str = "arareport.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "arareport"

# Rendering defaults
DEFAULT_CONTEXT_LINES: int = 1
DEFAULT_TAB_WIDTH: int = 2
