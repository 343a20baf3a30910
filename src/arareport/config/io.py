# topmark:header:start
#
#   project      : AraReport
#   file         : io.py
#   file_relpath : src/arareport/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Load rendering options from TOML configuration sources.

Supported sources:
    - ``arareport.toml``: options live at the top level of the document.
    - ``pyproject.toml``: options live under ``[tool.arareport]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from arareport.config.logging import get_logger
from arareport.config.model import RenderConfig
from arareport.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from arareport.config.logging import AraReportLogger

TomlTable = dict[str, Any]

logger: AraReportLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``arareport.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_render_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the table holding AraReport options within a parsed document.

    Args:
        path: The document's path; its name selects the layout.
        data: The parsed document.

    Returns:
        The options table, or None when a ``pyproject.toml`` has no
        ``[tool.arareport]`` section.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool: Any = data.get("tool")
        section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
        return cast("TomlTable", section) if isinstance(section, dict) else None
    return data


def load_render_config(path: Path) -> RenderConfig:
    """Load a `RenderConfig` from ``arareport.toml`` or ``pyproject.toml``.

    Missing sections and unreadable files yield the default configuration.

    Raises:
        ValueError: If the file holds an invalid option value.
    """
    table: TomlTable | None = extract_render_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
        return RenderConfig()
    logger.debug("Loading render config from %s", path)
    return RenderConfig.from_dict(table)


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file, walking up from ``start``.

    In each directory, ``arareport.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it holds a ``[tool.arareport]`` table.

    Args:
        start: Directory (or file) to start from.

    Returns:
        The configuration file path, or None.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / DEFAULT_TOML_CONFIG_NAME
        if candidate.is_file():
            logger.trace("Found %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if (
            pyproject.is_file()
            and extract_render_table(pyproject, load_toml_dict(pyproject)) is not None
        ):
            logger.trace("Found [tool.%s] in %s", PYPROJECT_TOOL_SECTION, pyproject)
            return pyproject
    return None
