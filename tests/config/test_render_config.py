# topmark:header:start
#
#   project      : AraReport
#   file         : test_render_config.py
#   file_relpath : tests/config/test_render_config.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Tests for option parsing, TOML loading, and config discovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from arareport.config import (
    CharSet,
    ColorChoice,
    DisplayStyle,
    RenderConfig,
    discover_config_file,
    load_render_config,
    load_toml_dict,
)
from arareport.config.logging import TRACE_LEVEL, resolve_env_log_level, setup_logging
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    ("raw", "expected"),
    [
        ("always", ColorChoice.ALWAYS),
        ("ALWAYS", ColorChoice.ALWAYS),
        ("force", ColorChoice.ALWAYS),
        ("off", ColorChoice.NEVER),
        ("auto", ColorChoice.AUTO),
        ("bogus", None),
    ],
)
def test_color_choice_parse(raw: str, expected: ColorChoice | None) -> None:
    assert ColorChoice.parse(raw) is expected


def test_from_dict_reads_tokens_and_aliases() -> None:
    config = RenderConfig.from_dict(
        {"colors": "never", "charset": "utf-8", "style": "short", "context_lines": 2}
    )

    assert config == RenderConfig(
        colors=ColorChoice.NEVER,
        charset=CharSet.UNICODE,
        style=DisplayStyle.COMPACT,
        context_lines=2,
    )


@parametrize(
    "table",
    [
        {"colors": "sometimes"},
        {"context_lines": -1},
        {"tab_width": 0},
        {"tab_width": True},
        {"style": 3},
    ],
)
def test_from_dict_rejects_invalid_values(table: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        RenderConfig.from_dict(table)


def test_invalid_value_message_lists_choices() -> None:
    with pytest.raises(ValueError, match="expected one of: ascii, unicode"):
        RenderConfig.from_dict({"charset": "ebcdic"})


def test_options_carry_descriptions() -> None:
    assert all(member.description for member in (*ColorChoice, *CharSet, *DisplayStyle))
    assert str(DisplayStyle.COMPACT) == "compact"


def test_from_dict_ignores_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        config = RenderConfig.from_dict({"colour": "never"})

    assert config == RenderConfig()
    assert "Ignoring unknown render option" in caplog.text


def test_to_dict_round_trip() -> None:
    config = RenderConfig(charset=CharSet.UNICODE, tab_width=4)

    assert RenderConfig.from_dict(config.to_dict()) == config


def test_load_from_arareport_toml(tmp_path: Path) -> None:
    path: Path = tmp_path / "arareport.toml"
    path.write_text('colors = "never"\nstyle = "comfortable"\n', encoding="utf-8")

    config = load_render_config(path)

    assert config.colors is ColorChoice.NEVER
    assert config.style is DisplayStyle.COMFORTABLE


def test_load_from_pyproject_section(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.arareport]\ncharset = "unicode"\ntab_width = 4\n',
        encoding="utf-8",
    )

    config = load_render_config(path)

    assert config.charset is CharSet.UNICODE
    assert config.tab_width == 4


def test_pyproject_without_section_yields_defaults(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert load_render_config(path) == RenderConfig()


def test_invalid_toml_is_logged_and_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path: Path = tmp_path / "arareport.toml"
    path.write_text("colors = \n", encoding="utf-8")

    assert load_toml_dict(path) == {}
    assert "Error decoding TOML" in caplog.text


def test_discover_prefers_arareport_toml(tmp_path: Path) -> None:
    nested: Path = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    (tmp_path / "pyproject.toml").write_text("[tool.arareport]\n", encoding="utf-8")

    assert discover_config_file(nested) == (tmp_path / "pyproject.toml").resolve()

    (tmp_path / "src" / "arareport.toml").write_text("", encoding="utf-8")

    assert discover_config_file(nested) == (tmp_path / "src" / "arareport.toml").resolve()


def test_discover_skips_pyproject_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    found = discover_config_file(tmp_path)

    assert found is None or found.parent != tmp_path.resolve()


@parametrize(
    ("raw", "expected"),
    [("TRACE", TRACE_LEVEL), ("debug", logging.DEBUG), ("15", 15), ("nonsense", None)],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv("ARAREPORT_LOG_LEVEL", raw)

    assert resolve_env_log_level() == expected


def test_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_honors_notset_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARAREPORT_LOG_LEVEL", "0")
    try:
        setup_logging()
        assert logging.getLogger().level == logging.NOTSET
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_setup_logging_defaults_to_critical() -> None:
    try:
        setup_logging()
        assert logging.getLogger().level == logging.CRITICAL
    finally:
        setup_logging(level=TRACE_LEVEL)
