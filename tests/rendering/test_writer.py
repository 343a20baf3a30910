# topmark:header:start
#
#   project      : AraReport
#   file         : test_writer.py
#   file_relpath : tests/rendering/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Tests for output sinks and the color decision."""

from __future__ import annotations

import io

import click
import pytest

from arareport.config.model import ColorChoice
from arareport.errors import ReportIOError
from arareport.rendering.color import resolve_color_choice
from arareport.rendering.colored_enum import style
from arareport.rendering.writer import StreamWriter, StringWriter, WriterLike

RED = style(fg="red")


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class _BrokenStream(io.StringIO):
    def write(self, s: str) -> int:
        raise OSError("disk full")


def test_explicit_choices_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_choice(ColorChoice.ALWAYS, io.StringIO()) is True

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_choice(ColorChoice.NEVER, _TtyStream()) is False


def test_auto_uses_the_stream_terminal_state() -> None:
    assert resolve_color_choice(ColorChoice.AUTO, _TtyStream()) is True
    assert resolve_color_choice(ColorChoice.AUTO, io.StringIO()) is False
    assert resolve_color_choice(ColorChoice.AUTO, None) is False


def test_auto_honors_force_color_and_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_choice(ColorChoice.AUTO, _TtyStream()) is False

    monkeypatch.setenv("FORCE_COLOR", "0")
    assert resolve_color_choice(ColorChoice.AUTO, _TtyStream()) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_choice(ColorChoice.AUTO, io.StringIO()) is True


def test_string_writer_styles_only_with_color() -> None:
    plain = StringWriter()
    colored = StringWriter(colors=ColorChoice.ALWAYS)

    for writer in (plain, colored):
        writer.write("a ")
        writer.write_styled("b", RED)

    assert plain.getvalue() == "a b"
    assert colored.getvalue() == "a " + click.style("b", fg="red")


def test_stream_writer_strips_styles_without_color() -> None:
    stream = io.StringIO()
    writer = StreamWriter(stream, colors=ColorChoice.NEVER)

    writer.write_styled("b", RED)
    writer.write(click.style("c", fg="green"))

    assert stream.getvalue() == "bc"


def test_stream_writer_keeps_styles_with_color() -> None:
    stream = io.StringIO()

    StreamWriter(stream, colors=ColorChoice.ALWAYS).write_styled("b", RED)

    assert stream.getvalue() == click.style("b", fg="red")


def test_stream_write_failure_is_wrapped() -> None:
    writer = StreamWriter(_BrokenStream(), colors=ColorChoice.NEVER)

    with pytest.raises(ReportIOError) as excinfo:
        writer.write("text")

    assert isinstance(excinfo.value.__cause__, OSError)


def test_writer_protocol() -> None:
    assert isinstance(StringWriter(), WriterLike)
    assert isinstance(StreamWriter(io.StringIO()), WriterLike)
    assert not isinstance(io.StringIO(), WriterLike)


def test_closed_stream_is_wrapped() -> None:
    stream = io.StringIO()
    stream.close()
    writer = StreamWriter(stream, colors=ColorChoice.NEVER)

    with pytest.raises(ReportIOError) as excinfo:
        writer.write("text")

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_binary_stream_receives_utf8() -> None:
    stream = io.BytesIO()
    writer = StreamWriter(stream, colors=ColorChoice.NEVER)

    writer.write("δ ")
    writer.write_styled("b", RED)
    writer.write(click.style("c", fg="green"))

    assert stream.getvalue() == "δ bc".encode()


def test_binary_stream_keeps_styles_with_color() -> None:
    stream = io.BytesIO()

    StreamWriter(stream, colors=ColorChoice.ALWAYS).write_styled("b", RED)

    assert stream.getvalue() == click.style("b", fg="red").encode()
