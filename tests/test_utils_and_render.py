from __future__ import annotations

import pytest
from rich.console import Console

from caniprefix.exceptions import CaniuseError, DatabaseFileError, MalformedInputError
from caniprefix.render import render_results
from caniprefix.util import log as log_utils
from caniprefix.util import text as text_utils


def _render_text(*args: object, **kwargs: object) -> str:
    console = Console(record=True, width=100)
    console.print(render_results(*args, **kwargs))  # type: ignore[arg-type]
    return console.export_text()


def test_text_utils() -> None:
    assert text_utils.normalize_whitespace(" a\n  b ") == "a b"
    assert text_utils.split_list(" chrome ,, firefox,") == ["chrome", "firefox"]
    assert text_utils.split_list("") == []


def test_debug_flag(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("CANIPREFIX_DEBUG", "1")
    assert log_utils.debug_enabled() is True
    with caplog.at_level("DEBUG", logger="caniprefix"):
        log_utils.debug_log("loaded %s", "db")
    assert "loaded db" in caplog.text

    caplog.clear()
    monkeypatch.setenv("CANIPREFIX_DEBUG", "0")
    assert log_utils.debug_enabled() is False
    with caplog.at_level("DEBUG", logger="caniprefix"):
        log_utils.debug_log("not logged")
    assert caplog.text == ""


def test_exception_messages() -> None:
    assert "Unable to decode" in str(MalformedInputError())
    assert "JSONDecodeError" in str(MalformedInputError(cause="JSONDecodeError"))
    error = DatabaseFileError("/tmp/data.json", cause="FileNotFoundError")
    assert error.path == "/tmp/data.json"
    assert "/tmp/data.json" in str(error)
    assert "FileNotFoundError" in str(error)
    assert isinstance(error, CaniuseError)


def test_render_results() -> None:
    output = _render_text(
        [("transform", ["-webkit-", "-ms-"]), ("hyphens", []), ("nope", None)],
        era="e-2",
    )
    assert "transform: -webkit- -ms-" in output
    assert "hyphens: no prefix required" in output
    assert "nope: not resolvable" in output
    assert "era e-2" in output


def test_render_expanded() -> None:
    output = _render_text(
        [("transform", ["-webkit-transform", "transform"]), ("nope", None)],
        expanded=True,
    )
    assert "-webkit-transform;" in output
    assert "transform;" in output
    assert "nope: not resolvable" in output
