"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Callable, Iterator

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from block_helpers import __init__conf__
from block_helpers import cli as cli_mod

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

DEMO_OUTPUT = (
    '<section class="card"><h2>Getting started</h2><ul data-done="2">'
    "<li>[x1] Define helper types</li>"
    "<li>[x2] Register them</li>"
    "<li>[ ] Render with Block Helpers</li>"
    "</ul></section>\n"
)


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    logger = logging.getLogger("block_helpers")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def run_cli(args: list[str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_info() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == "\n".join(__init__conf__.info_lines()) + "\n"


def test_cli_info_command_lists_metadata() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert "Info for block_helpers" in stdout
    assert "version" in stdout


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == __init__conf__.version


def test_cli_render_defaults_to_demo_template() -> None:
    exit_code, stdout, exception = run_cli(["--no-color", "render"])

    assert exception is None
    assert exit_code == 0
    assert strip_ansi(stdout) == DEMO_OUTPUT


def test_cli_render_writes_to_file(tmp_path: Path) -> None:
    target = tmp_path / "page.html"

    exit_code, stdout, _ = run_cli(["render", "block_helpers.demo:page", "--output", str(target)])

    assert exit_code == 0
    assert stdout == ""
    assert target.read_text(encoding="utf-8") == DEMO_OUTPUT


def test_cli_render_with_explicit_registry() -> None:
    exit_code, stdout, _ = run_cli(["--no-color", "render", "block_helpers.demo:page", "--registry", "block_helpers.demo:registry"])

    assert exit_code == 0
    assert strip_ansi(stdout) == DEMO_OUTPUT


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["render", "block_helpers.demo"], "MODULE:ATTR"),
        (["render", "block_helpers.missing_module:page"], "cannot import"),
        (["render", "block_helpers.demo:nothing"], "has no attribute"),
        (["render", "block_helpers.demo:registry"], "not callable"),
        (["render", "block_helpers.demo:page", "--registry", "block_helpers.demo:page"], "not a HelperRegistry"),
        (["helpers", "block_helpers.demo:Card"], "not a HelperRegistry"),
    ],
)
def test_cli_reports_bad_targets(args: list[str], message: str) -> None:
    exit_code, stdout, _ = run_cli(args)

    assert exit_code == 2
    assert message in stdout


def test_cli_helpers_lists_registry() -> None:
    exit_code, stdout, _ = run_cli(["--no-color", "helpers"])

    assert exit_code == 0
    plain = strip_ansi(stdout)
    for expected in ("card", "checklist", "item", "site_name", "transform", "ambient"):
        assert expected in plain


def test_cli_verbose_logs_invocations() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, ["--verbose", "--no-color", "render"])

    assert result.exit_code == 0
    assert isinstance(logging.getLogger("block_helpers").handlers[0], cli_mod.RichHandler)


def test_cli_traceback_option_sets_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    exit_code, _stdout, _exception = run_cli(["--traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_cli_render_propagates_template_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    import block_helpers.demo as demo

    def broken(view: object) -> None:
        raise RuntimeError("template failed")

    monkeypatch.setattr(demo, "broken", broken, raising=False)

    exit_code, _stdout, exception = run_cli(["render", "block_helpers.demo:broken"])

    assert exit_code != 0
    assert isinstance(exception, RuntimeError)
    assert str(exception) == "template failed"


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["--no-traceback", "info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--no-traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": False, "traceback_force_color": False}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for block_helpers" in captured.out
