"""Click command group exposing the block helper runtime on the command line.

Purpose
-------
Let authors render a template callable or inspect a helper registry without
writing a host application.

Contents
--------
* :func:`cli` – root group with global traceback, dotenv, colour and verbosity
  options.
* ``info`` / ``helpers`` / ``render`` subcommands.
* :func:`main` – entry point delegating to ``lib_cli_exit_tools.run_cli``.

System Role
-----------
Presentation layer. Everything here composes the public API
(:class:`RenderContext`, :class:`HelperRegistry`, the sink adapters); no
rendering policy lives in this module.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __init__conf__
from . import config as bh_config
from .adapters import RichConsoleSink, StreamSink
from .context import RenderContext
from .domain.traits import HelperTraits
from .registry import HelperRegistry

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
DEFAULT_TEMPLATE = "block_helpers.demo:page"


def load_target(spec: str, default_attr: str) -> Any:
    """Import ``module[:attr]`` and return the attribute.

    Raises
    ------
    click.BadParameter
        When the module or attribute cannot be found.
    """

    module_name, _, attr = spec.partition(":")
    attr = attr or default_attr
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import module {module_name!r}: {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise click.BadParameter(f"module {module_name!r} has no attribute {attr!r}") from exc


def _load_registry(spec: str) -> HelperRegistry:
    registry = load_target(spec, "registry")
    if not isinstance(registry, HelperRegistry):
        raise click.BadParameter(f"{spec!r} is not a HelperRegistry")
    return registry


def _echo(text: str) -> None:
    click.echo(text, nl=False)


def _configure_logging(verbose: bool, console: Console) -> None:
    if not verbose:
        return
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    root = logging.getLogger("block_helpers")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (overrides {bh_config.DOTENV_ENV_VAR}).",
)
@click.option("--force-color/--no-color", "force_color", default=None, help="Force or disable colour output.")
@click.option("--verbose", "-v", is_flag=True, help="Log helper invocations to stderr.")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None, force_color: bool | None, verbose: bool) -> None:
    """Render templates built from block helpers."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    should_load = bh_config.env_bool(bh_config.DOTENV_ENV_VAR) if use_dotenv is None else use_dotenv
    if should_load:
        bh_config.enable_dotenv()

    if force_color is None:
        settings = bh_config.console_settings()
    else:
        settings = bh_config.console_settings(force_color=force_color, no_color=not force_color)
    ctx.obj = settings
    _configure_logging(verbose, Console(stderr=True, no_color=settings.no_color))

    if ctx.invoked_subcommand is None:
        __init__conf__.print_info(writer=_echo)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    __init__conf__.print_info(writer=_echo)


@cli.command("helpers", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("registry_spec", metavar="MODULE[:ATTR]", default="block_helpers.demo")
@click.pass_obj
def cli_helpers(settings: bh_config.ConsoleSettings, registry_spec: str) -> None:
    """List the helpers registered in MODULE[:ATTR] (ATTR defaults to ``registry``)."""

    registry = _load_registry(registry_spec)
    table = Table(title=f"Helpers in {registry_spec}")
    table.add_column("name")
    table.add_column("kind")
    table.add_column("display")
    table.add_column("renders")
    table.add_column("nested")

    for name, helper_type in registry.block_helpers().items():
        traits = HelperTraits.of(helper_type)
        table.add_row(
            name,
            "block",
            traits.display_mode.value,
            "yes" if traits.renders else "no",
            ", ".join(helper_type.nested_helpers()) or "-",
        )
    for name in registry.ambient_helpers():
        table.add_row(name, "ambient", "-", "-", "-")

    console = Console(force_terminal=settings.force_color or None, no_color=settings.no_color)
    console.print(table)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("template_spec", metavar="MODULE:ATTR", default=DEFAULT_TEMPLATE)
@click.option("--registry", "registry_spec", metavar="MODULE[:ATTR]", help="Registry to use (defaults to the template module's ``registry``).")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write the rendered text to a file instead of the console.")
@click.option("--style", default=None, help="Rich style applied to console output.")
@click.pass_obj
def cli_render(
    settings: bh_config.ConsoleSettings,
    template_spec: str,
    registry_spec: str | None,
    output: Path | None,
    style: str | None,
) -> None:
    """Render the template callable MODULE:ATTR."""

    if ":" not in template_spec:
        raise click.BadParameter("template must be given as MODULE:ATTR", param_hint="MODULE:ATTR")
    template = load_target(template_spec, "")
    if not callable(template):
        raise click.BadParameter(f"{template_spec!r} is not callable", param_hint="MODULE:ATTR")
    registry = _load_registry(registry_spec or template_spec.partition(":")[0])

    if output is not None:
        with output.open("w", encoding="utf-8") as handle:
            template(RenderContext(registry, sink=StreamSink(handle)))
        return

    sink = RichConsoleSink(force_color=settings.force_color, no_color=settings.no_color, style=style)
    template(RenderContext(registry, sink=sink))


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "load_target", "main"]
