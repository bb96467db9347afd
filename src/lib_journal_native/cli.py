"""Click command line for sending and previewing journal entries.

Contents
--------
* :func:`cli` - command group (``info``, ``send``, ``preview``).
* :func:`summary_info` - metadata banner as a string.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

from typing import Any, Sequence

import click

from . import __init__conf__
from .adapters import JournalSocket, PayloadConsoleAdapter
from .application.use_cases import create_emit_event
from .config import DOTENV_ENV_VAR, enable_dotenv, env_bool, resolve_socket_path
from .domain import JournalError, LogEvent, LogLevel

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_NAMES = [level.severity for level in LogLevel]


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _parse_fields(_ctx: click.Context, _param: click.Parameter, values: Sequence[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        fields[key.strip()] = value
    return fields


def _event_options(func: Any) -> Any:
    func = click.option(
        "--field",
        "-f",
        "fields",
        multiple=True,
        callback=_parse_fields,
        metavar="KEY=VALUE",
        help="Additional journal field; repeatable.",
    )(func)
    func = click.option(
        "--identifier",
        "-t",
        default=__init__conf__.shell_command,
        show_default=True,
        help="SYSLOG_IDENTIFIER of the entry.",
    )(func)
    func = click.option(
        "--priority",
        "-p",
        type=click.Choice(_LEVEL_NAMES, case_sensitive=False),
        default="info",
        show_default=True,
        help="Severity of the entry.",
    )(func)
    return click.argument("message")(func)


def _build_event(message: str, priority: str, identifier: str, fields: dict[str, str]) -> LogEvent:
    return LogEvent(message=message, level=LogLevel.from_name(priority), channel=identifier, context=fields)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before resolving settings (default: ${DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Write structured entries to systemd-journald without native bindings."""
    if use_dotenv is None:
        use_dotenv = env_bool(DOTENV_ENV_VAR, False)
    if use_dotenv:
        enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""
    click.echo(summary_info(), nl=False)


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@_event_options
@click.option("--socket", "socket_path", default=None, help="Journal socket path (default: $JOURNAL_SOCKET or journald).")
def cli_send(message: str, priority: str, identifier: str, fields: dict[str, str], socket_path: str | None) -> None:
    """Send MESSAGE to the journal."""
    path = resolve_socket_path(socket_path)
    event = _build_event(message, priority, identifier, fields)
    with JournalSocket(path) as transport:
        try:
            size = create_emit_event(transport=transport)(event)
        except JournalError as exc:
            raise click.ClickException(str(exc)) from exc
    click.echo(f"sent {size} bytes to {path}")


@cli.command("preview", context_settings=CLICK_CONTEXT_SETTINGS)
@_event_options
@click.option("--no-color", is_flag=True, help="Render without colour.")
def cli_preview(message: str, priority: str, identifier: str, fields: dict[str, str], no_color: bool) -> None:
    """Show the fields MESSAGE would be sent as, without sending."""
    event = _build_event(message, priority, identifier, fields)
    try:
        PayloadConsoleAdapter(no_color=no_color).emit(event)
    except JournalError as exc:
        raise click.ClickException(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Examples
    --------
    >>> main(["--version"])
    0.1.0
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_:
        return exit_.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "main", "summary_info"]
