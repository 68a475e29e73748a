"""Click command-line interface for the log store.

Purpose
-------
Offer a small CLI so packaging checks and operators can print the metadata
banner or exercise a store end to end: emit sample entries, show the
statistics and export a report.

Contents
--------
* :func:`cli` - Click group (``--version``, ``--use-dotenv``).
* :func:`info` / :func:`demo` - subcommands.
* :func:`summary_info` / :func:`statistics_table` - rendering helpers.
* :func:`main` - test-friendly entry point returning an exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .adapters import ReportExportError, RichConsoleSink
from .domain import LogComplexity, LogLevel, LogStatistics
from .runtime import build_store

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_DEMO_MESSAGES: tuple[tuple[LogLevel, tuple[str, ...]], ...] = (
    (LogLevel.WORKING, ("Starting demo run",)),
    (LogLevel.DEBUG, ("Resolved configuration", "history ok")),
    (LogLevel.INFO, ("Store ready",)),
    (LogLevel.WARN, ("Disk usage high", "92%")),
    (LogLevel.ERROR, ("Upload failed", "retrying")),
    (LogLevel.SUCCESS, ("Demo finished",)),
)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def statistics_table(statistics: LogStatistics, *, title: str | None = None) -> Table:
    """Build a Rich table with one row per level plus a total row."""

    table = Table(title=title)
    table.add_column("Level")
    table.add_column("Count", justify="right")
    table.add_column("%", justify="right")
    for level in LogLevel:
        table.add_row(f"{level.glyph} {level.report_label}", str(statistics.count(level)), statistics.percentage(level))
    table.add_row("Total", str(statistics.total), "")
    return table


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading LOG_* settings (env: {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Bounded log store utilities; prints the metadata banner without a subcommand."""

    wanted = use_dotenv if use_dotenv is not None else log_config.env_bool(log_config.DOTENV_ENV_VAR, False)
    if wanted:
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command(context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command(context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--history", type=click.IntRange(min=1), default=None, help="Maximum retained entries.")
@click.option(
    "--complexity",
    type=click.Choice([member.value for member in LogComplexity], case_sensitive=False),
    default=None,
    help="Rendering used for the console output.",
)
@click.option("--export/--no-export", "do_export", default=False, help="Write a report after the demo entries.")
@click.option(
    "--export-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Base directory for the report (a 'logs' folder is created inside).",
)
@click.option("--no-color", is_flag=True, help="Disable console styling.")
def demo(history: int | None, complexity: str | None, do_export: bool, export_dir: Path | None, no_color: bool) -> None:
    """Emit one entry per non-fatal level, show statistics and optionally export."""

    try:
        store_config = log_config.load_config(
            history_length=history,
            default_complexity=complexity,
            export_directory=export_dir,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    store = build_store(store_config, sink=RichConsoleSink(no_color=no_color))
    for level, messages in _DEMO_MESSAGES:
        store.log(*messages, level=level)

    console = Console(no_color=no_color, highlight=False)
    console.print(statistics_table(store.statistics(), title=f"{store_config.application_name} statistics"))

    if do_export:
        try:
            location = store.export()
        except ReportExportError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(str(location))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return an exit code instead of exiting.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_store, version ...
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "demo", "info", "main", "statistics_table", "summary_info"]
