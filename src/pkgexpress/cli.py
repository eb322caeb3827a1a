"""Root CLI group for pkgexpress with global flags and command registration."""

from __future__ import annotations

import click

from pkgexpress import __version__
from pkgexpress.commands import register_commands
from pkgexpress.commands._context import AppContext
from pkgexpress.config.settings import PkgExpressSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pkgexpress")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Never style terminal output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    no_color: bool,
) -> None:
    """pkgexpress — Package Express shipping quotes.

    Runs the ``quote`` conversation when no command is given.
    """
    settings = PkgExpressSettings.from_cli(
        verbose=verbose,
        log_json=log_json,
        no_color=no_color,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from pkgexpress.commands.quote import quote

        ctx.invoke(quote)


register_commands(cli)


def main() -> None:
    cli()
