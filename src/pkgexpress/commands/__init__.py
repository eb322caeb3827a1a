"""Subcommand modules for pkgexpress.

Provides register_commands() which uses deferred imports to keep
``pkgexpress --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pkgexpress.commands.quote import quote

    cli.add_command(quote)
