"""Command: run one interactive shipping quote."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from pkgexpress.commands._context import AppContext

logger = logging.getLogger(__name__)


@click.command()
@click.pass_obj
def quote(app: AppContext) -> None:
    """Ask for weight and dimensions, then print a shipping estimate."""
    from pkgexpress.services.director import QuoteDirector

    director = QuoteDirector(app.engine(), app.terminal())
    try:
        result = director.construct_quote()
    except EOFError as exc:
        logger.warning("Input ended before the quote was complete")
        raise click.Abort() from exc
    app.record(result)
