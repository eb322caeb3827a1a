"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  Configures logging and builds the terminal and
engine each quote run uses.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pkgexpress.config.settings import PkgExpressSettings
    from pkgexpress.output.terminal import ConsoleTerminal
    from pkgexpress.services.quote import QuoteEngine
    from pkgexpress.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PkgExpressSettings) -> None:
        self.settings = settings

        from pkgexpress.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def terminal(self) -> ConsoleTerminal:
        """A stdin/stdout terminal; styled only on a real TTY."""
        from pkgexpress.output.terminal import ConsoleTerminal

        color = not self.settings.no_color and sys.stdout.isatty()
        return ConsoleTerminal(color=color)

    def engine(self) -> QuoteEngine:
        """A fresh engine with the fixed Package Express limits."""
        from pkgexpress.services.quote import QuoteEngine

        return QuoteEngine()

    def record(self, result: ServiceResult) -> None:
        """Log the outcome of a run.

        Limit failures are a normal ending: logged at INFO, exit code 0.
        The conversation itself has already been written to stdout.
        """
        log = structlog.get_logger("pkgexpress.quote")
        if result.ok:
            log.info("quote.priced", **result.data)
        else:
            assert result.error is not None
            log.info("quote.refused", code=result.error.code, **result.data)
