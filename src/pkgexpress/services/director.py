"""QuoteDirector — sequences one interactive quote over a Terminal.

The director owns the conversation order: welcome, weight, width, height,
length, then either the total or the limit error.  Malformed numbers are
re-prompted in place for as long as the user keeps typing; limit failures
end the run immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING

import structlog

from pkgexpress.domain.lifecycle import AXIS_ORDER
from pkgexpress.output import messages
from pkgexpress.services.result import ServiceResult

if TYPE_CHECKING:
    from pkgexpress.output.terminal import Terminal
    from pkgexpress.services.quote import QuoteEngine

logger = logging.getLogger(__name__)


class QuoteDirector:
    """Drive a :class:`QuoteEngine` through one run."""

    def __init__(self, engine: QuoteEngine, terminal: Terminal) -> None:
        self._engine = engine
        self._terminal = terminal

    def construct_quote(self) -> ServiceResult:
        """Run the full conversation and return the outcome.

        Returns ``ok=True`` with the priced quote, or ``ok=False`` carrying
        the ``TOO_HEAVY``/``TOO_BIG`` error.  Both are normal terminations.

        Raises:
            EOFError: If input ends before the quote is finished.
        """
        self._engine.reset()
        quote = self._engine.quote
        with structlog.contextvars.bound_contextvars(quote_id=quote.quote_id):
            self._terminal.write_line(messages.WELCOME)

            result = self._collect("weight", self._engine.set_weight)
            if not result.ok:
                return self._report_error(result)

            for axis in AXIS_ORDER:
                self._collect(axis.value, partial(self._engine.set_dimension, axis))

            result = self._engine.finalize_dimensions()
            if not result.ok:
                return self._report_error(result)

            cost = self._engine.compute_cost()
            self._terminal.write_line(messages.format_total(cost), style="px.total")
            self._terminal.write_line(messages.THANK_YOU)
            logger.debug("Quote complete")
            return ServiceResult(
                ok=True,
                op="quote",
                data=quote.model_dump(),
                meta={"state": str(self._engine.state)},
            )

    def _collect(self, field: str, setter: Callable[[str], ServiceResult]) -> ServiceResult:
        """Prompt for *field* until the setter accepts or hard-fails."""
        attempts = 0
        while True:
            self._terminal.write_line(messages.prompt_for(field), style="px.prompt")
            attempts += 1
            result = setter(self._terminal.read_line())
            if not result.retryable:
                if attempts > 1:
                    logger.debug("%s accepted after %d attempts", field, attempts)
                return result
            self._terminal.write_line(messages.INVALID_INPUT, style="px.warning")

    def _report_error(self, result: ServiceResult) -> ServiceResult:
        assert result.error is not None
        self._terminal.write_line(result.error.message, style="px.error")
        return ServiceResult(
            ok=False,
            op="quote",
            data=self._engine.quote.model_dump(),
            error=result.error,
            meta={"state": str(self._engine.state)},
        )
