"""QuoteEngine — validates package measurements and prices the quote.

The engine owns exactly one in-flight :class:`Quote` and exposes ordered
setters.  Each setter returns a :class:`ServiceResult`:

* malformed text   -> ``INVALID_NUMBER`` (retryable, no state change)
* weight over max  -> ``TOO_HEAVY`` (terminal, state ``failed``)
* total over max   -> ``TOO_BIG`` (terminal, state ``failed``)

Calling an operation the current state does not allow is a programming
error and raises :class:`QuoteStateError`.
"""

from __future__ import annotations

import logging

from pkgexpress.domain.lifecycle import (
    AXIS_ORDER,
    Axis,
    QuoteState,
    is_valid_transition,
)
from pkgexpress.domain.measurements import (
    TOO_BIG_MESSAGE,
    TOO_HEAVY_MESSAGE,
    InvalidMeasurementError,
    QuoteLimits,
    exceeds,
    parse_measurement,
    shipping_cost,
)
from pkgexpress.domain.quote import Quote
from pkgexpress.services.result import ErrorCode, ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class QuoteStateError(RuntimeError):
    """Raised when an engine operation is called out of order."""


class QuoteEngine:
    """Stateful validation-and-pricing engine for a single quote.

    Usage::

        engine = QuoteEngine()
        engine.set_weight("10")
        for axis, raw in zip(AXIS_ORDER, ("2", "3", "4")):
            engine.set_dimension(axis, raw)
        if engine.finalize_dimensions().ok:
            cost = engine.compute_cost()
    """

    def __init__(self, limits: QuoteLimits | None = None) -> None:
        self.limits = limits or QuoteLimits()
        self._quote = Quote()
        self._state = QuoteState.START
        self.reset()

    @property
    def quote(self) -> Quote:
        """The in-flight quote record."""
        return self._quote

    @property
    def state(self) -> QuoteState:
        return self._state

    @property
    def next_axis(self) -> Axis | None:
        """The next dimension to collect, or None once all three are set."""
        for axis in AXIS_ORDER:
            if getattr(self._quote, axis.value) is None:
                return axis
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Discard the in-flight quote and wait for a weight."""
        self._quote = Quote()
        self._state = QuoteState.START
        self._transition(QuoteState.WEIGHT_PENDING)
        logger.debug("Quote %s started", self._quote.quote_id)

    def set_weight(self, raw: str) -> ServiceResult:
        """Parse and store the package weight."""
        op = "set_weight"
        self._require(op, QuoteState.WEIGHT_PENDING)

        try:
            weight = parse_measurement(raw)
        except InvalidMeasurementError as exc:
            return self._invalid_number(op, exc, field="weight")

        self._quote.weight = weight
        if exceeds(weight, self.limits.max_weight):
            return self._fail(
                op,
                ErrorCode.TOO_HEAVY,
                TOO_HEAVY_MESSAGE,
                detail={"weight": weight, "max_weight": self.limits.max_weight},
            )

        self._transition(QuoteState.WEIGHT_ACCEPTED)
        logger.debug("Weight accepted: %s", weight)
        return ServiceResult(ok=True, op=op, data={"weight": weight})

    def set_dimension(self, axis: Axis | str, raw: str) -> ServiceResult:
        """Parse and store one dimension.

        Axes must be supplied in order: width, height, length.  There is
        no per-axis limit; the combined check happens in
        :meth:`finalize_dimensions`.
        """
        axis = Axis(axis)
        op = "set_dimension"
        self._require(op, QuoteState.WEIGHT_ACCEPTED, QuoteState.DIMENSIONS_PENDING)

        expected = self.next_axis
        if axis != expected:
            msg = f"Expected {expected} next, got {axis}"
            raise QuoteStateError(msg)

        try:
            value = parse_measurement(raw)
        except InvalidMeasurementError as exc:
            return self._invalid_number(op, exc, field=axis.value)

        setattr(self._quote, axis.value, value)
        if self._state == QuoteState.WEIGHT_ACCEPTED:
            self._transition(QuoteState.DIMENSIONS_PENDING)
        logger.debug("Dimension accepted: %s=%s", axis.value, value)
        return ServiceResult(ok=True, op=op, data={axis.value: value})

    def finalize_dimensions(self) -> ServiceResult:
        """Check the combined dimensions against the shipping limit."""
        op = "finalize_dimensions"
        self._require(op, QuoteState.DIMENSIONS_PENDING)
        if self.next_axis is not None:
            msg = f"Cannot finalize dimensions: {self.next_axis} not set"
            raise QuoteStateError(msg)

        total = self._quote.dimension_total
        assert total is not None
        if exceeds(total, self.limits.max_dimension_total):
            return self._fail(
                op,
                ErrorCode.TOO_BIG,
                TOO_BIG_MESSAGE,
                detail={
                    "dimension_total": total,
                    "max_dimension_total": self.limits.max_dimension_total,
                },
            )

        self._transition(QuoteState.DIMENSIONS_ACCEPTED)
        return ServiceResult(ok=True, op=op, data={"dimension_total": total})

    def compute_cost(self) -> float:
        """Price the quote.  Unrounded; presentation formats to cents."""
        self._require("compute_cost", QuoteState.DIMENSIONS_ACCEPTED)
        q = self._quote
        assert q.weight is not None and q.width is not None
        assert q.height is not None and q.length is not None
        cost = shipping_cost(
            weight=q.weight,
            width=q.width,
            height=q.height,
            length=q.length,
            divisor=self.limits.cost_divisor,
        )
        q.cost = cost
        self._transition(QuoteState.PRICED)
        logger.debug("Quote %s priced at %s", q.quote_id, cost)
        return cost

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, op: str, *allowed: QuoteState) -> None:
        if self._state not in allowed:
            msg = f"{op} not allowed in state {self._state}"
            raise QuoteStateError(msg)

    def _transition(self, target: QuoteState) -> None:
        if not is_valid_transition(self._state, target):
            msg = f"Invalid quote transition: {self._state} -> {target}"
            raise QuoteStateError(msg)
        self._state = target

    def _invalid_number(
        self, op: str, exc: InvalidMeasurementError, *, field: str
    ) -> ServiceResult:
        logger.debug("Rejected %s input %r: %s", field, exc.raw, exc.reason)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=ErrorCode.INVALID_NUMBER,
                message=f"Invalid {field}: {exc.reason}",
                detail={"field": field, "raw": exc.raw},
            ),
            meta={"state": str(self._state)},
        )

    def _fail(
        self,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        detail: dict[str, float],
    ) -> ServiceResult:
        self._quote.invalidate(message)
        self._transition(QuoteState.FAILED)
        logger.info("Quote %s rejected: %s", self._quote.quote_id, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
            meta={"state": str(self._state)},
        )
