"""The Quote record — one package's measurements, validity, and cost."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field

from pkgexpress.domain.measurements import dimension_total


class Quote(BaseModel):
    """A single shipping quote, populated field by field.

    Measurements stay ``None`` until collected.  ``cost`` is only set on a
    valid quote with all four measurements; ``error`` only on an invalid one.
    """

    model_config = {"validate_assignment": True}

    quote_id: str = Field(default_factory=lambda: uuid4().hex[:12])
    weight: float | None = Field(default=None, ge=0)
    width: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    length: float | None = Field(default=None, ge=0)
    cost: float | None = None
    valid: bool = True
    error: str | None = None

    @property
    def has_dimensions(self) -> bool:
        return None not in (self.width, self.height, self.length)

    @property
    def dimension_total(self) -> float | None:
        if not self.has_dimensions:
            return None
        assert self.width is not None and self.height is not None and self.length is not None
        return dimension_total(self.width, self.height, self.length)

    def invalidate(self, message: str) -> None:
        """Mark the quote as failing a shipping limit."""
        self.valid = False
        self.error = message
        self.cost = None
