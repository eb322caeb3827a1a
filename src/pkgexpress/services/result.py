"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All quote engine and director operations return ServiceResult.
The CLI and tests consume this type; only ``INVALID_NUMBER`` is retryable.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error codes carried by :class:`ServiceError`."""

    INVALID_NUMBER = "INVALID_NUMBER"
    TOO_HEAVY = "TOO_HEAVY"
    TOO_BIG = "TOO_BIG"


RETRYABLE_CODES: frozenset[str] = frozenset({ErrorCode.INVALID_NUMBER})


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def retryable(self) -> bool:
        """True when the caller should ask for the value again."""
        return self.code in RETRYABLE_CODES


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"set_weight"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (state, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def retryable(self) -> bool:
        return self.error is not None and self.error.retryable
