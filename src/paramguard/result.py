"""CheckResult and CheckError — the tagged outcome of one validation.

INVARIANT: ``ok`` is True exactly when ``error`` is None.
The asserting validators are thin adapters that raise
:class:`~paramguard.exceptions.ValidationFailure` from a failed result.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from paramguard.exceptions import ValidationFailure

INVALID_VALUE = "INVALID_VALUE"


class CheckError(BaseModel):
    """Structured failure payload within a CheckResult."""

    model_config = {"frozen": True}

    code: str = INVALID_VALUE
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CheckResult(BaseModel):
    """Outcome of a single validation call.

    Attributes:
        ok: Whether the value passed.
        op: Name of the rule (``"type"``, ``"numericality"``,
            ``"inclusion"`` or ``"format"``).
        value: The value that was checked.
        error: Failure payload if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    value: Any = None
    error: CheckError | None = None

    @model_validator(mode="after")
    def error_matches_ok(self) -> Self:
        if self.ok and self.error is not None:
            raise ValueError("A passing result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("A failing result must carry an error")
        return self

    @classmethod
    def success(cls, op: str, value: Any = None) -> CheckResult:
        return cls(ok=True, op=op, value=value)

    @classmethod
    def failure(cls, op: str, value: Any, message: str, **detail: Any) -> CheckResult:
        return cls(
            ok=False,
            op=op,
            value=value,
            error=CheckError(message=message, detail={"op": op, **detail}),
        )

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_failure(self) -> None:
        """Raise :class:`ValidationFailure` if this result is a failure."""
        if self.error is not None:
            raise ValidationFailure(self.error.message, value=self.value, op=self.op)
