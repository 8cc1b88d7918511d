"""The single error kind surfaced by the asserting validators."""

from __future__ import annotations

from typing import Any


class ValidationFailure(ValueError):
    """A value did not satisfy a validation rule.

    Attributes:
        message: Formatted, human-readable failure message.
        value: The rejected value.
        op: Name of the rule that rejected it (e.g. ``"numericality"``).
    """

    def __init__(self, message: str, *, value: Any = None, op: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
        self.op = op
