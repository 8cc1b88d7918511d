"""Failure message formatting."""

from __future__ import annotations

from typing import Any

VALUE_PLACEHOLDER = "{value}"
DEFAULT_MESSAGE_PREFIX = "Invalid value: "


def stringify(value: Any) -> str:
    """Text form of *value* for messages; ``None`` renders as ``""``."""
    if value is None:
        return ""
    return str(value)


def format_message(value: Any, template: str | None = None) -> str:
    """Build the failure message for a rejected *value*.

    Every literal ``{value}`` in *template* is replaced with the text form
    of the value; no other placeholders are interpreted.  Without a
    template the message is ``"Invalid value: <value>"``.

    Examples:
        >>> format_message("x", "Value {value} should be an array")
        'Value x should be an array'
        >>> format_message("wes")
        'Invalid value: wes'
    """
    text = stringify(value)
    if template is None:
        return f"{DEFAULT_MESSAGE_PREFIX}{text}"
    return template.replace(VALUE_PLACEHOLDER, text)
