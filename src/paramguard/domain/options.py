"""Validation options and the resolver that merges defaults with overrides.

Every validator call works on *effective options*: a fresh, frozen
:class:`ValidationOptions` built from the validator's defaults with the
caller's overrides applied on top.  Defaults are never mutated.

Unknown keys are accepted and kept as extras so that callers can pass one
options mapping to several validators; validators only read the keys
they understand.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

# Options whose presence (any value other than None) selects a comparison
# branch in the numericality rule, in precedence order.
COMPARISON_OPTIONS: tuple[str, ...] = (
    "less_than",
    "less_than_or_equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "equal_to",
)


def _text_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


# Flags are read by truthiness, so any value (2, "no", [1]) is usable.
Flag = Annotated[bool, BeforeValidator(bool)]
Text = Annotated[str | None, BeforeValidator(_text_or_none)]


class ValidationOptions(BaseModel):
    """Frozen option set consulted by the validators.

    Attributes:
        allow_nil: Accept ``None`` (and, for numericality, ``""``).
        only_integer: Numericality only accepts digit strings.
        allow_blank: Inclusion accepts empty strings/collections.
        ignore_case: Inclusion compares text case-insensitively.
        less_than: Numericality upper bound (exclusive).
        less_than_or_equal_to: Numericality upper bound (inclusive).
        greater_than: Numericality lower bound (exclusive).
        greater_than_or_equal_to: Numericality lower bound (inclusive).
        equal_to: Numericality exact value.
        even: Numericality requires an even number.
        odd: Numericality requires an odd number.
        message: Failure message template; ``{value}`` is substituted.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    allow_nil: Flag = False
    only_integer: Flag = False
    allow_blank: Flag = False
    ignore_case: Flag = False
    less_than: Any = None
    less_than_or_equal_to: Any = None
    greater_than: Any = None
    greater_than_or_equal_to: Any = None
    equal_to: Any = None
    even: Flag = False
    odd: Flag = False
    message: Text = None

    # --- Mapping-style access ---

    def __getitem__(self, key: str) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        extra = self.model_extra or {}
        if key in extra:
            return extra[key]
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in type(self).model_fields or key in (self.model_extra or {})

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> Iterator[str]:
        yield from type(self).model_fields
        yield from self.model_extra or {}

    def is_set(self, key: str) -> bool:
        """True when *key* carries a value other than ``None``."""
        return self.get(key) is not None

    def as_dict(self) -> dict[str, Any]:
        """All options, known fields and extras, as a plain dict."""
        return self.model_dump()

    def explicit(self) -> dict[str, Any]:
        """Only the options that were explicitly given at construction."""
        fields = type(self).model_fields
        data = {key: getattr(self, key) for key in self.model_fields_set if key in fields}
        data.update(self.model_extra or {})
        return data


DEFAULT_OPTIONS = ValidationOptions(allow_nil=False, only_integer=False)

OptionsLike = ValidationOptions | Mapping[str, Any] | None


def resolve_options(
    defaults: ValidationOptions,
    overrides: OptionsLike = None,
) -> ValidationOptions:
    """Merge *overrides* on top of *defaults* into new effective options.

    Every key of *defaults* is kept unless *overrides* supplies it; keys
    only present in *overrides* are carried as extras.  When *overrides*
    is itself a :class:`ValidationOptions`, only its explicitly set keys
    count.  Keys are coerced to text and flags are read by truthiness, so
    resolution never fails.  Neither input is modified.
    """
    if overrides is None:
        changes: dict[str, Any] = {}
    elif isinstance(overrides, ValidationOptions):
        changes = overrides.explicit()
    else:
        changes = {str(key): value for key, value in overrides.items()}
    return ValidationOptions.model_validate({**defaults.as_dict(), **changes})
