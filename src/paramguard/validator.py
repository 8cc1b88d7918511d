"""Validator — binds default options to the four rules.

Each rule is exposed in three forms:

- ``validate_<rule>_of()``: returns a bool and never raises.
- ``check_<rule>_of()``: returns a :class:`CheckResult` carrying the
  formatted failure message.
- ``assert_<rule>_of()``: raises :class:`ValidationFailure` when the
  check fails; a thin adapter over ``check_<rule>_of()``.

Options can be given as a mapping (or :class:`ValidationOptions`), as
keyword overrides, or both; keywords win.  Effective options are
resolved fresh on every call.

Usage::

    validator = Validator()
    validator.assert_numericality_of(params["page"], only_integer=True)
    validator.validate_inclusion_of(params["sort"], ["asc", "desc"], ignore_case=True)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final

from paramguard.domain import rules
from paramguard.domain.messages import format_message
from paramguard.domain.options import (
    DEFAULT_OPTIONS,
    OptionsLike,
    ValidationOptions,
    resolve_options,
)
from paramguard.result import CheckResult

if TYPE_CHECKING:
    from paramguard.config.settings import GuardSettings

logger = logging.getLogger(__name__)


class Validator:
    """Stateless validator over an immutable set of default options."""

    def __init__(self, defaults: ValidationOptions = DEFAULT_OPTIONS) -> None:
        self._defaults = defaults

    @classmethod
    def from_settings(cls, settings: GuardSettings) -> Validator:
        """Build a validator whose defaults come from *settings*."""
        return cls(settings.to_options())

    @property
    def defaults(self) -> ValidationOptions:
        return self._defaults

    def effective_options(
        self, options: OptionsLike = None, **overrides: Any
    ) -> ValidationOptions:
        """Resolve *options* and keyword *overrides* against the defaults."""
        resolved = resolve_options(self._defaults, options)
        if overrides:
            resolved = resolve_options(resolved, overrides)
        return resolved

    def _check(
        self,
        op: str,
        rule: Callable[[ValidationOptions], bool],
        value: Any,
        options: ValidationOptions,
    ) -> CheckResult:
        if rule(options):
            return CheckResult.success(op, value)
        logger.debug("Validation failed: op=%s", op)
        return CheckResult.failure(
            op,
            value,
            format_message(value, options.message),
            options=options.as_dict(),
        )

    # --- Type ---

    def validate_type_of(
        self, value: Any, expected_type: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> bool:
        """Check that *value* is an instance of *expected_type*.

        Options: ``allow_nil``.
        """
        effective = self.effective_options(options, **overrides)
        return rules.validate_type(value, expected_type, effective)

    def check_type_of(
        self, value: Any, expected_type: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> CheckResult:
        """Like :meth:`validate_type_of` but return a :class:`CheckResult`."""
        effective = self.effective_options(options, **overrides)
        return self._check(
            "type",
            lambda opts: rules.validate_type(value, expected_type, opts),
            value,
            effective,
        )

    def assert_type_of(
        self, value: Any, expected_type: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> None:
        """Like :meth:`validate_type_of` but raise on failure.

        Options: ``allow_nil``, ``message``.
        """
        self.check_type_of(value, expected_type, options, **overrides).raise_for_failure()

    # --- Numericality ---

    def validate_numericality_of(
        self, value: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> bool:
        """Check that *value* is numeric and meets the configured constraint.

        Options: ``only_integer``, ``allow_nil``, ``less_than``,
        ``less_than_or_equal_to``, ``greater_than``,
        ``greater_than_or_equal_to``, ``equal_to``, ``even``, ``odd``.
        See :func:`paramguard.domain.rules.validate_numericality` for
        precedence.
        """
        effective = self.effective_options(options, **overrides)
        return rules.validate_numericality(value, effective)

    def check_numericality_of(
        self, value: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> CheckResult:
        """Like :meth:`validate_numericality_of` but return a :class:`CheckResult`."""
        effective = self.effective_options(options, **overrides)
        return self._check(
            "numericality",
            lambda opts: rules.validate_numericality(value, opts),
            value,
            effective,
        )

    def assert_numericality_of(
        self, value: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> None:
        """Like :meth:`validate_numericality_of` but raise :class:`ValidationFailure`."""
        self.check_numericality_of(value, options, **overrides).raise_for_failure()

    # --- Inclusion ---

    def validate_inclusion_of(
        self, value: Any, collection: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> bool:
        """Check that *value* is one of *collection*.

        Options: ``allow_nil``, ``allow_blank``, ``ignore_case``.
        """
        effective = self.effective_options(options, **overrides)
        return rules.validate_inclusion(value, collection, effective)

    def check_inclusion_of(
        self, value: Any, collection: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> CheckResult:
        """Like :meth:`validate_inclusion_of` but return a :class:`CheckResult`."""
        effective = self.effective_options(options, **overrides)
        return self._check(
            "inclusion",
            lambda opts: rules.validate_inclusion(value, collection, opts),
            value,
            effective,
        )

    def assert_inclusion_of(
        self, value: Any, collection: Any, options: OptionsLike = None, /, **overrides: Any
    ) -> None:
        """Like :meth:`validate_inclusion_of` but raise :class:`ValidationFailure`."""
        self.check_inclusion_of(value, collection, options, **overrides).raise_for_failure()

    # --- Format ---

    def validate_format_of(
        self,
        value: Any,
        pattern: str | re.Pattern[Any],
        options: OptionsLike = None,
        /,
        **overrides: Any,
    ) -> bool:
        """Check that the text form of *value* matches *pattern*.

        Options: ``allow_nil``.
        """
        effective = self.effective_options(options, **overrides)
        return rules.validate_format(value, pattern, effective)

    def check_format_of(
        self,
        value: Any,
        pattern: str | re.Pattern[Any],
        options: OptionsLike = None,
        /,
        **overrides: Any,
    ) -> CheckResult:
        """Like :meth:`validate_format_of` but return a :class:`CheckResult`."""
        effective = self.effective_options(options, **overrides)
        return self._check(
            "format",
            lambda opts: rules.validate_format(value, pattern, opts),
            value,
            effective,
        )

    def assert_format_of(
        self,
        value: Any,
        pattern: str | re.Pattern[Any],
        options: OptionsLike = None,
        /,
        **overrides: Any,
    ) -> None:
        """Like :meth:`validate_format_of` but raise :class:`ValidationFailure`."""
        self.check_format_of(value, pattern, options, **overrides).raise_for_failure()


_DEFAULT_VALIDATOR: Final[Validator] = Validator()


def get_default_validator() -> Validator:
    """Return the process-wide validator built from :data:`DEFAULT_OPTIONS`."""
    return _DEFAULT_VALIDATOR


validate_type_of = _DEFAULT_VALIDATOR.validate_type_of
check_type_of = _DEFAULT_VALIDATOR.check_type_of
assert_type_of = _DEFAULT_VALIDATOR.assert_type_of
validate_numericality_of = _DEFAULT_VALIDATOR.validate_numericality_of
check_numericality_of = _DEFAULT_VALIDATOR.check_numericality_of
assert_numericality_of = _DEFAULT_VALIDATOR.assert_numericality_of
validate_inclusion_of = _DEFAULT_VALIDATOR.validate_inclusion_of
check_inclusion_of = _DEFAULT_VALIDATOR.check_inclusion_of
assert_inclusion_of = _DEFAULT_VALIDATOR.assert_inclusion_of
validate_format_of = _DEFAULT_VALIDATOR.validate_format_of
check_format_of = _DEFAULT_VALIDATOR.check_format_of
assert_format_of = _DEFAULT_VALIDATOR.assert_format_of
