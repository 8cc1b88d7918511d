"""The four validation rules as pure predicates.

Each rule takes the value under test plus already-resolved
:class:`~paramguard.domain.options.ValidationOptions` and returns a bool.
Rules never raise for any input shape: malformed patterns, unparsable
numbers and unexpected types all evaluate to ``False``.

INVARIANT: Numericality is an ordered decision list. ``only_integer``
short-circuits everything else, and the comparison options are
mutually exclusive by precedence (``less_than`` before
``less_than_or_equal_to`` before ``greater_than`` and so on); they are
not combined.
"""

from __future__ import annotations

import logging
import operator
import re
from collections.abc import Callable, Sequence, Sized
from typing import Any

from paramguard.domain.numbers import is_integer_string, parse_float
from paramguard.domain.options import COMPARISON_OPTIONS, ValidationOptions

logger = logging.getLogger(__name__)

_COMPARATORS: dict[str, Callable[[float, float], bool]] = dict(
    zip(
        COMPARISON_OPTIONS,
        (operator.lt, operator.le, operator.gt, operator.ge, operator.eq),
        strict=True,
    )
)

_TEXT_TYPES = (str, bytes, bytearray)


def validate_type(value: Any, expected_type: Any, options: ValidationOptions) -> bool:
    """Check that *value* is an instance of *expected_type*.

    *expected_type* may be a class or a tuple of classes.  Anything that
    :func:`isinstance` rejects as a second argument yields ``False``.
    """
    if options.allow_nil and value is None:
        return True
    try:
        return isinstance(value, expected_type)
    except TypeError:
        logger.debug("Unusable type for type check: %r", expected_type)
        return False


def _compare(value: Any, bound: Any, compare: Callable[[float, float], bool]) -> bool:
    left = parse_float(value)
    right = parse_float(bound)
    if left is None or right is None:
        return False
    return compare(left, right)


def validate_numericality(value: Any, options: ValidationOptions) -> bool:
    """Check that *value* is numeric and satisfies the configured constraint.

    Decision order (first applicable branch decides):

    1. ``only_integer``: the text form must be all digits (empty allowed
       with ``allow_nil``).
    2. ``less_than``, ``less_than_or_equal_to``, ``greater_than``,
       ``greater_than_or_equal_to``, ``equal_to``: numeric comparison.
    3. ``""`` counts as ``None``; ``None`` passes only with ``allow_nil``.
    4. ``even`` / ``odd``: parity of the parsed number.
    5. Otherwise the value must parse as a float.
    """
    if options.only_integer:
        return is_integer_string(value, allow_empty=options.allow_nil)

    for key in COMPARISON_OPTIONS:
        if options.is_set(key):
            return _compare(value, options[key], _COMPARATORS[key])

    if isinstance(value, str) and not value:
        value = None
    if value is None:
        return options.allow_nil

    if options.even or options.odd:
        number = parse_float(value)
        if number is None:
            return False
        if options.even:
            return number % 2 == 0
        return number % 2 != 0

    return parse_float(value) is not None


def _is_sequence(collection: Any) -> bool:
    return isinstance(collection, Sequence) and not isinstance(collection, _TEXT_TYPES)


def _fold(item: Any) -> Any:
    return item.casefold() if isinstance(item, str) else item


def validate_inclusion(value: Any, collection: Any, options: ValidationOptions) -> bool:
    """Check that *value* is a member of *collection*.

    *collection* must be a non-text sequence (list, tuple, range, ...);
    anything else fails.  With ``ignore_case`` text is compared
    case-insensitively on both sides.
    """
    if not _is_sequence(collection):
        return False

    if value is None and options.allow_nil:
        return True

    if options.allow_blank and isinstance(value, Sized) and len(value) == 0:
        return True

    if value is None:
        return False

    try:
        if options.ignore_case:
            return _fold(value) in [_fold(item) for item in collection]
        return value in collection
    except Exception:
        logger.debug("Membership test failed for %s", type(value).__name__, exc_info=True)
        return False


def validate_format(value: Any, pattern: str | re.Pattern[Any], options: ValidationOptions) -> bool:
    """Check that the text form of *value* matches *pattern* somewhere.

    The pattern is searched, not anchored; use ``^``/``$`` (or ``\\A``/``\\Z``)
    to anchor it.  An invalid pattern counts as a non-match.
    """
    if value is None:
        return options.allow_nil

    try:
        return re.search(pattern, str(value)) is not None
    except (re.error, TypeError):
        logger.debug("Pattern match failed for %r", pattern, exc_info=True)
        return False
