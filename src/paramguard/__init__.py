"""paramguard — validation rules for untrusted input values.

Check types, numericality, set membership, and textual format of values
before they are used::

    from paramguard import assert_numericality_of, validate_inclusion_of

    assert_numericality_of(params["limit"], only_integer=True)
    if not validate_inclusion_of(params["order"], ["asc", "desc"]):
        ...
"""

from __future__ import annotations

from paramguard.domain.messages import format_message
from paramguard.domain.options import DEFAULT_OPTIONS, ValidationOptions, resolve_options
from paramguard.exceptions import ValidationFailure
from paramguard.result import CheckError, CheckResult
from paramguard.validator import (
    Validator,
    assert_format_of,
    assert_inclusion_of,
    assert_numericality_of,
    assert_type_of,
    check_format_of,
    check_inclusion_of,
    check_numericality_of,
    check_type_of,
    get_default_validator,
    validate_format_of,
    validate_inclusion_of,
    validate_numericality_of,
    validate_type_of,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "CheckError",
    "CheckResult",
    "ValidationFailure",
    "ValidationOptions",
    "Validator",
    "assert_format_of",
    "assert_inclusion_of",
    "assert_numericality_of",
    "assert_type_of",
    "check_format_of",
    "check_inclusion_of",
    "check_numericality_of",
    "check_type_of",
    "format_message",
    "get_default_validator",
    "resolve_options",
    "validate_format_of",
    "validate_inclusion_of",
    "validate_numericality_of",
    "validate_type_of",
]
