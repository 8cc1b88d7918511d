"""Shared pytest fixtures for paramguard tests."""

from __future__ import annotations

import pytest

from paramguard.domain.options import ValidationOptions
from paramguard.validator import Validator

_ENV_VARS = (
    "PARAMGUARD_CONFIG",
    "PARAMGUARD_ALLOW_NIL",
    "PARAMGUARD_ONLY_INTEGER",
    "PARAMGUARD_DEFAULT_MESSAGE",
    "PARAMGUARD_VERBOSE",
    "PARAMGUARD_LOG_JSON",
)


@pytest.fixture
def validator() -> Validator:
    """Validator over the stock defaults."""
    return Validator()


@pytest.fixture
def lenient_validator() -> Validator:
    """Validator whose defaults accept ``None``."""
    return Validator(ValidationOptions(allow_nil=True))


@pytest.fixture
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any ``PARAMGUARD_*`` variables inherited from the runner.

    Use via ``@pytest.mark.usefixtures("_clean_env")`` on settings tests.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
