"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``PARAMGUARD_*`` prefix
  3. TOML file    — ``paramguard.toml`` discovered via walk-up
  4. Code defaults — baked into the fields below

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`paramguard.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from paramguard.config.discovery import find_config
from paramguard.domain.options import ValidationOptions


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``paramguard.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise SettingsError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class GuardSettings(BaseSettings):
    """Process-level defaults for paramguard validators.

    Frozen after construction.  Convert to validator defaults with
    :meth:`to_options`, or build a validator directly with
    :meth:`paramguard.validator.Validator.from_settings`.

    Attributes:
        allow_nil: Default for the ``allow_nil`` option.
        only_integer: Default for the ``only_integer`` option.
        default_message: Failure message template used when a call does
            not pass ``message``.
        verbose: Enable DEBUG logging for ``paramguard`` loggers.
        log_json: Render logs as JSON lines.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PARAMGUARD_",
        "extra": "ignore",
    }

    allow_nil: bool = False
    only_integer: bool = False
    default_message: str | None = None

    verbose: bool = False
    log_json: bool = False

    config_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_env(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> GuardSettings:
        """Construct settings from the environment.

        Uses *config_path* when given, otherwise discovers
        ``paramguard.toml`` by walking up from *start* (default: cwd).
        *overrides* take priority over every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def to_options(self) -> ValidationOptions:
        """Validator defaults described by these settings."""
        data: dict[str, Any] = {
            "allow_nil": self.allow_nil,
            "only_integer": self.only_integer,
        }
        if self.default_message is not None:
            data["message"] = self.default_message
        return ValidationOptions(**data)
