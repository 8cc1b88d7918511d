"""Tests for GuardSettings — env vars, TOML source, and init overrides."""

from pathlib import Path

import pytest
from pydantic_settings import SettingsError

from paramguard.config.discovery import CONFIG_FILENAME
from paramguard.config.settings import GuardSettings
from paramguard.domain.options import DEFAULT_OPTIONS, ValidationOptions


@pytest.mark.usefixtures("_clean_env")
class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = GuardSettings.from_env(start=tmp_path)
        assert settings.allow_nil is False
        assert settings.only_integer is False
        assert settings.default_message is None
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.config_path is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GuardSettings.from_env(start=tmp_path)
        with pytest.raises(Exception):
            settings.allow_nil = True  # type: ignore[misc]

    def test_default_options(self, tmp_path: Path) -> None:
        assert GuardSettings.from_env(start=tmp_path).to_options() == DEFAULT_OPTIONS


@pytest.mark.usefixtures("_clean_env")
class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / CONFIG_FILENAME
        toml.write_text('allow_nil = true\ndefault_message = "Rejected: {value}"\n')
        settings = GuardSettings.from_env(start=tmp_path)
        assert settings.allow_nil is True
        assert settings.default_message == "Rejected: {value}"
        assert settings.only_integer is False
        assert settings.config_path == toml

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "guard.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("only_integer = true\n")
        settings = GuardSettings.from_env(config_path=custom)
        assert settings.only_integer is True
        assert settings.config_path == custom

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('flavor = "vanilla"\n')
        settings = GuardSettings.from_env(start=tmp_path)
        assert not hasattr(settings, "flavor")

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("allow_nil = [unterminated\n")
        with pytest.raises(SettingsError, match="Invalid TOML"):
            GuardSettings.from_env(start=tmp_path)


@pytest.mark.usefixtures("_clean_env")
class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("allow_nil = true\n")
        monkeypatch.setenv("PARAMGUARD_ALLOW_NIL", "false")
        settings = GuardSettings.from_env(start=tmp_path)
        assert settings.allow_nil is False

    def test_init_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARAMGUARD_ALLOW_NIL", "false")
        settings = GuardSettings.from_env(start=tmp_path, allow_nil=True)
        assert settings.allow_nil is True


@pytest.mark.usefixtures("_clean_env")
class TestToOptions:
    def test_message_carried(self) -> None:
        settings = GuardSettings(only_integer=True, default_message="Bad {value}")
        options = settings.to_options()
        assert isinstance(options, ValidationOptions)
        assert options.only_integer is True
        assert options.message == "Bad {value}"

    def test_no_message_when_unset(self) -> None:
        assert GuardSettings().to_options().message is None
