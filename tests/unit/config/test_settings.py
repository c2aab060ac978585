"""Unit tests for loading LoggerConfig from the environment and .env files."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from levellog import Logger, LoggerConfig, Severity
from levellog.config.settings import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from levellog.config.validation import ConfigError, InvalidSettingValueError
from levellog.testing import InMemorySink

_KEYS = ("LEVELLOG_PREFIX", "LEVELLOG_LOG_LEVEL", "LEVELLOG_ADD_TIMESTAMP")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so values written by load_dotenv are undone after the test.
    for key in _KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


class TestEnvSettingsLoader:
    def test_is_a_loader(self) -> None:
        assert isinstance(EnvSettingsLoader(), SettingsLoader)

    def test_reads_prefixed_variables(self) -> None:
        env = {"LEVELLOG_PREFIX": "orders", "LEVELLOG_LOG_LEVEL": "ERROR", "LEVELLOG_ADD_TIMESTAMP": "0"}
        config = EnvSettingsLoader(environ=env).load(LoggerConfig)
        assert config == LoggerConfig(prefix="orders", log_level="ERROR", add_timestamp=False)

    @pytest.mark.parametrize("raw", ["1", "true", "True", "yes", "ON", " on "])
    def test_truthy(self, raw: str) -> None:
        env = {"LEVELLOG_ADD_TIMESTAMP": raw}
        assert EnvSettingsLoader(environ=env).load(LoggerConfig).add_timestamp is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
    def test_falsy(self, raw: str) -> None:
        env = {"LEVELLOG_ADD_TIMESTAMP": raw}
        assert EnvSettingsLoader(environ=env).load(LoggerConfig).add_timestamp is False

    def test_invalid_boolean_rejected(self) -> None:
        env = {"LEVELLOG_ADD_TIMESTAMP": "sometimes"}
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ=env).load(LoggerConfig)
        assert exc_info.value.setting_name == "LEVELLOG_ADD_TIMESTAMP"
        assert exc_info.value.value == "sometimes"
        assert isinstance(exc_info.value, ConfigError)

    def test_absent_variables_keep_defaults(self) -> None:
        assert EnvSettingsLoader(environ={}).load(LoggerConfig) == LoggerConfig.default()

    def test_unprefixed_variables_ignored(self) -> None:
        env = {"PREFIX": "bare", "LOG_LEVEL": "TRACE"}
        assert EnvSettingsLoader(environ=env).load(LoggerConfig) == LoggerConfig.default()

    def test_level_name_passed_through_verbatim(self) -> None:
        config = EnvSettingsLoader(environ={"LEVELLOG_LOG_LEVEL": "debug"}).load(LoggerConfig)
        assert config.log_level == "debug"
        assert Logger(InMemorySink(), config).level == Severity.DEBUG

    def test_unknown_level_loads_and_is_caught_by_require_valid(self) -> None:
        config = EnvSettingsLoader(environ={"LEVELLOG_LOG_LEVEL": "loud"}).load(LoggerConfig)
        with pytest.raises(InvalidSettingValueError):
            config.require_valid()

    def test_reads_os_environ_by_default(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LEVELLOG_PREFIX", "from-env")
        assert EnvSettingsLoader().load(LoggerConfig).prefix == "from-env"


class TestDotenvSettingsLoader:
    def test_loads_dotenv_file(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LEVELLOG_PREFIX=dotenv-svc\nLEVELLOG_ADD_TIMESTAMP=false\n")
        config = DotenvSettingsLoader(str(env_file)).load(LoggerConfig)
        assert config.prefix == "dotenv-svc"
        assert config.add_timestamp is False
        assert config.log_level == "INFO"

    def test_existing_environment_wins_without_override(
        self, tmp_path: Path, clean_env: pytest.MonkeyPatch
    ) -> None:
        clean_env.setenv("LEVELLOG_PREFIX", "already-set")
        env_file = tmp_path / ".env"
        env_file.write_text("LEVELLOG_PREFIX=dotenv-svc\n")
        assert DotenvSettingsLoader(str(env_file)).load(LoggerConfig).prefix == "already-set"

    def test_override_replaces_environment(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LEVELLOG_PREFIX", "already-set")
        env_file = tmp_path / ".env"
        env_file.write_text("LEVELLOG_PREFIX=dotenv-svc\n")
        config = DotenvSettingsLoader(str(env_file), override=True).load(LoggerConfig)
        assert config.prefix == "dotenv-svc"

    def test_missing_dependency(self) -> None:
        with patch.dict("sys.modules", {"dotenv": None}):
            with pytest.raises(ImportError, match="levellog\\[dotenv\\]"):
                DotenvSettingsLoader().load(LoggerConfig)
