"""Unit tests for settings loading and CLI configuration."""

import logging
from pathlib import Path

import pytest

from reactive_validation.common import LogExceptionHandler, RethrowExceptionHandler
from reactive_validation.config import (
    ValidatorSettings,
    config_to_settings,
    create_exception_handler,
    get_config,
    load_settings,
    settings_from_env,
)
from reactive_validation.errors import ConfigurationError
from reactive_validation.validator import MappingStrategy

ENV_VARS = (
    "RV_DATA_PROVIDER_MAPPING",
    "RV_RULE_MAPPING",
    "RV_TRIGGER_EXCEPTION_POLICY",
    "LOG_LEVEL",
    "RV_SETTINGS_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove settings variables for the duration of each test."""
    for var in ENV_VARS:
        # setenv records the original state, so values written by load_dotenv are undone too
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


@pytest.fixture
def settings_file(tmp_path: Path):
    """Write YAML content into a settings file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "settings.yaml"
        path.write_text(content)
        return path

    return _write


class TestValidatorSettings:
    """Tests for ValidatorSettings.from_dict."""

    def test_defaults(self) -> None:
        settings = ValidatorSettings()

        assert settings.data_provider_to_rule_mapping is MappingStrategy.EACH_TO_EACH
        assert settings.trigger_exception_policy == "rethrow"
        assert settings.log_level == "INFO"

    def test_parses_values(self) -> None:
        settings = ValidatorSettings.from_dict(
            {"rule_to_result_handler_mapping": "join", "trigger_exception_policy": "LOG", "log_level": "debug"}
        )

        assert settings.rule_to_result_handler_mapping is MappingStrategy.ALL_TO_EACH
        assert settings.trigger_exception_policy == "log"
        assert settings.log_level == "DEBUG"

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown settings keys"):
            ValidatorSettings.from_dict({"mapping": "JOIN"})

    def test_invalid_strategy(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported mapping strategy"):
            ValidatorSettings.from_dict({"data_provider_to_rule_mapping": "EACH_TO_ALL"})

    def test_invalid_policy_and_level(self) -> None:
        with pytest.raises(ConfigurationError, match="trigger exception policy"):
            ValidatorSettings.from_dict({"trigger_exception_policy": "ignore"})
        with pytest.raises(ConfigurationError, match="log level"):
            ValidatorSettings.from_dict({"log_level": "VERBOSE"})


class TestLoadSettings:
    """Tests for load_settings."""

    def test_loads_yaml(self, settings_file) -> None:
        path = settings_file("data_provider_to_rule_mapping: JOIN\ntrigger_exception_policy: log\n")

        settings = load_settings(path)

        assert settings.data_provider_to_rule_mapping is MappingStrategy.ALL_TO_EACH
        assert settings.rule_to_result_handler_mapping is MappingStrategy.EACH_TO_EACH
        assert settings.trigger_exception_policy == "log"

    def test_empty_file_gives_defaults(self, settings_file) -> None:
        assert load_settings(settings_file("")) == ValidatorSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Settings file not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, settings_file) -> None:
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_settings(settings_file("key: [unclosed\n"))

    def test_not_a_mapping(self, settings_file) -> None:
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_settings(settings_file("- JOIN\n- SPLIT\n"))


class TestSettingsFromEnv:
    """Tests for settings_from_env."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RV_DATA_PROVIDER_MAPPING", "JOIN")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        settings = settings_from_env()

        assert settings.data_provider_to_rule_mapping is MappingStrategy.ALL_TO_EACH
        assert settings.log_level == "WARNING"

    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "validation.env"
        env_file.write_text("RV_RULE_MAPPING=JOIN\nRV_TRIGGER_EXCEPTION_POLICY=log\n")

        settings = settings_from_env(env_file)

        assert settings.rule_to_result_handler_mapping is MappingStrategy.ALL_TO_EACH
        assert settings.trigger_exception_policy == "log"

    def test_environment_wins_over_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / "validation.env"
        env_file.write_text("RV_RULE_MAPPING=JOIN\n")
        monkeypatch.setenv("RV_RULE_MAPPING", "SPLIT")

        settings = settings_from_env(env_file)

        assert settings.rule_to_result_handler_mapping is MappingStrategy.EACH_TO_EACH

    def test_no_variables_gives_defaults(self) -> None:
        assert settings_from_env() == ValidatorSettings()


class TestExceptionHandlerPolicy:
    """Tests for create_exception_handler."""

    def test_policies(self) -> None:
        assert isinstance(create_exception_handler("rethrow"), RethrowExceptionHandler)
        assert isinstance(create_exception_handler("Log"), LogExceptionHandler)

    def test_unknown_policy(self) -> None:
        with pytest.raises(ConfigurationError):
            create_exception_handler("swallow")


class TestCommandLine:
    """Tests for get_config and config_to_settings."""

    def test_defaults(self) -> None:
        settings = config_to_settings(get_config([]))

        assert settings == ValidatorSettings()

    def test_arguments(self) -> None:
        config = get_config(
            ["--data_provider_mapping", "JOIN", "--trigger_exception_policy", "log", "--log_level", "DEBUG"]
        )

        settings = config_to_settings(config)

        assert settings.data_provider_to_rule_mapping is MappingStrategy.ALL_TO_EACH
        assert settings.trigger_exception_policy == "log"
        assert settings.log_level == "DEBUG"

    def test_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RV_RULE_MAPPING", "JOIN")

        config = get_config([])

        assert config.rule_mapping == "JOIN"

    def test_settings_file_wins(self, settings_file) -> None:
        path = settings_file("rule_to_result_handler_mapping: JOIN\n")

        settings = config_to_settings(get_config(["--settings", str(path), "--rule_mapping", "SPLIT"]))

        assert settings.rule_to_result_handler_mapping is MappingStrategy.ALL_TO_EACH

    def test_invalid_argument_value(self) -> None:
        with pytest.raises(ConfigurationError):
            config_to_settings(get_config(["--rule_mapping", "EVERYTHING"]))

    def test_invalid_choice_exits(self) -> None:
        with pytest.raises(SystemExit):
            get_config(["--log_level", "LOUD"])


def test_settings_logged_on_load(settings_file, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="reactive_validation.config"):
        load_settings(settings_file("log_level: ERROR\n"))

    assert "Loaded settings from" in caplog.text
