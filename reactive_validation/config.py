"""
Validator settings and logging configuration.

Settings can come from a YAML file, from environment variables (optionally
loaded from a .env file) or from command line arguments.

YAML example:
    data_provider_to_rule_mapping: JOIN
    rule_to_result_handler_mapping: EACH_TO_EACH
    trigger_exception_policy: log
    log_level: DEBUG
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .common.exception_handlers import (
    ExceptionHandler,
    LogExceptionHandler,
    RethrowExceptionHandler,
)
from .errors import ConfigurationError
from .validator.errors import UnsupportedMappingStrategyError
from .validator.models import MappingStrategy

logger = logging.getLogger(__name__)

EXCEPTION_POLICIES = ("rethrow", "log")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidatorSettings:
    """Settings for building validators."""

    data_provider_to_rule_mapping: MappingStrategy = MappingStrategy.EACH_TO_EACH
    """How data provider outputs are mapped to rule inputs."""

    rule_to_result_handler_mapping: MappingStrategy = MappingStrategy.EACH_TO_EACH
    """How rule outputs are mapped to result handler inputs."""

    trigger_exception_policy: str = "rethrow"
    """What triggers do with listener exceptions: "rethrow" or "log"."""

    log_level: str = "INFO"
    """Logging level name."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidatorSettings:
        """
        Build settings from a plain dictionary.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown settings keys: {sorted(unknown)}")

        values = dict(data)
        try:
            for key in ("data_provider_to_rule_mapping", "rule_to_result_handler_mapping"):
                if key in values:
                    values[key] = MappingStrategy.parse(values[key])
        except UnsupportedMappingStrategyError as e:
            raise ConfigurationError(str(e)) from e

        if "trigger_exception_policy" in values:
            values["trigger_exception_policy"] = _parse_policy(values["trigger_exception_policy"])
        if "log_level" in values:
            values["log_level"] = _parse_log_level(values["log_level"])

        return cls(**values)


def _parse_policy(policy: Any) -> str:
    name = str(policy).strip().lower()
    if name not in EXCEPTION_POLICIES:
        raise ConfigurationError(
            f"Unknown trigger exception policy: {policy!r}. Expected one of {list(EXCEPTION_POLICIES)}"
        )
    return name


def _parse_log_level(level: Any) -> str:
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {level!r}. Expected one of {list(LOG_LEVELS)}")
    return name


def load_settings(path: Path | str) -> ValidatorSettings:
    """
    Load settings from a YAML file.

    Missing keys keep their defaults; an empty file gives default settings.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed ValidatorSettings.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, is not
            a mapping, or holds unknown keys or invalid values.
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Settings file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in settings file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file must contain a mapping, got {type(data).__name__}")

    settings = ValidatorSettings.from_dict(data)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings


def settings_from_env(env_file: Path | str | None = None) -> ValidatorSettings:
    """
    Build settings from environment variables.

    Variables:
        RV_DATA_PROVIDER_MAPPING: data_provider_to_rule_mapping
        RV_RULE_MAPPING: rule_to_result_handler_mapping
        RV_TRIGGER_EXCEPTION_POLICY: trigger_exception_policy
        LOG_LEVEL: log_level

    Args:
        env_file: .env file loaded first. Variables already set in the
            environment take precedence. If None, python-dotenv looks for a
            .env file itself.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    env_keys = {
        "RV_DATA_PROVIDER_MAPPING": "data_provider_to_rule_mapping",
        "RV_RULE_MAPPING": "rule_to_result_handler_mapping",
        "RV_TRIGGER_EXCEPTION_POLICY": "trigger_exception_policy",
        "LOG_LEVEL": "log_level",
    }
    data = {key: os.environ[var] for var, key in env_keys.items() if os.environ.get(var)}
    return ValidatorSettings.from_dict(data)


def create_exception_handler(policy: str) -> ExceptionHandler:
    """
    Create the trigger exception handler for a policy name.

    Raises:
        ConfigurationError: If the policy is unknown.
    """
    name = _parse_policy(policy)
    if name == "log":
        return LogExceptionHandler()
    return RethrowExceptionHandler()


def add_args(parser: argparse.ArgumentParser) -> None:
    """
    Add settings arguments to the parser.

    Arguments can be overridden by environment variables.
    """

    parser.add_argument(
        "--data_provider_mapping",
        type=str,
        help="Mapping from data providers to rules: EACH_TO_EACH (SPLIT) or ALL_TO_EACH (JOIN).",
        default=os.environ.get("RV_DATA_PROVIDER_MAPPING", "EACH_TO_EACH"),
    )

    parser.add_argument(
        "--rule_mapping",
        type=str,
        help="Mapping from rules to result handlers: EACH_TO_EACH (SPLIT) or ALL_TO_EACH (JOIN).",
        default=os.environ.get("RV_RULE_MAPPING", "EACH_TO_EACH"),
    )

    parser.add_argument(
        "--trigger_exception_policy",
        type=str,
        choices=EXCEPTION_POLICIES,
        help="What triggers do with listener exceptions.",
        default=os.environ.get("RV_TRIGGER_EXCEPTION_POLICY", "rethrow"),
    )

    parser.add_argument(
        "--settings",
        type=str,
        help="YAML settings file. Overrides the mapping and policy arguments.",
        default=os.environ.get("RV_SETTINGS_FILE"),
    )

    parser.add_argument(
        "--log_level",
        type=str,
        choices=LOG_LEVELS,
        help="Logging level.",
        default=os.environ.get("LOG_LEVEL", "INFO"),
    )


def get_config(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments and return configuration."""
    parser = argparse.ArgumentParser(
        description="Reactive validation demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_args(parser)
    return parser.parse_args(argv)


def config_to_settings(config: argparse.Namespace) -> ValidatorSettings:
    """
    Convert parsed arguments to settings.

    Raises:
        ConfigurationError: If an argument value is invalid.
    """
    if config.settings:
        return load_settings(config.settings)

    return ValidatorSettings.from_dict(
        {
            "data_provider_to_rule_mapping": config.data_provider_mapping,
            "rule_to_result_handler_mapping": config.rule_mapping,
            "trigger_exception_policy": config.trigger_exception_policy,
            "log_level": config.log_level,
        }
    )


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
