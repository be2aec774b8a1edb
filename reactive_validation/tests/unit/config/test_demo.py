"""Tests for the demo wiring and CLI entry point."""

import logging

import pytest

from reactive_validation.config import ValidatorSettings
from reactive_validation.demo import build_demo, main
from reactive_validation.validator import MappingStrategy

EACH = MappingStrategy.EACH_TO_EACH
ALL = MappingStrategy.ALL_TO_EACH


@pytest.fixture
def join_settings() -> ValidatorSettings:
    return ValidatorSettings(
        data_provider_to_rule_mapping=ALL,
        rule_to_result_handler_mapping=ALL,
    )


class TestBuildDemo:
    """Tests for build_demo."""

    @pytest.mark.parametrize("dp_mapping", [EACH, ALL])
    @pytest.mark.parametrize("rule_mapping", [EACH, ALL])
    def test_form_validity_follows_inputs(self, dp_mapping, rule_mapping) -> None:
        """Every mapping combination gives the same verdicts."""
        settings = ValidatorSettings(
            data_provider_to_rule_mapping=dp_mapping,
            rule_to_result_handler_mapping=rule_mapping,
        )
        form = build_demo(settings)
        properties = form.properties

        properties["name"].set_value("  Alice  ")
        assert properties["trimmed_name"].get_value() == "Alice"
        assert properties["form_valid"].get_value() is False

        properties["age"].set_value(30)
        assert properties["form_valid"].get_value() is True

        properties["name"].set_value("A name far too long to be accepted")
        assert properties["form_valid"].get_value() is False

        properties["name"].set_value("Bob")
        properties["age"].set_value(12)
        assert properties["form_valid"].get_value() is False

        form.dispose()

    def test_default_settings_reject_invalid_name(self) -> None:
        """A valid age does not hide an invalid name under the default mappings."""
        form = build_demo(ValidatorSettings())

        form.properties["age"].set_value(30)
        form.properties["name"].set_value("x" * 20)

        assert form.properties["form_valid"].get_value() is False
        form.dispose()

    def test_dispose_detaches_from_inputs(self, join_settings) -> None:
        form = build_demo(join_settings)

        form.dispose()
        form.properties["age"].set_value(30)

        assert form.properties["form_valid"].get_value() is False
        assert form.validator.triggers == ()
        assert form.properties["age"].value_change_listeners == ()
        assert form.properties["trimmed_name"].value_change_listeners == ()

    def test_dispose_releases_bond(self, join_settings) -> None:
        """The name is no longer trimmed into the derived property."""
        form = build_demo(join_settings)

        form.dispose()
        form.properties["name"].set_value("  Carol  ")

        assert form.properties["trimmed_name"].get_value() == ""
        assert form.properties["name"].value_change_listeners == ()


class TestMain:
    """Tests for the CLI entry point."""

    @pytest.mark.parametrize(
        "argv",
        [[], ["--data_provider_mapping", "JOIN", "--rule_mapping", "JOIN"]],
    )
    def test_runs_and_logs_results(
        self, argv: list[str], monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        for var in ("RV_SETTINGS_FILE", "RV_TRIGGER_EXCEPTION_POLICY", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        with caplog.at_level(logging.INFO):
            main(argv)

        assert "form_valid changed: False -> True" in caplog.text
        assert "form_valid changed: True -> False" in caplog.text
        assert "Disposing GeneralValidator" in caplog.text
