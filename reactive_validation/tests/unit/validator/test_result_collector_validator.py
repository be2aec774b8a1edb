"""Unit tests for ResultCollectorValidator and validator chaining."""

import logging
from unittest.mock import MagicMock

import pytest

from reactive_validation.property import SimpleProperty
from reactive_validation.resulthandler import PropertyResultHandler, ResultCollector
from reactive_validation.transform import AndBooleanAggregator
from reactive_validation.trigger import PropertyValueChangeTrigger
from reactive_validation.validator import GeneralValidator, ResultCollectorValidator


def _create_field_validator(prop: SimpleProperty, collector: ResultCollector) -> GeneralValidator:
    """Field validator writing non-emptiness of prop into collector."""
    validator = GeneralValidator()
    validator.add_trigger(PropertyValueChangeTrigger(prop))
    validator.add_data_provider(prop.get_value)
    validator.add_rule(bool)
    validator.add_result_handler(collector)
    return validator


class TestResultCollectorValidator:
    """Tests for ResultCollectorValidator."""

    def test_rule_receives_collected_list(self, result_handler) -> None:
        first, second = ResultCollector(True), ResultCollector(False)
        validator = ResultCollectorValidator()
        validator.add_result_collector(first)
        validator.add_result_collector(second)
        validator.add_rule(list)
        validator.add_result_handler(result_handler)

        validator.trigger()

        assert result_handler.results == [[True, False]]

    def test_each_rule_result_goes_to_every_handler(self, result_handler, make_result_handler) -> None:
        other = make_result_handler()
        validator = ResultCollectorValidator()
        validator.add_data_provider(lambda: 1)
        validator.add_rule(len)
        validator.add_rule(sum)
        validator.add_result_handler(result_handler)
        validator.add_result_handler(other)

        validator.trigger()

        assert result_handler.results == [1, 1]
        assert other.results == [1, 1]

    def test_no_data_providers_logs_warning(self, result_handler, caplog: pytest.LogCaptureFixture) -> None:
        """Without data providers nothing runs and a warning is logged."""
        rule = MagicMock()
        validator = ResultCollectorValidator()
        validator.add_rule(rule)
        validator.add_result_handler(result_handler)

        with caplog.at_level(logging.WARNING):
            validator.trigger()

        rule.validate.assert_not_called()
        assert result_handler.results == []
        assert "No data providers in validator" in caplog.text

    def test_remove_result_collector(self) -> None:
        collector = ResultCollector()
        validator = ResultCollectorValidator()
        validator.add_result_collector(collector)

        validator.remove_result_collector(collector)

        assert validator.triggers == ()
        assert validator.data_providers == ()
        assert collector.trigger_listeners == ()


class TestValidatorChaining:
    """Tests for field validators feeding a form validator."""

    def test_form_validity_follows_fields(self) -> None:
        name, email = SimpleProperty(""), SimpleProperty("")
        name_collector, email_collector = ResultCollector(False), ResultCollector(False)
        _create_field_validator(name, name_collector)
        _create_field_validator(email, email_collector)

        form_valid = SimpleProperty(False)
        form_validator = ResultCollectorValidator()
        form_validator.add_result_collector(name_collector)
        form_validator.add_result_collector(email_collector)
        form_validator.add_rule(AndBooleanAggregator().transform)
        form_validator.add_result_handler(PropertyResultHandler(form_valid))

        name.set_value("Ada")
        assert form_valid.get_value() is False

        email.set_value("ada@example.com")
        assert form_valid.get_value() is True

        name.set_value("")
        assert form_valid.get_value() is False

    def test_dispose_disposes_collectors(self) -> None:
        collector = ResultCollector()
        form_validator = ResultCollectorValidator()
        form_validator.add_result_collector(collector)

        form_validator.dispose()

        assert collector.trigger_listeners == ()
        assert form_validator.data_providers == ()
