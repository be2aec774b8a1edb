"""
Demo: validate a small sign-up form held in observable properties.

Two input properties (user name and age) are validated whenever either
changes. A derived property (the trimmed user name) is kept in sync through a
bond. Results are logged and also written into a property.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .binding import Binder, Bond
from .config import (
    ValidatorSettings,
    config_to_settings,
    create_exception_handler,
    get_config,
    setup_logging,
)
from .dataprovider import PropertyValueProvider
from .property import CompositeReadableProperty, LoggingValueChangeListener, SimpleProperty
from .resulthandler import CompositeResultHandler, LoggingResultHandler, PropertyResultHandler
from .rule import NumberGreaterThanOrEqualToRule, StringLengthLessThanRule
from .transform import AndBooleanAggregator
from .trigger import PropertyValueChangeTrigger
from .validator import GeneralValidator, MappingStrategy, create_validator

logger = logging.getLogger(__name__)


def _check_entry(value: object) -> bool:
    """Single rule accepting a name (max 16 chars), an age (at least 18) or a list of them."""
    if isinstance(value, str):
        return StringLengthLessThanRule(17).validate(value) and bool(value)
    if isinstance(value, list):
        return AndBooleanAggregator().transform([_check_entry(v) for v in value])
    return NumberGreaterThanOrEqualToRule(18).validate(value)


@dataclass
class SignUpForm:
    """Properties of the demo form and the components keeping them in sync."""

    validator: GeneralValidator
    properties: dict[str, SimpleProperty]
    bond: Bond

    def dispose(self) -> None:
        self.validator.dispose()
        self.bond.dispose()


def build_demo(settings: ValidatorSettings) -> SignUpForm:
    """
    Wire the demo validator.

    The name and age are read together from one composite property, so every
    firing produces a single verdict under all mapping strategies.
    """
    name = SimpleProperty("")
    age = SimpleProperty(0)
    trimmed_name = SimpleProperty("")
    form_valid = SimpleProperty(False)

    bond = Binder.from_(name).transform(lambda text: (text or "").strip()).to(trimmed_name)
    form_valid.add_value_change_listener(LoggingValueChangeListener("form_valid"))
    entry = CompositeReadableProperty([trimmed_name, age], deep_dispose=False)

    exception_handler = create_exception_handler(settings.trigger_exception_policy)
    validator = create_validator(
        triggers=[PropertyValueChangeTrigger(entry, exception_handler)],
        data_providers=[PropertyValueProvider(entry, deep_dispose=True)],
        rules=[_check_entry],
        result_handlers=[
            CompositeResultHandler(
                LoggingResultHandler("result"),
                PropertyResultHandler(form_valid),
            )
        ],
        settings=settings,
    )

    if validator.rule_to_result_handler_mapping == MappingStrategy.ALL_TO_EACH:
        validator.result_handler_input_transformers = [AndBooleanAggregator()]

    properties = {"name": name, "age": age, "trimmed_name": trimmed_name, "form_valid": form_valid}
    return SignUpForm(validator, properties, bond)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    config = get_config(argv)
    setup_logging(config.log_level)
    settings = config_to_settings(config)
    logger.info(f"Settings: {settings}")

    form = build_demo(settings)

    for field, value in (("name", "  Alice  "), ("age", 12), ("age", 30), ("name", "")):
        logger.info(f"Setting {field} to {value!r}")
        form.properties[field].set_value(value)

    form.dispose()
