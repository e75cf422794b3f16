"""Unit tests for RuleApplier."""

from __future__ import annotations

import logging

import pytest

from profile_convert.conversion.applier import RuleApplier
from profile_convert.models import ConversionRule, Parameter


@pytest.fixture
def applier() -> RuleApplier:
    return RuleApplier()


@pytest.fixture
def param() -> Parameter:
    return Parameter(name="CONFIG_foo", config_file="records.config", value="1")


def test_new_name_only(applier: RuleApplier, param: Parameter) -> None:
    updated, keep = applier.apply(ConversionRule(new_name="NEW_foo"), param)

    assert keep is True
    assert updated == Parameter(name="NEW_foo", config_file="records.config", value="1")


def test_all_fields_replaced(applier: RuleApplier, param: Parameter) -> None:
    rule = ConversionRule(new_name="n", new_config_file="c", new_value="v")

    updated, keep = applier.apply(rule, param)

    assert keep is True
    assert (updated.name, updated.config_file, updated.value) == ("n", "c", "v")


def test_empty_fields_leave_parameter_unchanged(applier: RuleApplier, param: Parameter) -> None:
    updated, keep = applier.apply(ConversionRule(), param)

    assert keep is True
    assert updated == param


def test_input_parameter_is_not_modified(applier: RuleApplier, param: Parameter) -> None:
    applier.apply(ConversionRule(new_value="2"), param)
    assert param.value == "1"


def test_delete_drops_parameter(
    applier: RuleApplier, param: Parameter, caplog: pytest.LogCaptureFixture
) -> None:
    rule = ConversionRule(action="delete", new_name="ignored")

    with caplog.at_level(logging.INFO):
        result, keep = applier.apply(rule, param)

    assert keep is False
    assert result == param
    assert 'Deleting parameter {"CONFIG_foo", "records.config", "1"}' in caplog.text


def test_unknown_action_warns_and_applies_fields(
    applier: RuleApplier, param: Parameter, caplog: pytest.LogCaptureFixture
) -> None:
    rule = ConversionRule(action="archive", new_value="2")

    updated, keep = applier.apply(rule, param)

    assert keep is True
    assert updated.value == "2"
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Unknown action archive" in warnings[0].getMessage()


def test_update_logs_before_and_after(
    applier: RuleApplier, param: Parameter, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO):
        applier.apply(ConversionRule(new_name="NEW_foo"), param)

    assert (
        'Updating parameter {"CONFIG_foo", "records.config", "1"} '
        'to {"NEW_foo", "records.config", "1"}'
    ) in caplog.text
