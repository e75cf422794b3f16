"""Unit tests for ProfileValidator."""

from __future__ import annotations

import logging

import pytest

from profile_convert.conversion.validator import ProfileValidator
from profile_convert.models import Parameter, Profile


@pytest.fixture
def validator() -> ProfileValidator:
    return ProfileValidator()


@pytest.fixture
def profile() -> Profile:
    return Profile(
        parameters=[
            Parameter(name="location", config_file="cache.config", value="/opt/ts/etc"),
            Parameter(name="CONFIG_version", config_file="records.config", value="7"),
            Parameter(name="CONFIG_version", config_file="records.config", value="7"),
        ]
    )


def test_no_requirements_passes(validator: ProfileValidator, profile: Profile) -> None:
    assert validator.validate(profile, []) is True


def test_exact_match_passes(validator: ProfileValidator, profile: Profile) -> None:
    required = [
        Parameter(name="location", config_file="cache.config", value="/opt/ts/etc"),
        Parameter(name="CONFIG_version", config_file="records.config", value="7"),
    ]
    assert validator.validate(profile, required) is True


def test_value_mismatch_fails(
    validator: ProfileValidator, profile: Profile, caplog: pytest.LogCaptureFixture
) -> None:
    required = [Parameter(name="CONFIG_version", config_file="records.config", value="8")]

    failure = validator.find_failure(profile, required)

    assert failure is not None
    assert failure.actual is not None and failure.actual.value == "7"
    assert not failure.missing
    assert "Parameter CONFIG_version does not match value" in caplog.text
    assert "Actual Value: 7 Expected Value: 8" in caplog.text


def test_missing_parameter_fails(
    validator: ProfileValidator, profile: Profile, caplog: pytest.LogCaptureFixture
) -> None:
    required = [Parameter(name="CONFIG_missing", config_file="records.config", value="1")]

    failure = validator.find_failure(profile, required)

    assert failure is not None and failure.missing
    assert "not found" in caplog.text


def test_matching_is_exact_not_regex(validator: ProfileValidator, profile: Profile) -> None:
    required = [Parameter(name="CONFIG_.*", config_file="records.config", value="7")]
    assert validator.validate(profile, required) is False


def test_config_file_is_part_of_identity(validator: ProfileValidator, profile: Profile) -> None:
    required = [Parameter(name="location", config_file="storage.config", value="/opt/ts/etc")]
    assert validator.validate(profile, required) is False


def test_one_divergent_duplicate_fails(validator: ProfileValidator) -> None:
    profile = Profile(
        parameters=[
            Parameter(name="a", config_file="f", value="1"),
            Parameter(name="a", config_file="f", value="2"),
        ]
    )
    assert validator.validate(profile, [Parameter(name="a", config_file="f", value="1")]) is False


def test_short_circuits_on_first_failure(
    validator: ProfileValidator, profile: Profile, caplog: pytest.LogCaptureFixture
) -> None:
    required = [
        Parameter(name="location", config_file="cache.config", value="/other"),
        Parameter(name="CONFIG_version", config_file="records.config", value="8"),
    ]

    with caplog.at_level(logging.ERROR):
        failure = validator.find_failure(profile, required)

    assert failure is not None and failure.expected.name == "location"
    assert "CONFIG_version" not in caplog.text
    assert len(caplog.records) == 2
