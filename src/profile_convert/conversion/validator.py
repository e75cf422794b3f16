"""Precondition check: the profile must carry the parameters the rules expect."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from profile_convert.models import Parameter, Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationFailure:
    """First required parameter the profile did not satisfy."""

    expected: Parameter
    actual: Parameter | None = None

    @property
    def missing(self) -> bool:
        return self.actual is None


class ProfileValidator:
    """
    Verify that every required parameter appears in the profile exactly.

    Matching is plain string equality on name and config file (no regex),
    followed by an exact value comparison. The scan stops at the first
    profile entry whose value diverges.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger.getChild(self.__class__.__name__)

    def find_failure(
        self, profile: Profile, required: Sequence[Parameter]
    ) -> ValidationFailure | None:
        """Return the first unsatisfied requirement, or None if all hold."""
        for expected in required:
            found = False

            for param in profile.parameters:
                if param.identity != expected.identity:
                    continue
                found = True

                if param.value != expected.value:
                    self._logger.error("Parameter %s does not match value", param.name)
                    self._logger.error(
                        "  Actual Value: %s Expected Value: %s",
                        param.value,
                        expected.value,
                    )
                    return ValidationFailure(expected=expected, actual=param)

            if not found:
                self._logger.error(
                    "Required parameter %s not found in profile", expected
                )
                return ValidationFailure(expected=expected)

        return None

    def validate(self, profile: Profile, required: Sequence[Parameter]) -> bool:
        return self.find_failure(profile, required) is None
