"""
ConversionPipeline – high-level orchestration of one profile conversion.

Responsibilities
----------------
1.   Accept either filesystem paths or pre-built models for the profile
     and the conversion rules.
2.   Check the profile against the rules' required parameters.
3.   Rewrite the parameters, then the profile name and description.
4.   Surface all domain-specific exceptions unchanged so that callers
     can handle them in a single try/except.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .conversion import (
    ConversionEngine,
    ConversionSummary,
    MetadataRewriter,
    ProfileValidator,
)
from .exceptions import ProfileConvertError, ProfileValidationError
from .io import load_policy, load_profile
from .models import ConversionPolicy, Profile

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """End-to-end converter: profile + rules -> converted profile."""

    def __init__(
        self,
        profile: str | Path | Profile,
        policy: str | Path | ConversionPolicy,
        force: bool = False,
        log: logging.Logger | None = None,
    ) -> None:
        """
        Parameters
        ----------
        profile
            Path/str to the input profile or an in-memory `Profile`. The
            in-memory profile is copied, never modified.
        policy
            Path/str to the conversion rules or an in-memory `ConversionPolicy`.
        force
            Ignore parameter values when matching rules.
        log
            Logger receiving every diagnostic of the run.
        """
        self._logger = log or logger

        if isinstance(profile, (str, Path)):
            self._logger.debug("Loading profile: %s", profile)
            self._profile = load_profile(profile)
        elif isinstance(profile, Profile):
            self._profile = profile.model_copy(deep=True)
        else:
            raise ProfileConvertError("ConversionPipeline: profile must be Path | str | Profile")

        if isinstance(policy, (str, Path)):
            self._logger.debug("Loading conversion rules: %s", policy)
            self._policy = load_policy(policy)
        elif isinstance(policy, ConversionPolicy):
            self._policy = policy
        else:
            raise ProfileConvertError(
                "ConversionPipeline: policy must be Path | str | ConversionPolicy"
            )

        self._force = force
        self._validator = ProfileValidator(log=self._logger)
        self._engine = ConversionEngine(log=self._logger)
        self._rewriter = MetadataRewriter(log=self._logger)
        self.summary: ConversionSummary | None = None

    def run(self) -> Profile:
        """Return the converted `Profile` (raises on failure)."""
        failure = self._validator.find_failure(
            self._profile, self._policy.validate_parameters
        )
        if failure is not None:
            raise ProfileValidationError(
                "Failed to validate required parameters in profile",
                parameter=failure.expected.name,
                actual_value=failure.actual.value if failure.actual else None,
                expected_value=failure.expected.value,
            )

        self.summary = self._engine.convert(
            self._profile, self._policy.conversion_rules, ignore_value=self._force
        )
        self._rewriter.rewrite(self._profile, self._policy)

        self._logger.info(
            "Conversion succeeded – %d updated, %d deleted, %d unchanged parameter(s)",
            self.summary.updated,
            self.summary.deleted,
            self.summary.unchanged,
        )
        return self._profile
