"""Rule-driven rewrite of every parameter in a profile."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from profile_convert.models import ConversionRule, Parameter, Profile

from .applier import RuleApplier
from .matcher import ParameterMatcher

logger = logging.getLogger(__name__)


@dataclass
class ConversionSummary:
    """Per-run counters reported once conversion finishes."""

    updated: int = 0
    deleted: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.updated + self.deleted + self.unchanged


class ConversionEngine:
    """
    Apply conversion rules to a profile's parameters.

    For each parameter, rules are scanned in policy order and the first one
    that matches is applied; later rules are never consulted for that
    parameter. Parameters without a matching rule pass through untouched
    and retained parameters keep their relative order.
    """

    def __init__(
        self,
        matcher: ParameterMatcher | None = None,
        applier: RuleApplier | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._logger = log or logger.getChild(self.__class__.__name__)
        self._matcher = matcher or ParameterMatcher(log=self._logger)
        self._applier = applier or RuleApplier(log=self._logger)

    def _first_match(
        self,
        param: Parameter,
        rules: Sequence[ConversionRule],
        ignore_value: bool,
    ) -> ConversionRule | None:
        for rule in rules:
            if self._matcher.matches(rule.match_parameter, param, ignore_value):
                return rule
        return None

    def convert(
        self,
        profile: Profile,
        rules: Sequence[ConversionRule],
        ignore_value: bool = False,
    ) -> ConversionSummary:
        """
        Rewrite ``profile.parameters`` in place according to ``rules``.

        Args:
            profile: Profile whose parameter list is replaced.
            rules: Conversion rules in priority order.
            ignore_value: Match on name and config file only.

        Returns:
            Counters of updated, deleted and unchanged parameters.
        """
        summary = ConversionSummary()
        converted: list[Parameter] = []

        for param in profile.parameters:
            rule = self._first_match(param, rules, ignore_value)
            if rule is None:
                converted.append(param)
                summary.unchanged += 1
                continue

            updated, keep = self._applier.apply(rule, param)
            if keep:
                converted.append(updated)
                summary.updated += 1
            else:
                summary.deleted += 1

        profile.parameters = converted
        self._logger.debug(
            "Converted %d parameter(s): %d updated, %d deleted, %d unchanged",
            summary.total,
            summary.updated,
            summary.deleted,
            summary.unchanged,
        )
        return summary
