"""Regex matching of profile parameters against a rule's match criteria."""

from __future__ import annotations

import logging
import re

from profile_convert.models import Parameter

logger = logging.getLogger(__name__)


class ParameterMatcher:
    """
    Decide whether a parameter satisfies a rule's ``match_parameter``.

    Each field of the matcher is a regular expression that must be found
    somewhere in the candidate's field (``re.search``, not a full match).
    Compiled patterns are cached for the lifetime of the matcher. A pattern
    that does not compile is reported once and never matches.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger.getChild(self.__class__.__name__)
        self._patterns: dict[str, re.Pattern[str] | None] = {}

    def _compile(self, pattern: str, field: str) -> re.Pattern[str] | None:
        if pattern in self._patterns:
            return self._patterns[pattern]

        try:
            compiled: re.Pattern[str] | None = re.compile(pattern)
        except re.error as exc:
            self._logger.error(
                "Invalid %s pattern %r in conversion rule, treating as no match: %s",
                field,
                pattern,
                exc,
            )
            compiled = None

        self._patterns[pattern] = compiled
        return compiled

    def matches(
        self,
        matcher: Parameter,
        candidate: Parameter,
        ignore_value: bool = False,
    ) -> bool:
        """
        Return True when ``candidate`` fulfils every criterion in ``matcher``.

        Args:
            matcher: Parameter whose fields are regex patterns.
            candidate: Profile parameter under test.
            ignore_value: Skip the value pattern, matching on name and
                config file alone.
        """
        name_re = self._compile(matcher.name, "name")
        cfg_re = self._compile(matcher.config_file, "config_file")
        if name_re is None or cfg_re is None:
            return False

        if not (name_re.search(candidate.name) and cfg_re.search(candidate.config_file)):
            return False

        if ignore_value:
            return True

        value_re = self._compile(matcher.value, "value")
        if value_re is None:
            return False

        if value_re.search(candidate.value):
            return True

        self._logger.warning(
            "[ACTION REQUIRED] Found modified value. Skip modifying %s. "
            "Please update manually",
            candidate,
        )
        return False
