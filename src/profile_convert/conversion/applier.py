"""Application of a matched conversion rule to a single parameter."""

from __future__ import annotations

import logging

from profile_convert.models import ConversionRule, Parameter

logger = logging.getLogger(__name__)


class RuleApplier:
    """
    Produce the transformed parameter for a rule that already matched.

    Any non-empty ``new_*`` field of the rule replaces the corresponding
    field of the parameter. A ``delete`` action short-circuits and asks
    the caller to drop the parameter; any other action is reported and
    otherwise ignored.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger.getChild(self.__class__.__name__)

    def apply(self, rule: ConversionRule, param: Parameter) -> tuple[Parameter, bool]:
        """
        Apply ``rule`` to ``param``.

        Returns:
            ``(parameter, keep)``; ``keep`` is False when the parameter must
            be removed from the profile, in which case ``parameter`` is the
            unmodified input.
        """
        if rule.is_delete:
            self._logger.info("Deleting parameter %s", param)
            return param, False

        if rule.action:
            self._logger.warning("Unknown action %s, skipping action", rule.action)

        changes = {
            field: new
            for field, new in (
                ("name", rule.new_name),
                ("config_file", rule.new_config_file),
                ("value", rule.new_value),
            )
            if new
        }
        updated = param.model_copy(update=changes)

        self._logger.info("Updating parameter %s to %s", param, updated)
        return updated, True
