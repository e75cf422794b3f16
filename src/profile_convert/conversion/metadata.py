"""Literal rename of profile-level metadata."""

from __future__ import annotations

import logging

from profile_convert.models import ConversionPolicy, Profile

logger = logging.getLogger(__name__)


class MetadataRewriter:
    """Apply ``replace_name`` / ``replace_description`` to the profile header."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger.getChild(self.__class__.__name__)

    def rewrite(self, profile: Profile, policy: ConversionPolicy) -> None:
        desc = profile.description
        old_name = desc.name

        desc.name = policy.replace_name.apply(desc.name)
        desc.description = policy.replace_description.apply(desc.description)

        if desc.name != old_name:
            self._logger.info("Renamed profile %r to %r", old_name, desc.name)
