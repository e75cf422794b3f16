"""
Package façade – a single import gives users everything they need:

    from profile_convert import convert_profile
    converted = convert_profile("edge.json", "rules.json")

Design
------
* Thin wrapper around ConversionPipeline (keeps public API tiny).
* Re-exports only what external callers should see.
"""

from __future__ import annotations

from pathlib import Path

from .conversion_pipeline import ConversionPipeline
from .models import ConversionPolicy, ConversionRule, Parameter, Profile

__all__ = [
    "ConversionPipeline",
    "ConversionPolicy",
    "ConversionRule",
    "Parameter",
    "Profile",
    "convert_profile",
]


def convert_profile(
    profile: str | Path | Profile,
    policy: str | Path | ConversionPolicy,
    *,
    force: bool = False,
) -> Profile:
    """
    Convenience helper that hides the internal pipeline machinery.

    Parameters
    ----------
    profile
        Path/str to a profile document or an already-built `Profile`.
    policy
        Path/str to a rule document or an already-built `ConversionPolicy`.
    force
        Forwarded to ConversionPipeline (default False).
    """
    return ConversionPipeline(profile, policy, force=force).run()
