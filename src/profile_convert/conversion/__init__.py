"""
Conversion package

Validates and rewrites an in-memory profile without performing any I/O.

Public helpers
--------------
ParameterMatcher   – regex match of a parameter against a rule
RuleApplier        – field replacement / deletion for a matched rule
ProfileValidator   – exact-match precondition check
ConversionEngine   – first-match-wins rewrite of all parameters
MetadataRewriter   – literal rename of profile name and description
"""

from __future__ import annotations

from .applier import RuleApplier
from .engine import ConversionEngine, ConversionSummary
from .matcher import ParameterMatcher
from .metadata import MetadataRewriter
from .validator import ProfileValidator, ValidationFailure

__all__ = [
    "ConversionEngine",
    "ConversionSummary",
    "MetadataRewriter",
    "ParameterMatcher",
    "ProfileValidator",
    "RuleApplier",
    "ValidationFailure",
]
